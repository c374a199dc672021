"""추천 수량 도메인"""

from restock.domain.quantity.recommender import (  # noqa: F401
    QuantityDecision,
    classify_urgency,
    recommend_quantity,
)
from restock.domain.quantity.result import (  # noqa: F401
    BatchRecommendation,
    RecommendationResult,
)
