"""
수요 도메인 -- 구간 분할 + 수요 모델

Usage:
    from restock.domain.demand import DemandProfile, split_demand_window
"""

from restock.domain.demand.coverage import DemandWindow, split_demand_window  # noqa: F401
from restock.domain.demand.demand_model import (  # noqa: F401
    DemandModel,
    DemandProfile,
    UniformDemandModel,
    WeekdayHolidayDemandModel,
    demand_model_for,
)
