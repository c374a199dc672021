"""
발주 주기 도메인

Usage:
    from restock.domain.cycle import MILK_WEEKLY, resolve_next_cycle
"""

from restock.domain.cycle.cycle_rules import (  # noqa: F401
    CycleRule,
    MonthlyNthWeekdayRule,
    WeeklyCycleRule,
    get_nth_friday,
    get_nth_weekday,
)
from restock.domain.cycle.cycle_resolver import (  # noqa: F401
    CyclePlan,
    NextOrderStatus,
    ResolvedCycle,
    describe_next_order,
    resolve_next_cycle,
)
from restock.domain.cycle.schedules import (  # noqa: F401
    ICE_CREAM_MONTHLY,
    MILK_WEEKLY,
    SCHEDULES,
    Schedule,
    get_schedule,
)
