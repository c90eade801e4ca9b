"""
Reset periods of an averaged Ibor rate.

An averaged rate observes its index once per reset period. Each period is
described by three business-day adjusted dates: the start and end of the
period and the fixing date on which the index is observed.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..config import get_config
from ..conventions import (
    BusinessDayConvention,
    DayCount,
    add_business_days,
    adjust_business_day,
    year_fraction,
)
from ..dates import DateUtils
from ..errors import ScheduleOrderError, require

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResetPeriod:
    """
    A period over which an index is observed by an averaged rate.

    The end date bounds both other dates: the start must be strictly before
    it and so must the fixing. The fixing may fall before the start.

    Attributes:
        start_date: Adjusted start of the reset period
        end_date: Adjusted end of the reset period
        fixing_date: Adjusted date the index is fixed for this period
    """
    start_date: date
    end_date: date
    fixing_date: date

    def __post_init__(self):
        require(self.start_date, "start_date", "ResetPeriod")
        require(self.end_date, "end_date", "ResetPeriod")
        require(self.fixing_date, "fixing_date", "ResetPeriod")
        if self.start_date >= self.end_date:
            raise ScheduleOrderError(
                f"Start date {self.start_date} must be before end date {self.end_date}"
            )
        if self.fixing_date >= self.end_date:
            raise ScheduleOrderError(
                f"Fixing date {self.fixing_date} must be before end date {self.end_date}"
            )

    @classmethod
    def of(cls, start_date: date, end_date: date, fixing_date: date) -> "ResetPeriod":
        """Create a reset period from the start, end and fixing dates."""
        return cls(start_date, end_date, fixing_date)

    def year_fraction(self, day_count: DayCount = DayCount.ACT_360) -> float:
        """Accrual fraction between start and end."""
        return year_fraction(self.start_date, self.end_date, day_count)


def generate_reset_periods(
    start: date,
    end: date,
    reset_tenor: str,
    fixing_offset_days: Optional[int] = None,
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
    holidays: Optional[set] = None
) -> List[ResetPeriod]:
    """
    Generate consecutive reset periods between two dates.

    Periods roll forward from the unadjusted start by the reset tenor; the
    final period is cut short at end. Boundaries are adjusted with the
    business day convention and each fixing is set a number of business
    days before its period start.

    Args:
        start: Unadjusted start of the first reset period
        end: Unadjusted end of the last reset period
        reset_tenor: Length of each period, e.g. "1M"
        fixing_offset_days: Fixing lag in business days (default from config)
        convention: Business day adjustment for period boundaries
        holidays: Optional holiday calendar

    Returns:
        List of ResetPeriod in chronological order

    Raises:
        ScheduleOrderError: If start is not before end
    """
    if start >= end:
        raise ScheduleOrderError(f"Schedule start {start} must be before end {end}")
    if fixing_offset_days is None:
        fixing_offset_days = get_config().fixing_offset_days

    boundaries = [start]
    step = 1
    while boundaries[-1] < end:
        # Roll from the unadjusted start so month ends do not drift
        next_date = DateUtils.add_tenor(start, _scale_tenor(reset_tenor, step), holidays)
        boundaries.append(min(next_date, end))
        step += 1

    adjusted = [adjust_business_day(d, convention, holidays) for d in boundaries]

    periods = []
    for period_start, period_end in zip(adjusted[:-1], adjusted[1:]):
        if period_start >= period_end:
            # Short stub collapsed by the adjustment; fold it into the previous period
            continue
        fixing = add_business_days(period_start, -fixing_offset_days, holidays)
        periods.append(ResetPeriod.of(period_start, period_end, fixing))

    if not periods:
        raise ScheduleOrderError(
            f"Adjusted schedule {adjusted[0]} -> {adjusted[-1]} contains no reset period"
        )
    if adjusted[-1] != periods[-1].end_date:
        last = periods.pop()
        periods.append(ResetPeriod.of(last.start_date, adjusted[-1], last.fixing_date))

    logger.debug(f"Generated {len(periods)} reset periods {start} -> {end} every {reset_tenor}")
    return periods


def _scale_tenor(tenor: str, multiple: int) -> str:
    amount, unit = DateUtils.parse_tenor(tenor)
    if amount == 0:
        raise ValueError(f"Reset tenor must be positive: {tenor}")
    return f"{amount * multiple}{unit}"


__all__ = [
    "ResetPeriod",
    "generate_reset_periods",
]
