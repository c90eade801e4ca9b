"""
Day count conventions and business day adjustments.

Supported Day Counts:
- ACT/360: Actual days / 360 (USD and EUR Ibor indices)
- ACT/365: Actual days / 365 (GBP indices)
- ACT/ACT: Actual days / actual days in year
- 30/360: 30 days per month / 360

Business Day Conventions:
- Modified Following: Move to next business day, unless it falls in next month (then previous)
- Following: Move to next business day
- Preceding: Move to previous business day
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional
import calendar


class DayCount(Enum):
    """Day count convention enumeration."""
    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365"
    ACT_ACT = "ACT/ACT"
    THIRTY_360 = "30/360"

    @classmethod
    def from_string(cls, s: str) -> "DayCount":
        """Parse day count from string representation."""
        key = s.upper().replace(" ", "").replace("/", "")
        for member in cls:
            if member.value.replace("/", "") == key:
                return member
        raise ValueError(f"Unknown day count convention: {s}")


class BusinessDayConvention(Enum):
    """Business day adjustment convention."""
    MODIFIED_FOLLOWING = "ModifiedFollowing"
    FOLLOWING = "Following"
    PRECEDING = "Preceding"
    UNADJUSTED = "Unadjusted"


def year_fraction(start: date, end: date, day_count: DayCount) -> float:
    """
    Calculate year fraction between two dates using specified day count convention.

    Args:
        start: Start date
        end: End date
        day_count: Day count convention

    Returns:
        Year fraction as float, 0.0 when end is not after start
    """
    if start >= end:
        return 0.0

    actual_days = (end - start).days

    if day_count == DayCount.ACT_360:
        return actual_days / 360.0

    elif day_count == DayCount.ACT_365:
        return actual_days / 365.0

    elif day_count == DayCount.ACT_ACT:
        # ISDA: split at year boundaries
        total = 0.0
        current = start
        while current < end:
            next_year = date(current.year + 1, 1, 1)
            period_end = min(next_year, end)
            days_in_year = 366 if calendar.isleap(current.year) else 365
            total += (period_end - current).days / days_in_year
            current = period_end
        return total

    elif day_count == DayCount.THIRTY_360:
        # 30/360 US convention
        d1 = min(start.day, 30)
        d2 = end.day
        if end.day == 31 and d1 == 30:
            d2 = 30
        return (360 * (end.year - start.year) + 30 * (end.month - start.month) + (d2 - d1)) / 360.0

    raise ValueError(f"Unknown day count: {day_count}")


def is_business_day(d: date, holidays: Optional[set] = None) -> bool:
    """
    Check if a date is a business day.

    Uses weekend-only calendar by default (Saturday/Sunday are non-business days).
    """
    if d.weekday() >= 5:
        return False

    if holidays and d in holidays:
        return False

    return True


def adjust_business_day(
    d: date,
    convention: BusinessDayConvention,
    holidays: Optional[set] = None
) -> date:
    """
    Adjust a date according to business day convention.

    Args:
        d: Date to adjust
        convention: Business day adjustment rule
        holidays: Optional set of holiday dates

    Returns:
        Adjusted date
    """
    if convention == BusinessDayConvention.UNADJUSTED or is_business_day(d, holidays):
        return d

    if convention == BusinessDayConvention.PRECEDING:
        return _roll(d, -1, holidays)

    following = _roll(d, 1, holidays)
    if convention == BusinessDayConvention.FOLLOWING:
        return following

    # Modified following: stay in the same month
    if following.month != d.month:
        return _roll(d, -1, holidays)
    return following


def add_business_days(d: date, days: int, holidays: Optional[set] = None) -> date:
    """
    Move a date by a number of business days.

    Negative values move backwards. Zero returns the date unchanged, even
    when it is not a business day.
    """
    step = 1 if days >= 0 else -1
    result = d
    moved = 0
    while moved < abs(days):
        result += timedelta(days=step)
        if is_business_day(result, holidays):
            moved += 1
    return result


def _roll(d: date, step: int, holidays: Optional[set]) -> date:
    adjusted = d
    while not is_business_day(adjusted, holidays):
        adjusted += timedelta(days=step)
    return adjusted


__all__ = [
    "DayCount",
    "BusinessDayConvention",
    "year_fraction",
    "is_business_day",
    "adjust_business_day",
    "add_business_days",
]
