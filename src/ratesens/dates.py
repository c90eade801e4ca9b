"""
Date utilities for rates calculations.

Provides:
- Tenor parsing and date arithmetic
- Tenor to year-fraction conversion for key-rate bucketing
"""

from datetime import date, timedelta
from typing import Optional, Tuple
import calendar
import re

from .conventions import add_business_days


class DateUtils:
    """Utility class for date manipulation in rates contexts."""

    # Tenor regex pattern: number + unit (D/W/M/Y)
    TENOR_PATTERN = re.compile(r'^(\d+)([DWMY])$', re.IGNORECASE)

    @staticmethod
    def parse_tenor(tenor: str) -> Tuple[int, str]:
        """
        Parse a tenor string into (amount, unit).

        Args:
            tenor: Tenor string like "1D", "3M", "2Y"

        Returns:
            Tuple of (amount, unit) where unit is D/W/M/Y

        Raises:
            ValueError: If tenor format is invalid
        """
        match = DateUtils.TENOR_PATTERN.match(tenor.upper().strip())
        if not match:
            raise ValueError(f"Invalid tenor format: {tenor}. Expected format like '3M', '2Y'")

        return int(match.group(1)), match.group(2).upper()

    @staticmethod
    def add_tenor(start: date, tenor: str, holidays: Optional[set] = None) -> date:
        """
        Add a tenor to a date.

        Day tenors count business days; month and year tenors keep the day
        of month, clipped to the month end.
        """
        amount, unit = DateUtils.parse_tenor(tenor)

        if unit == 'D':
            return add_business_days(start, amount, holidays)

        if unit == 'W':
            return start + timedelta(weeks=amount)

        if unit == 'Y':
            amount, unit = amount * 12, 'M'

        year = start.year + (start.month + amount - 1) // 12
        month = (start.month + amount - 1) % 12 + 1
        day = min(start.day, calendar.monthrange(year, month)[1])
        return date(year, month, day)

    @staticmethod
    def tenor_to_years(tenor: str) -> float:
        """Convert tenor to approximate year fraction."""
        amount, unit = DateUtils.parse_tenor(tenor)

        if unit == 'D':
            return amount / 365.0
        elif unit == 'W':
            return amount * 7 / 365.0
        elif unit == 'M':
            return amount / 12.0
        return float(amount)


__all__ = [
    "DateUtils",
]
