"""
Rate package - reset schedules of averaged floating rates.

Provides:
- Validated reset periods (start, end, fixing)
- Reset schedule generation
- Averaged Ibor rate and its fixing sensitivities
"""

from .reset import (
    ResetPeriod,
    generate_reset_periods,
)
from .averaged import AveragedIborRate

__all__ = [
    "ResetPeriod",
    "generate_reset_periods",
    "AveragedIborRate",
]
