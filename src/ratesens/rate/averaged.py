"""
Averaged Ibor rate.

The rate of the period is the weighted average of the index fixings
observed in each reset period. By default each fixing is weighted by the
accrual fraction of its reset period.
"""

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..conventions import BusinessDayConvention
from ..errors import MissingFixingError, RatesensError, ScheduleOrderError, require
from ..indices import Currency, IborIndex
from ..sensitivity.aggregation import PointSensitivities
from ..sensitivity.point import PointSensitivity
from .reset import ResetPeriod, generate_reset_periods


@dataclass(frozen=True)
class AveragedIborRate:
    """
    Weighted average of Ibor fixings over a set of reset periods.

    Attributes:
        index: Ibor index observed in every reset period
        reset_periods: Reset periods in chronological order of start date
        weights: Weight of each reset period; accrual fractions when omitted
    """
    index: IborIndex
    reset_periods: Tuple[ResetPeriod, ...]
    weights: Optional[Tuple[float, ...]] = None

    def __post_init__(self):
        require(self.index, "index", "AveragedIborRate")
        periods = tuple(require(self.reset_periods, "reset_periods", "AveragedIborRate"))
        if not periods:
            raise RatesensError("AveragedIborRate requires at least one reset period")
        for previous, current in zip(periods[:-1], periods[1:]):
            if current.start_date < previous.start_date:
                raise ScheduleOrderError(
                    f"Reset periods out of order: {current.start_date} after {previous.start_date}"
                )
        object.__setattr__(self, "reset_periods", periods)

        if self.weights is None:
            weights = tuple(p.year_fraction(self.index.day_count) for p in periods)
        else:
            weights = tuple(float(w) for w in self.weights)
            if len(weights) != len(periods):
                raise RatesensError(
                    f"Expected {len(periods)} weights, got {len(weights)}"
                )
        if sum(weights) <= 0:
            raise RatesensError("Reset period weights must sum to a positive value")
        object.__setattr__(self, "weights", weights)

    @classmethod
    def of(
        cls,
        index: IborIndex,
        reset_periods: Sequence[ResetPeriod],
        weights: Optional[Sequence[float]] = None
    ) -> "AveragedIborRate":
        """Create an averaged rate from explicit reset periods."""
        return cls(index, tuple(reset_periods), None if weights is None else tuple(weights))

    @classmethod
    def from_schedule(
        cls,
        index: IborIndex,
        start: date,
        end: date,
        reset_tenor: str,
        convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING,
        holidays: Optional[set] = None
    ) -> "AveragedIborRate":
        """
        Create an averaged rate resetting every reset_tenor between start and end.

        Fixings lag period starts by the fixing offset of the index.
        """
        periods = generate_reset_periods(
            start, end, reset_tenor,
            fixing_offset_days=index.fixing_offset_days,
            convention=convention,
            holidays=holidays
        )
        return cls(index, tuple(periods))

    @property
    def fixing_dates(self) -> Tuple[date, ...]:
        """Fixing date of every reset period."""
        return tuple(p.fixing_date for p in self.reset_periods)

    def normalized_weights(self) -> np.ndarray:
        """Weights scaled to sum to one."""
        w = np.array(self.weights, dtype=float)
        return w / w.sum()

    def rate(self, fixings: Mapping[date, float]) -> float:
        """
        Averaged rate from observed fixings.

        Args:
            fixings: Index fixing by fixing date

        Returns:
            Weighted average of the fixings

        Raises:
            MissingFixingError: If a fixing date has no observation
        """
        observed = []
        for fixing_date in self.fixing_dates:
            if fixing_date not in fixings:
                raise MissingFixingError(f"No fixing for {self.index} on {fixing_date}")
            observed.append(fixings[fixing_date])
        return float(np.dot(self.normalized_weights(), np.array(observed, dtype=float)))

    def fixing_sensitivities(
        self,
        currency: Optional[Union[Currency, str]] = None,
        amount: float = 1.0
    ) -> PointSensitivities:
        """
        Sensitivity of amount * rate to each fixing.

        Periods sharing a fixing date are merged.

        Args:
            currency: Currency of the sensitivities (default: index currency)
            amount: Scaling applied to the rate, e.g. notional times accrual

        Returns:
            Normalized IBOR_RATE point sensitivities
        """
        shares = self.normalized_weights() * amount
        return PointSensitivities.of(
            PointSensitivity.ibor_rate(self.index, p.fixing_date, float(share), currency)
            for p, share in zip(self.reset_periods, shares)
        ).normalized()


__all__ = [
    "AveragedIborRate",
]
