"""
Aggregation of point sensitivities.

Sensitivities sharing kind, risk factor, currency and date are merged by
summing their values. The result is sorted by the value-independent order
of PointSensitivity, so aggregating partial results again yields the same
vector as aggregating everything at once.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..config import get_config
from .keys import IndexCurrencySensitivityKey
from .point import PointSensitivity

logger = logging.getLogger(__name__)


class SensitivityAggregator:
    """
    Merges point sensitivities into a canonical sensitivity vector.

    Stateless; one instance can be shared freely.
    """

    def aggregate(self, items: Iterable[PointSensitivity]) -> List[PointSensitivity]:
        """
        Group sensitivities by identity and sum each group.

        Values are summed left to right in input order. A group with a
        single member is passed through as-is.

        Args:
            items: Point sensitivities in any order

        Returns:
            One sensitivity per distinct (kind, risk factor, currency, date),
            sorted ascending
        """
        groups: Dict[Tuple, List[PointSensitivity]] = {}
        count = 0
        for item in items:
            groups.setdefault(item.sort_key(), []).append(item)
            count += 1

        merged = []
        for members in groups.values():
            if len(members) == 1:
                merged.append(members[0])
                continue
            total = members[0].sensitivity
            for member in members[1:]:
                total += member.sensitivity
            merged.append(members[0].with_value(total))

        merged.sort(key=PointSensitivity.sort_key)
        logger.debug(f"Aggregated {count} point sensitivities into {len(merged)}")
        return merged


_AGGREGATOR = SensitivityAggregator()


def aggregate(items: Iterable[PointSensitivity]) -> List[PointSensitivity]:
    """Aggregate point sensitivities with the shared aggregator."""
    return _AGGREGATOR.aggregate(items)


@dataclass(frozen=True)
class PointSensitivities:
    """
    Immutable collection of point sensitivities.

    Attributes:
        sensitivities: The sensitivities, in the order they were added
    """
    sensitivities: Tuple[PointSensitivity, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "sensitivities", tuple(self.sensitivities))

    @classmethod
    def of(cls, items: Iterable[PointSensitivity]) -> "PointSensitivities":
        """Create a collection from any iterable of sensitivities."""
        return cls(tuple(items))

    @classmethod
    def empty(cls) -> "PointSensitivities":
        """An empty collection."""
        return cls()

    def __iter__(self) -> Iterator[PointSensitivity]:
        return iter(self.sensitivities)

    def __len__(self) -> int:
        return len(self.sensitivities)

    def combined_with(self, other: Iterable[PointSensitivity]) -> "PointSensitivities":
        """Concatenate with other sensitivities, without merging."""
        return PointSensitivities(self.sensitivities + tuple(other))

    def multiplied_by(self, factor: float) -> "PointSensitivities":
        """Scale every value by factor."""
        return PointSensitivities(tuple(s.multiplied_by(factor) for s in self.sensitivities))

    def normalized(self) -> "PointSensitivities":
        """Merge duplicates and sort."""
        return PointSensitivities(tuple(aggregate(self.sensitivities)))

    def filtered(self, predicate: Callable[[PointSensitivity], bool]) -> "PointSensitivities":
        """Keep only the sensitivities accepted by predicate, e.g. a CurveRateIndexFilter."""
        return PointSensitivities(tuple(s for s in self.sensitivities if predicate(s)))

    def without_zeros(self, threshold: Optional[float] = None) -> "PointSensitivities":
        """
        Normalize, then drop sensitivities whose absolute value is at most threshold.

        Args:
            threshold: Zero tolerance (default from config)
        """
        if threshold is None:
            threshold = get_config().zero_threshold
        return PointSensitivities(
            tuple(s for s in aggregate(self.sensitivities) if abs(s.sensitivity) > threshold)
        )

    def total(self) -> float:
        """Sum of all values, regardless of curve or currency."""
        return sum(s.sensitivity for s in self.sensitivities)

    def total_by_curve(self) -> Dict[IndexCurrencySensitivityKey, float]:
        """Sum of values per (curve key, currency), in first-seen order."""
        totals: Dict[IndexCurrencySensitivityKey, float] = {}
        for s in self.sensitivities:
            key = IndexCurrencySensitivityKey.of(s.curve_key(), s.currency)
            totals[key] = totals.get(key, 0.0) + s.sensitivity
        return totals

    def to_frame(self):
        """Tabular view for reporting, see reporting.sensitivities_to_frame."""
        from ..reporting.sensitivity_report import sensitivities_to_frame
        return sensitivities_to_frame(self.sensitivities)


__all__ = [
    "SensitivityAggregator",
    "aggregate",
    "PointSensitivities",
]
