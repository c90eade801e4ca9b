"""
Filters selecting sensitivities or curve identifiers by rate index.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import require
from .point import PointSensitivity


@dataclass(frozen=True)
class CurveRateIndexFilter:
    """
    Matches the curve of a rate index.

    Accepts point sensitivities (matched on their curve key), objects
    exposing an ``index`` attribute, or a bare index.

    Attributes:
        index: The rate index to match
    """
    index: Any

    def __post_init__(self):
        require(self.index, "index", "CurveRateIndexFilter")

    @classmethod
    def of(cls, index: Any) -> "CurveRateIndexFilter":
        """Filter matching the curve of the given index."""
        return cls(index)

    def apply(self, item: Any) -> bool:
        """True if item refers to the curve of the filter index."""
        if isinstance(item, PointSensitivity):
            candidate = item.curve_key()
        else:
            candidate = getattr(item, "index", item)
        return candidate == self.index

    def __call__(self, item: Any) -> bool:
        return self.apply(item)


__all__ = [
    "CurveRateIndexFilter",
]
