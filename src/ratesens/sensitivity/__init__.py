"""
Sensitivity package - point sensitivities and their aggregation.

Provides:
- Point sensitivities to Ibor, overnight and discount curves
- Value-independent ordering of sensitivities
- Aggregation into a canonical sensitivity vector
- Curve-level keys and index filters
"""

from .keys import (
    SensitivityKey,
    IndexCurrencySensitivityKey,
)
from .point import (
    SensitivityKind,
    PointSensitivity,
)
from .aggregation import (
    SensitivityAggregator,
    aggregate,
    PointSensitivities,
)
from .filters import CurveRateIndexFilter

__all__ = [
    "SensitivityKey",
    "IndexCurrencySensitivityKey",
    "SensitivityKind",
    "PointSensitivity",
    "SensitivityAggregator",
    "aggregate",
    "PointSensitivities",
    "CurveRateIndexFilter",
]
