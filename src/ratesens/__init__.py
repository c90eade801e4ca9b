"""
RateSens: Point Sensitivity & Reset Schedule Library

A modular library for:
- Representing point sensitivities of a value to rate curve risk factors
- Ordering and aggregating sensitivities into a canonical vector
- Validated reset periods and averaged Ibor rates
- Sensitivity reporting (tables, key-rate buckets, CSV export)

Scope: curve construction, interpolation and full valuation are external.
"""

__version__ = "0.1.0"

# Core modules
from .errors import (
    RatesensError,
    MissingFieldError,
    ScheduleOrderError,
    MissingFixingError,
)
from .config import SensitivityConfig, get_config, load_config
from .conventions import DayCount, BusinessDayConvention, year_fraction
from .dates import DateUtils
from .indices import (
    Currency,
    IborIndex,
    OvernightIndex,
    USD,
    EUR,
    GBP,
    USD_LIBOR_3M,
    EUR_EURIBOR_3M,
)

# Reset schedules
from .rate import ResetPeriod, generate_reset_periods, AveragedIborRate

# Sensitivities
from .sensitivity import (
    SensitivityKey,
    IndexCurrencySensitivityKey,
    SensitivityKind,
    PointSensitivity,
    SensitivityAggregator,
    aggregate,
    PointSensitivities,
    CurveRateIndexFilter,
)

# Reporting
from .reporting import (
    RiskReport,
    ReportFormatter,
    build_sensitivity_report,
    export_to_csv,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "RatesensError",
    "MissingFieldError",
    "ScheduleOrderError",
    "MissingFixingError",
    # Config
    "SensitivityConfig",
    "get_config",
    "load_config",
    # Conventions
    "DayCount",
    "BusinessDayConvention",
    "year_fraction",
    # Dates
    "DateUtils",
    # Indices
    "Currency",
    "IborIndex",
    "OvernightIndex",
    "USD",
    "EUR",
    "GBP",
    "USD_LIBOR_3M",
    "EUR_EURIBOR_3M",
    # Reset schedules
    "ResetPeriod",
    "generate_reset_periods",
    "AveragedIborRate",
    # Sensitivities
    "SensitivityKey",
    "IndexCurrencySensitivityKey",
    "SensitivityKind",
    "PointSensitivity",
    "SensitivityAggregator",
    "aggregate",
    "PointSensitivities",
    "CurveRateIndexFilter",
    # Reporting
    "RiskReport",
    "ReportFormatter",
    "build_sensitivity_report",
    "export_to_csv",
]
