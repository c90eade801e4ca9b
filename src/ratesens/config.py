"""
Frozen configuration for sensitivity handling and reporting.

Settings are immutable; environment variables override the defaults when
the configuration is loaded:

- RATESENS_ZERO_THRESHOLD: absolute value below which an aggregated
  sensitivity is treated as zero by ``PointSensitivities.without_zeros``
- RATESENS_FIXING_OFFSET_DAYS: business days between fixing and reset start
- RATESENS_REPORT_PRECISION: decimals used by the console report formatter
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


# Standard USD key rate tenors
DEFAULT_KEY_RATE_TENORS: Tuple[str, ...] = (
    "3M", "6M", "1Y", "2Y", "3Y", "5Y", "7Y", "10Y", "15Y", "20Y", "30Y"
)


@dataclass(frozen=True)
class SensitivityConfig:
    """
    Immutable settings.

    Attributes:
        zero_threshold: Sensitivities with abs value <= threshold are dropped
            by ``without_zeros`` when no explicit threshold is given
        fixing_offset_days: Default fixing lag for generated reset periods
        report_precision: Decimal places in formatted reports
        key_rate_tenors: Buckets used by tenor bucketing in reports
    """
    zero_threshold: float = 0.0
    fixing_offset_days: int = 2
    report_precision: int = 2
    key_rate_tenors: Tuple[str, ...] = field(default=DEFAULT_KEY_RATE_TENORS)

    def __post_init__(self) -> None:
        if self.zero_threshold < 0:
            raise ValueError(f"zero_threshold must be non-negative, got {self.zero_threshold}")
        if self.fixing_offset_days < 0:
            raise ValueError(f"fixing_offset_days must be non-negative, got {self.fixing_offset_days}")
        if not self.key_rate_tenors:
            raise ValueError("key_rate_tenors must not be empty")


def _env_value(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def load_config() -> SensitivityConfig:
    """Build a configuration from defaults and environment overrides."""
    defaults = SensitivityConfig()
    return SensitivityConfig(
        zero_threshold=_env_value("RATESENS_ZERO_THRESHOLD", float, defaults.zero_threshold),
        fixing_offset_days=_env_value("RATESENS_FIXING_OFFSET_DAYS", int, defaults.fixing_offset_days),
        report_precision=_env_value("RATESENS_REPORT_PRECISION", int, defaults.report_precision),
    )


_CONFIG: Optional[SensitivityConfig] = None


def get_config() -> SensitivityConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _CONFIG
    _CONFIG = None


__all__ = [
    "DEFAULT_KEY_RATE_TENORS",
    "SensitivityConfig",
    "load_config",
    "get_config",
    "reset_config",
]
