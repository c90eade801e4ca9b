"""
Grouping keys for point sensitivities.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Union

from ..errors import require
from ..indices import Currency


@dataclass(frozen=True)
class SensitivityKey:
    """
    Identity of a point sensitivity, excluding its kind and value.

    Attributes:
        risk_factor: Curve the sensitivity refers to, usually a rate index
        currency: Currency of the sensitivity
        date: Date looked up on the curve
    """
    risk_factor: Any
    currency: Currency
    date: date

    def __post_init__(self):
        require(self.risk_factor, "risk_factor", "SensitivityKey")
        require(self.date, "date", "SensitivityKey")
        object.__setattr__(self, "currency", Currency.of(require(self.currency, "currency", "SensitivityKey")))


@dataclass(frozen=True)
class IndexCurrencySensitivityKey:
    """
    Curve-level key: all sensitivities to one index in one currency.

    Attributes:
        index: Curve key of the sensitivity (a rate index, or the currency
            of a discount curve)
        currency: Currency of the sensitivity
    """
    index: Any
    currency: Currency

    def __post_init__(self):
        require(self.index, "index", "IndexCurrencySensitivityKey")
        object.__setattr__(
            self, "currency", Currency.of(require(self.currency, "currency", "IndexCurrencySensitivityKey"))
        )

    @classmethod
    def of(cls, index: Any, currency: Union[Currency, str]) -> "IndexCurrencySensitivityKey":
        """Create a key from an index and a currency."""
        return cls(index, currency)


__all__ = [
    "SensitivityKey",
    "IndexCurrencySensitivityKey",
]
