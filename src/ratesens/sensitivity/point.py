"""
Point sensitivities to curve risk factors.

A point sensitivity is the derivative of a value with respect to one point
of one curve: the curve (risk factor), the currency of the sensitivity and
the date looked up on the curve. The kind tag says which sort of curve
point was bumped:

- IBOR_RATE: forward rate of an Ibor index at a fixing date
- OVERNIGHT_RATE: overnight index rate at a fixing date
- ZERO_RATE: zero rate of the discount curve of a currency at a date

Sensitivities are ordered independently of their value so that duplicates
coming from different legs can be merged in a single pass.
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, Optional, Tuple, Union

from ..errors import require
from ..indices import Currency
from .keys import SensitivityKey


class SensitivityKind(Enum):
    """Kind of curve point a sensitivity refers to."""
    IBOR_RATE = "IborRate"
    OVERNIGHT_RATE = "OvernightRate"
    ZERO_RATE = "ZeroRate"


def _compare(a, b) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class PointSensitivity:
    """
    Sensitivity of a value to a single curve point.

    Attributes:
        kind: Kind of curve point
        risk_factor: Curve identifier, compared through its string form
        currency: Currency of the sensitivity
        date: Date looked up on the curve (fixing date for index curves)
        sensitivity: Value of the sensitivity, any sign
    """
    kind: SensitivityKind
    risk_factor: Any
    currency: Currency
    date: date
    sensitivity: float

    def __post_init__(self):
        owner = type(self).__name__
        require(self.kind, "kind", owner)
        require(self.risk_factor, "risk_factor", owner)
        require(self.date, "date", owner)
        require(self.sensitivity, "sensitivity", owner)
        object.__setattr__(self, "kind", SensitivityKind(self.kind))
        object.__setattr__(self, "currency", Currency.of(require(self.currency, "currency", owner)))
        object.__setattr__(self, "sensitivity", float(self.sensitivity))

    # Factories per kind

    @classmethod
    def ibor_rate(
        cls,
        index: Any,
        fixing_date: date,
        sensitivity: float,
        currency: Optional[Union[Currency, str]] = None
    ) -> "PointSensitivity":
        """
        Sensitivity to an Ibor index curve at a fixing date.

        The currency defaults to the currency of the index.
        """
        if currency is None:
            currency = getattr(index, "currency", None)
        return cls(SensitivityKind.IBOR_RATE, index, currency, fixing_date, sensitivity)

    @classmethod
    def overnight_rate(
        cls,
        index: Any,
        fixing_date: date,
        sensitivity: float,
        currency: Optional[Union[Currency, str]] = None
    ) -> "PointSensitivity":
        """Sensitivity to an overnight index curve at a fixing date."""
        if currency is None:
            currency = getattr(index, "currency", None)
        return cls(SensitivityKind.OVERNIGHT_RATE, index, currency, fixing_date, sensitivity)

    @classmethod
    def zero_rate(
        cls,
        curve_currency: Union[Currency, str],
        curve_date: date,
        sensitivity: float,
        currency: Optional[Union[Currency, str]] = None
    ) -> "PointSensitivity":
        """
        Sensitivity to the discount curve of a currency.

        The discount curve is identified by its currency; the sensitivity
        currency defaults to it.
        """
        curve_currency = Currency.of(require(curve_currency, "curve_currency", cls.__name__))
        if currency is None:
            currency = curve_currency
        return cls(SensitivityKind.ZERO_RATE, curve_currency, currency, curve_date, sensitivity)

    # Contract

    def curve_key(self) -> Any:
        """The risk factor identifying the curve."""
        return self.risk_factor

    def key(self) -> SensitivityKey:
        """Identity of this sensitivity without kind and value."""
        return SensitivityKey(self.risk_factor, self.currency, self.date)

    def sort_key(self) -> Tuple[str, str, date, str]:
        """
        Total ordering key, value excluded.

        Agrees with compare_excluding_value whenever that is non-zero and
        breaks the remaining cross-kind ties by kind.
        """
        return (str(self.risk_factor), self.currency.code, self.date, self.kind.value)

    def with_value(self, value: float) -> "PointSensitivity":
        """Copy of this sensitivity with a different value."""
        return replace(self, sensitivity=value)

    def multiplied_by(self, factor: float) -> "PointSensitivity":
        """Copy of this sensitivity with the value scaled by factor."""
        return self.with_value(self.sensitivity * factor)

    def compare_excluding_value(self, other: "PointSensitivity") -> int:
        """
        Compare with another sensitivity ignoring the values.

        Same kind: risk factor string, then currency code, then date.
        Different kind: risk factor string only.

        Returns:
            Negative, zero or positive as self sorts before, with or after other
        """
        if other.kind is self.kind:
            return _compare(
                (str(self.risk_factor), self.currency.code, self.date),
                (str(other.risk_factor), other.currency.code, other.date),
            )
        return _compare(str(self.risk_factor), str(other.curve_key()))

    def __str__(self) -> str:
        return (f"{self.kind.value}Sensitivity[{self.risk_factor}, {self.currency}, "
                f"{self.date.isoformat()}, {self.sensitivity}]")


__all__ = [
    "SensitivityKind",
    "PointSensitivity",
]
