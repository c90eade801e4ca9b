"""
Currencies and floating rate indices.

A rate index is the usual risk factor of a point sensitivity. The library
only relies on its string form for ordering, so any object with a stable
``str()`` can act as a risk factor; the classes here are the standard ones.
"""

from dataclasses import dataclass, field
from typing import Union
import re

from .conventions import DayCount
from .errors import RatesensError, require


_ISO_CODE = re.compile(r'^[A-Z]{3}$')


@dataclass(frozen=True, order=True)
class Currency:
    """
    ISO-4217 currency, ordered by its three-letter code.

    Attributes:
        code: Upper case ISO code, e.g. "USD"
    """
    code: str

    def __post_init__(self):
        require(self.code, "code", "Currency")
        if not _ISO_CODE.match(self.code):
            raise RatesensError(f"Invalid currency code: {self.code!r}")

    @classmethod
    def of(cls, value: Union["Currency", str]) -> "Currency":
        """Return a Currency from an instance or an ISO code string."""
        if isinstance(value, Currency):
            return value
        return cls(str(value).strip().upper())

    def __str__(self) -> str:
        return self.code


USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")
JPY = Currency("JPY")
CHF = Currency("CHF")


@dataclass(frozen=True)
class IborIndex:
    """
    Term rate index such as USD-LIBOR-3M.

    Attributes:
        name: Display name, also the string form used for ordering
        currency: Currency of the index
        tenor: Tenor of the underlying deposit, e.g. "3M"
        day_count: Accrual convention of the index
        fixing_offset_days: Business days between fixing and effective date
    """
    name: str
    currency: Currency
    tenor: str
    day_count: DayCount = DayCount.ACT_360
    fixing_offset_days: int = 2

    def __post_init__(self):
        require(self.name, "name", "IborIndex")
        object.__setattr__(self, "currency", Currency.of(require(self.currency, "currency", "IborIndex")))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class OvernightIndex:
    """
    Overnight rate index such as USD-FED-FUND.

    Attributes:
        name: Display name
        currency: Currency of the index
        day_count: Accrual convention of the index
    """
    name: str
    currency: Currency
    day_count: DayCount = DayCount.ACT_360
    tenor: str = field(default="1D", init=False)

    def __post_init__(self):
        require(self.name, "name", "OvernightIndex")
        object.__setattr__(self, "currency", Currency.of(require(self.currency, "currency", "OvernightIndex")))

    def __str__(self) -> str:
        return self.name


RateIndex = Union[IborIndex, OvernightIndex]


USD_LIBOR_1M = IborIndex("USD-LIBOR-1M", USD, "1M")
USD_LIBOR_3M = IborIndex("USD-LIBOR-3M", USD, "3M")
USD_LIBOR_6M = IborIndex("USD-LIBOR-6M", USD, "6M")
EUR_EURIBOR_3M = IborIndex("EUR-EURIBOR-3M", EUR, "3M")
EUR_EURIBOR_6M = IborIndex("EUR-EURIBOR-6M", EUR, "6M")
EUR_EURIBOR_12M = IborIndex("EUR-EURIBOR-12M", EUR, "12M")
GBP_LIBOR_3M = IborIndex("GBP-LIBOR-3M", GBP, "3M", DayCount.ACT_365, 0)
USD_FED_FUND = OvernightIndex("USD-FED-FUND", USD)
EUR_EONIA = OvernightIndex("EUR-EONIA", EUR)
GBP_SONIA = OvernightIndex("GBP-SONIA", GBP, DayCount.ACT_365)


__all__ = [
    "Currency",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "IborIndex",
    "OvernightIndex",
    "RateIndex",
    "USD_LIBOR_1M",
    "USD_LIBOR_3M",
    "USD_LIBOR_6M",
    "EUR_EURIBOR_3M",
    "EUR_EURIBOR_6M",
    "EUR_EURIBOR_12M",
    "GBP_LIBOR_3M",
    "USD_FED_FUND",
    "EUR_EONIA",
    "GBP_SONIA",
]
