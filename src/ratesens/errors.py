"""
Exceptions raised by ratesens.

All validation failures derive from RatesensError, itself a ValueError, so
callers can tell a rejected input apart from an unexpected internal error.
"""


class RatesensError(ValueError):
    """Base class for validation failures in ratesens."""

    pass


class MissingFieldError(RatesensError):
    """Raised when a required field is absent at construction."""

    def __init__(self, field_name: str, owner: str):
        self.field_name = field_name
        self.owner = owner
        super().__init__(f"{owner}: '{field_name}' must not be None")


class ScheduleOrderError(RatesensError):
    """Raised when reset period dates are not in chronological order."""

    pass


class MissingFixingError(RatesensError):
    """Raised when an averaged rate needs a fixing that was not supplied."""

    pass


def require(value, field_name: str, owner: str):
    """Return value, raising MissingFieldError if it is None."""
    if value is None:
        raise MissingFieldError(field_name, owner)
    return value


__all__ = [
    "RatesensError",
    "MissingFieldError",
    "ScheduleOrderError",
    "MissingFixingError",
    "require",
]
