from __future__ import annotations

from convertit.models import ErrorKind


class ConversionError(Exception):
    """Base class for failures a conversion can end in."""

    kind: ErrorKind = ErrorKind.CONVERSION_FAILED


class InvalidAmountError(ConversionError, ValueError):
    kind = ErrorKind.INVALID_AMOUNT

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"Invalid amount: {raw!r}")


class InvalidCurrencyError(ConversionError, KeyError):
    kind = ErrorKind.INVALID_CURRENCY

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invalid currency: {code!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class RateFetchError(ConversionError):
    kind = ErrorKind.RATE_FETCH_FAILURE

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(message)


class ConversionBusyError(RuntimeError):
    """Raised when a conversion is requested while another is still running."""
