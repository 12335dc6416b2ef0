from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional

from convertit.errors import ConversionBusyError, ConversionError, InvalidAmountError
from convertit.models import ConversionRequest, ConversionResult, ErrorKind, RateTable
from convertit.services.currency import convert, obtain_rates


logger = logging.getLogger(__name__)

MSG_INVALID_AMOUNT = "Please enter a valid amount"
MSG_CONVERSION_FAILED = "Conversion failed. Please try again."
MSG_LOADING = "Converting..."


def parse_amount(raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        raise InvalidAmountError(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        s = str(raw).strip()
        if not s:
            raise InvalidAmountError(raw)
        try:
            value = float(s)
        except ValueError:
            raise InvalidAmountError(raw) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidAmountError(raw)
    return value


def format_conversion(result: ConversionResult) -> str:
    req = result.request
    return f"{req.amount:.2f} {req.from_currency} = {result.converted:.2f} {req.to_currency}"


def display_text(result: ConversionResult) -> str:
    if result.ok:
        return format_conversion(result)
    if result.error is ErrorKind.INVALID_AMOUNT:
        return MSG_INVALID_AMOUNT
    return MSG_CONVERSION_FAILED


class ConversionController:
    """
    Runs one fetch-then-convert sequence per user action.
    `busy` is set for the duration of the rate fetch and always cleared afterwards;
    a request arriving while busy is refused rather than queued.
    """

    def __init__(self, rate_provider: Optional[Callable[[], RateTable]] = None):
        self._rate_provider = rate_provider or obtain_rates
        self.busy = False

    def perform(self, raw_amount: Any, from_ccy: str, to_ccy: str) -> ConversionResult:
        if self.busy:
            raise ConversionBusyError("a conversion is already in progress")

        try:
            amount = parse_amount(raw_amount)
        except InvalidAmountError as exc:
            logger.info("%s", exc)
            return ConversionResult(error=ErrorKind.INVALID_AMOUNT)

        request = ConversionRequest(amount=amount, from_currency=from_ccy, to_currency=to_ccy)
        self.busy = True
        try:
            rates = self._rate_provider()
            converted = convert(request.amount, request.from_currency, request.to_currency, rates)
            return ConversionResult(request=request, converted=converted)
        except ConversionError as exc:
            logger.error("Conversion error: %s", exc)
            return ConversionResult(request=request, error=exc.kind)
        except Exception:
            logger.exception("Unexpected conversion failure")
            return ConversionResult(request=request, error=ErrorKind.CONVERSION_FAILED)
        finally:
            self.busy = False
