from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union

import requests
from pydantic import ValidationError

from convertit.config import get_settings
from convertit.errors import InvalidCurrencyError, RateFetchError
from convertit.models import BASE_CURRENCY, RateTable


logger = logging.getLogger(__name__)

# Approximate, stale rates for offline/demo use only. Not financial-grade data.
FALLBACK_RATES: Mapping[str, float] = MappingProxyType({
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.50,
    "INR": 83.12,
    "AUD": 1.53,
    "CAD": 1.36,
    "CHF": 0.88,
    "CNY": 7.24,
    "SEK": 10.89,
})


@dataclass(frozen=True)
class RateFetch:
    """Outcome of one live fetch: exactly one of table / error is set."""

    table: Optional[RateTable] = None
    error: Optional[RateFetchError] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


def fallback_table() -> RateTable:
    return RateTable(rates=dict(FALLBACK_RATES), base=BASE_CURRENCY, source="fallback")


def fetch_rates(url: Optional[str] = None, timeout: Optional[float] = None) -> RateFetch:
    settings = get_settings()
    url = url or settings.rates_url
    timeout = timeout or settings.request_timeout

    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except ValueError as exc:
        # invalid JSON body
        return RateFetch(error=RateFetchError(f"malformed response: {exc}", url=url))
    except requests.RequestException as exc:
        return RateFetch(error=RateFetchError(f"request failed: {exc}", url=url))

    rates = data.get("rates") if isinstance(data, dict) else None
    if not isinstance(rates, dict) or not rates:
        return RateFetch(error=RateFetchError("response has no 'rates' mapping", url=url))

    try:
        table = RateTable(rates=rates, base=BASE_CURRENCY, source="live")
    except ValidationError as exc:
        return RateFetch(error=RateFetchError(f"invalid rates: {exc.error_count()} bad entries", url=url))

    logger.debug("Fetched %d live rates from %s", len(table), url)
    return RateFetch(table=table)


def obtain_rates(url: Optional[str] = None, timeout: Optional[float] = None) -> RateTable:
    """Live rates if the service answers, otherwise the fallback table. Never raises."""
    result = fetch_rates(url=url, timeout=timeout)
    if result.ok:
        return result.table
    logger.warning("Rate fetch failed, using fallback rates: %s", result.error)
    return fallback_table()


def _rate(code: str, rates: Union[RateTable, Mapping[str, float]]) -> float:
    if code not in rates:
        raise InvalidCurrencyError(code)
    rate = rates[code]
    if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
        raise InvalidCurrencyError(code)
    return float(rate)


def convert(amount: float, from_ccy: str, to_ccy: str, rates: Union[RateTable, Mapping[str, float]]) -> float:
    from_rate = _rate(from_ccy, rates)
    to_rate = _rate(to_ccy, rates)
    # Routed through the base currency: amount / from_rate * to_rate
    return amount * (to_rate / from_rate)
