from __future__ import annotations

import math
from enum import Enum
from types import MappingProxyType
from typing import Iterator, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


BASE_CURRENCY = "USD"


class ErrorKind(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    RATE_FETCH_FAILURE = "rate_fetch_failure"
    INVALID_CURRENCY = "invalid_currency"
    CONVERSION_FAILED = "conversion_failed"


class RateTable(BaseModel):
    """Currency code -> units of that currency per one unit of the base currency."""

    model_config = ConfigDict(frozen=True)

    rates: Mapping[str, float]
    base: str = Field(default=BASE_CURRENCY, pattern=r"^[A-Z]{3}$")
    source: Literal["live", "fallback", "manual"] = "manual"

    @field_validator("rates")
    @classmethod
    def check_positive_rates(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        for code, rate in v.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"rate for {code} must be a positive number, got {rate!r}")
        # read-only view over a private copy
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def check_base_is_one(self) -> "RateTable":
        if self.rates.get(self.base) != 1.0:
            raise ValueError(f"base currency {self.base} must map to 1.0")
        return self

    def __getitem__(self, code: str) -> float:
        return self.rates[code]

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def __len__(self) -> int:
        return len(self.rates)

    def get(self, code: str, default: Optional[float] = None) -> Optional[float]:
        return self.rates.get(code, default)

    def codes(self) -> Iterator[str]:
        return iter(self.rates)


class ConversionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(ge=0.0, allow_inf_nan=False)
    from_currency: str
    to_currency: str


class ConversionResult(BaseModel):
    request: Optional[ConversionRequest] = None
    converted: Optional[float] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.converted is not None


SUPPORTED_CURRENCIES: List[str] = [
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "INR",
    "AUD",
    "CAD",
    "CHF",
    "CNY",
    "SEK",
]
