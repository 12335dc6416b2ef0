# tests/conftest.py
import sys
from pathlib import Path

import pytest
import requests

# make "convertit" importable without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from convertit.config import get_settings  # noqa: E402


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_error=None):
        self._payload = payload
        self.status_code = status_code
        self._body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("CONVERTIT_RATES_URL", "CONVERTIT_REQUEST_TIMEOUT", "CONVERTIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_get(monkeypatch):
    """Install a fake requests.get returning (or raising) `outcome`; records calls."""
    calls = []

    def install(outcome):
        def _get(url, timeout=None, **kwargs):
            calls.append({"url": url, "timeout": timeout})
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install


@pytest.fixture
def offline(fake_get):
    return fake_get(requests.ConnectionError("network unreachable"))


@pytest.fixture
def sample_rates():
    return {"USD": 1.0, "EUR": 0.92, "GBP": 0.79, "JPY": 149.50}
