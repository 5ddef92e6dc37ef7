"""Pytest configuration and fixtures."""

import os

import httpx
import pytest

from ipfetch.adapters.http_client import HttpBodyFetcher
from ipfetch.core.config import AppSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep IPFETCH_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("IPFETCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_fetcher():
    """Build an HttpBodyFetcher whose requests are answered by `handler`."""

    def _make(handler, settings=None):
        return HttpBodyFetcher(settings or AppSettings(), transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def json_handler():
    """Handler answering every request with a small IP-info document."""

    def _handler(request):
        return httpx.Response(200, json={"IP": "127.0.0.1", "Country": "TW", "ASN": 3462})

    return _handler
