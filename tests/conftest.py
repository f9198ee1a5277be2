"""Pytest configuration and fixtures."""
import logging

import httpx
import pytest

from frontend.services.api import ApiService
from tests.fakes import FakeApi


@pytest.fixture
def fake_api():
    """Scripted API double for controller tests."""
    return FakeApi()


@pytest.fixture
def make_api():
    """Build an ApiService whose requests go to an in-process handler."""
    def _make(handler):
        return ApiService(
            base_url="http://testserver",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture(autouse=True)
def quiet_httpx():
    logging.getLogger("httpx").setLevel(logging.WARNING)
    yield
