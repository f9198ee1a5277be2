import logging

import orjson
import pytest
from pydantic import ValidationError

from config.settings import Settings
from frontend.errors import ApiError
from frontend.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("API_BASE_URL", "BACKEND_HOST", "BACKEND_PORT", "BACKEND_SCHEME", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_default_base_url(clean_env):
    settings = Settings(_env_file=None)

    assert settings.base_url == "http://localhost:8000"
    assert settings.DEFAULT_COIN == "bitcoin"
    assert settings.DEFAULT_TIME_RANGE_MINUTES == 60


def test_host_and_port_from_env(clean_env):
    clean_env.setenv("BACKEND_HOST", "api.internal")
    clean_env.setenv("BACKEND_PORT", "9000")

    assert Settings(_env_file=None).base_url == "http://api.internal:9000"


def test_base_url_override(clean_env):
    clean_env.setenv("API_BASE_URL", "https://prices.example.com/")

    assert Settings(_env_file=None).base_url == "https://prices.example.com"


def test_log_level_normalized(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_api_error_text():
    assert str(ApiError("Failed to fetch trend data")) == "Failed to fetch trend data"
    assert str(ApiError("Failed to subscribe", status_code=409)) == "Failed to subscribe (HTTP 409)"


def test_json_formatter():
    record = logging.LogRecord("frontend.test", logging.WARNING, __file__, 1, "price %s", ("up",), None)

    payload = orjson.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "frontend.test"
    assert payload["message"] == "price up"


def test_configure_logging_replaces_handler(clean_env):
    root = logging.getLogger()
    previous_level = root.level
    settings = Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="warning")
    try:
        first = configure_logging(settings)
        second = configure_logging(settings)

        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, JsonFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            if getattr(handler, "_dashboard_handler", False):
                root.removeHandler(handler)
        root.setLevel(previous_level)
