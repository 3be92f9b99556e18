"""Tests for logging helpers."""

import logging

from common.logging_utils import (
    Timer,
    configure_logging,
    extra_context,
    is_debug_enabled,
    safe_url,
)


class TestSafeUrl:
    """Secret query parameters are masked."""

    def test_redacts_api_key(self):
        url = "https://nuget.org/api/v2/Package/Foo/1.0.0?apiKey=KEY123"
        assert safe_url(url) == "https://nuget.org/api/v2/Package/Foo/1.0.0?apiKey=***"

    def test_redacts_case_insensitively_and_keeps_other_params(self):
        url = "https://example.test/p?APIKEY=a&page=2&token=b"
        assert safe_url(url) == "https://example.test/p?APIKEY=***&page=2&token=***"

    def test_url_without_query_unchanged(self):
        url = "https://nuget.org/api/v2/Package/Foo/1.0.0"
        assert safe_url(url) == url


def test_extra_context_drops_none():
    assert extra_context(event="x", target=None, status_code=0) == {"event": "x", "status_code": 0}


def test_is_debug_enabled():
    logger = logging.getLogger("tests.logging_utils")
    logger.setLevel(logging.DEBUG)
    assert is_debug_enabled(logger) is True
    logger.setLevel(logging.INFO)
    assert is_debug_enabled(logger) is False


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv("NUGETVIS_LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    original_level = root.level
    try:
        configure_logging()
        handlers = len(root.handlers)
        configure_logging("debug")
        assert len(root.handlers) == handlers
        assert root.level == logging.DEBUG
        configure_logging()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(original_level)


def test_timer_measures_non_negative_duration():
    with Timer() as t:
        pass
    assert t.duration_ms() >= 0
