"""Tests for structured log messages."""

from elfa_core.logging_utils import _normalize_level, log_event


def test_log_event_formats_fields() -> None:
    message = log_event("elfa.request", path="/v1/ping", status=200, note="two words")

    assert message == "evt=elfa.request | path=/v1/ping | status=200 | note='two words'"


def test_log_event_masks_secret_fields() -> None:
    message = log_event("config.loaded", api_key="abc123", base_url="https://api.elfa.ai")

    assert "abc123" not in message
    assert "api_key=***" in message
    assert "base_url=https://api.elfa.ai" in message


def test_log_event_leaves_empty_secrets_visible() -> None:
    assert log_event("config.loaded", api_key="") == "evt=config.loaded | api_key=''"


def test_normalize_level_falls_back_on_unknown_values() -> None:
    assert _normalize_level("debug") == "DEBUG"
    assert _normalize_level("verbose", fallback="WARNING") == "WARNING"
    assert _normalize_level(None) == "INFO"
