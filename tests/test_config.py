"""Tests for environment overrides of runtime configuration"""

from orderboard.config import API_BASE_URL, POLL_INTERVAL_SECONDS, resolve_api_base_url, resolve_poll_interval


def test_api_url_defaults(monkeypatch):
    monkeypatch.delenv("ORDERBOARD_API_URL", raising=False)
    assert resolve_api_base_url() == API_BASE_URL


def test_api_url_override_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("ORDERBOARD_API_URL", "http://kitchen.local:8080/")
    assert resolve_api_base_url() == "http://kitchen.local:8080"


def test_poll_interval_override(monkeypatch):
    monkeypatch.setenv("ORDERBOARD_POLL_INTERVAL", "2.5")
    assert resolve_poll_interval() == 2.5


def test_invalid_poll_interval_falls_back(monkeypatch):
    monkeypatch.setenv("ORDERBOARD_POLL_INTERVAL", "soon")
    assert resolve_poll_interval() == POLL_INTERVAL_SECONDS

    monkeypatch.setenv("ORDERBOARD_POLL_INTERVAL", "-1")
    assert resolve_poll_interval() == POLL_INTERVAL_SECONDS
