"""Tests for environment configuration parsing."""

import pytest

from multistream.config import EnvironConfig, config, parse_bool, parse_list


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("TRUE", True), (" yes ", True), ("1", True), ("false", False), ("no", False)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_bool_blank_uses_default(raw):
    assert parse_bool(raw, default=True) is True


def test_parse_list():
    assert parse_list("http://a.com, http://b.com,,") == ["http://a.com", "http://b.com"]
    assert parse_list("", default=["*"]) == ["*"]


def test_config_is_singleton():
    assert EnvironConfig() is config


def test_env_example_placeholders_are_loaded():
    # Blank placeholders in env.example count as unset for typed getters
    assert "SESSION_STORE_BASE_URL" in config
    assert config.get_str("SESSION_STORE_BASE_URL") is None
    assert config.get_int("API_PORT", 1) == 8000


def test_process_environment_overrides_files(monkeypatch):
    monkeypatch.setenv("API_WORKERS", "4")
    config.reload()
    try:
        assert config.get_int("API_WORKERS", 1) == 4
    finally:
        monkeypatch.delenv("API_WORKERS")
        config.reload()
