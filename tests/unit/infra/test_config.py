"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recency_cache.infra.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.capacity == 128
        assert settings.thread_safe is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_env_var_loading(self, monkeypatch):
        monkeypatch.setenv("RECENCY_CACHE_CAPACITY", "8")
        monkeypatch.setenv("RECENCY_CACHE_THREAD_SAFE", "true")
        monkeypatch.setenv("RECENCY_CACHE_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.capacity == 8
        assert settings.thread_safe is True
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("capacity", ["0", "-3"])
    def test_non_positive_capacity_rejected(self, monkeypatch, capacity):
        monkeypatch.setenv("RECENCY_CACHE_CAPACITY", capacity)
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_unknown_log_format_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("RECENCY_CACHE_CAPACITY", "5")
        first = get_settings()
        monkeypatch.setenv("RECENCY_CACHE_CAPACITY", "6")
        assert get_settings() is first
        assert first.capacity == 5
