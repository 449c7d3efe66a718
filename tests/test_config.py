"""Tests for settings and logging configuration."""

from __future__ import annotations

import pytest
import structlog

from docinspect.config import Settings, get_settings
from docinspect.logging_setup import configure_logging


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DOCINSPECT_MAX_WORKERS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "info"
        assert settings.DICTIONARY_DELIMITER == "\t"
        assert settings.DICTIONARY_ENCODING == "utf-8"
        assert settings.MAX_WORKERS == 4

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCINSPECT_MAX_WORKERS", "8")
        monkeypatch.setenv("DOCINSPECT_DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.MAX_WORKERS == 8
        assert settings.DEBUG is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_configures_structlog(self) -> None:
        configure_logging(Settings(_env_file=None, LOG_LEVEL="warning"))

        assert structlog.is_configured()

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(Settings(_env_file=None, LOG_LEVEL="chatty", DEBUG=True))

        assert structlog.is_configured()
