"""Tests for environment-driven settings."""

import logging

from minigrep.config.settings import Settings


class TestSettings:
    """Test Settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MINIGREP_DEBUG", raising=False)
        monkeypatch.delenv("MINIGREP_LOG_LEVEL", raising=False)
        s = Settings()
        assert s.ignore_case is False
        assert s.debug is True
        assert s.encoding == "utf-8"
        assert s.log_level == "INFO"

    def test_debug_off(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_DEBUG", "0")
        assert Settings().debug is False

    def test_encoding(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_ENCODING", "latin-1")
        assert Settings().encoding == "latin-1"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch, caplog):
        caplog.set_level(logging.WARNING, logger="minigrep.config.settings")
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "loud")
        assert Settings().log_level == "INFO"
        assert "Invalid MINIGREP_LOG_LEVEL" in caplog.text
