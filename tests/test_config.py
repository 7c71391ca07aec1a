"""
Tests for settings loading and logging setup.
"""

import structlog

from keycalc.config import NonFinitePolicy, Settings
from keycalc.logging_config import configure_logging


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("KEYCALC_NON_FINITE_POLICY", raising=False)
        settings = Settings(_env_file=None)
        assert settings.non_finite_policy is NonFinitePolicy.RAISE
        assert settings.ascii_operators is True
        assert settings.log_format == "console"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("KEYCALC_NON_FINITE_POLICY", "propagate")
        monkeypatch.setenv("KEYCALC_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.non_finite_policy is NonFinitePolicy.PROPAGATE
        assert settings.log_level == "DEBUG"


class TestLogging:
    """Test structlog configuration."""

    def test_json_logs_to_stderr(self, capsys):
        configure_logging(level="info", fmt="json")
        structlog.get_logger().info("Keystroke rejected", key="+")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "Keystroke rejected"' in captured.err

    def test_level_filter(self, capsys):
        configure_logging(level="warning", fmt="console")
        structlog.get_logger().info("hidden")
        assert capsys.readouterr().err == ""
