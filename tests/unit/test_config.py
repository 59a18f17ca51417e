"""
Unit tests for config/ - settings and logging setup
"""
import logging

import pytest
from config.constants import LASSO_MIN_POINTS, MATH_MAX_VARIABLES, MAX_TEXT_LENGTH
from config.logging_config import set_level, setup_logger
from config.settings import Settings


class TestSettings:
    """Test Settings defaults and overrides."""

    @pytest.fixture
    def settings(self, tmp_path):
        return Settings(logs_dir=tmp_path / "logs")

    def test_defaults_follow_constants(self, settings):
        assert settings.max_text_length == MAX_TEXT_LENGTH
        assert settings.math_max_variables == MATH_MAX_VARIABLES
        assert settings.lasso_min_points == LASSO_MIN_POINTS
        assert settings.lasso_selectable_types == ["draw", "image"]
        assert settings.merge_segments is False

    def test_creates_logs_dir(self, settings):
        assert settings.logs_dir.is_dir()

    def test_keyword_override(self, tmp_path):
        settings = Settings(logs_dir=tmp_path, max_text_length=10)
        assert settings.max_text_length == 10

    def test_environment_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT", "5/minute")
        monkeypatch.setenv("math_max_variables", "3")
        settings = Settings(logs_dir=tmp_path)
        assert settings.rate_limit == "5/minute"
        assert settings.math_max_variables == 3

    def test_print_config(self, settings, capsys):
        settings.print_config()
        assert "Rate Limit" in capsys.readouterr().out


class TestLoggingConfig:
    """Test setup_logger."""

    def test_console_only_logger(self):
        logger = setup_logger("tests.console_only", log_file=None)
        assert len(logger.handlers) == 1

    def test_handlers_added_once(self, tmp_path):
        log_file = str(tmp_path / "test.log")
        first = setup_logger("tests.rotating", log_file=log_file)
        second = setup_logger("tests.rotating", log_file=log_file)
        assert first is second
        assert len(second.handlers) == 2
        assert (tmp_path / "test.log").exists()

    def test_level_override(self):
        logger = setup_logger("tests.level", level="DEBUG", log_file=None)
        assert logger.level == logging.DEBUG
        setup_logger("tests.level", level="warning", log_file=None)
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        logger = logging.getLogger("tests.unknown_level")
        set_level(logger, "LOUD")
        assert logger.level == logging.INFO
