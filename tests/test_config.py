"""Tests for configuration and logging setup."""

import logging

from config.logging_setup import setup_logging
from config.settings import CalculatorConfig


class TestCalculatorConfig:
    def test_defaults(self):
        config = CalculatorConfig()
        assert config.clear_token == "AC"
        assert config.max_fraction_digits == 8
        assert config.strict_tokens is False
        assert config.truncate_log_on_clear is False

    def test_from_env(self):
        config = CalculatorConfig.from_env({
            "CALC_LOG_LEVEL": "debug",
            "CALC_STRICT_TOKENS": "1",
            "CALC_TRUNCATE_LOG": "true",
        })
        assert config.log_level == "DEBUG"
        assert config.strict_tokens is True
        assert config.truncate_log_on_clear is True

    def test_from_env_without_variables(self):
        config = CalculatorConfig.from_env({})
        assert config.log_level == "INFO"
        assert config.strict_tokens is False

    def test_from_env_false_values(self):
        config = CalculatorConfig.from_env({"CALC_STRICT_TOKENS": "no"})
        assert config.strict_tokens is False


class TestSetupLogging:
    def test_sets_level_and_is_idempotent(self):
        logger = setup_logging("DEBUG")
        handlers = len(logger.handlers)
        assert logger.name == "calculator"
        assert logger.level == logging.DEBUG

        setup_logging("WARNING")
        assert len(logger.handlers) == handlers
        assert logger.level == logging.WARNING

    def test_unknown_level_name_falls_back_to_info(self):
        assert setup_logging("LOUD").level == logging.INFO
