"""Tests for logging and settings setup."""

import logging
import warnings

import pytest
import structlog
from pydantic import ValidationError

from src.utils.logger import get_logger, setup_logging
from src.utils.settings.app import AppSettings


@pytest.fixture
def reset_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    structlog.reset_defaults()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.ENVIRONMENT == "DEV"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.is_production is False


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = AppSettings(_env_file=None)

    assert settings.is_production is True
    assert settings.LOG_LEVEL == "warning"


def test_settings_are_frozen():
    settings = AppSettings(_env_file=None, ENVIRONMENT="DEV")

    with pytest.raises(ValidationError):
        settings.ENVIRONMENT = "PROD"


def test_debug_rejected_in_production():
    settings = AppSettings(_env_file=None, ENVIRONMENT="PROD", DEBUG=True)

    with pytest.raises(ValueError):
        settings.validate_prod()


def test_setup_logging_uses_json_in_production(reset_logging):
    setup_logging(AppSettings(_env_file=None, ENVIRONMENT="PROD", LOG_LEVEL="WARNING"))

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    formatter = root_logger.handlers[0].formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)


def test_setup_logging_falls_back_to_info(reset_logging):
    setup_logging(AppSettings(_env_file=None, LOG_LEVEL="chatty"))

    assert logging.getLogger().level == logging.INFO


def test_get_logger_is_named(reset_logging):
    setup_logging(AppSettings(_env_file=None))

    logger = get_logger("autoblog.test")

    assert logger.bind().name == "autoblog.test"


def test_console_renderer_configures_without_warnings(reset_logging):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        setup_logging(AppSettings(_env_file=None, ENVIRONMENT="DEV"))

    formatter = logging.getLogger().handlers[0].formatter
    assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)
