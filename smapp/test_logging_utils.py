"""
Tests for logging setup helpers
"""

import logging

import pytest

from .logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def isolatedLogger():
    """Provide logger with handlers removed after test."""
    localLogger = logging.getLogger("smapp.test.isolated")
    yield localLogger
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)
        handler.close()
    localLogger.setLevel(logging.NOTSET)
    localLogger.propagate = True


def test_get_log_level_by_str():
    """Test level names are case insensitive, dood!"""
    assert getLogLevelByStr("debug") == logging.DEBUG
    assert getLogLevelByStr("WARNING") == logging.WARNING
    assert getLogLevelByStr("nonsense") is None
    assert getLogLevelByStr("nonsense", logging.INFO) == logging.INFO
    assert getLogLevelByStr("basic_format") is None


def test_configure_console(isolatedLogger):
    """Test console handler is installed with its own level, dood!"""
    configureLogger(isolatedLogger, {"level": "DEBUG", "console": True, "console-level": "ERROR", "propagate": False})

    assert isolatedLogger.level == logging.DEBUG
    assert not isolatedLogger.propagate
    assert len(isolatedLogger.handlers) == 1
    assert isolatedLogger.handlers[0].level == logging.ERROR


def test_configure_file_replaces_handlers(isolatedLogger, tmp_path):
    """Test reconfiguration drops old handlers and writes to file, dood!"""
    configureLogger(isolatedLogger, {"console": True})
    logFile = tmp_path / "logs" / "smapp.log"

    configureLogger(isolatedLogger, {"level": "INFO", "file": str(logFile), "format": "%(message)s"})
    isolatedLogger.info("hello")
    for handler in isolatedLogger.handlers:
        handler.flush()

    assert len(isolatedLogger.handlers) == 1
    assert isinstance(isolatedLogger.handlers[0], logging.FileHandler)
    assert logFile.read_text().strip() == "hello"


def test_init_logging_quiets_httpx():
    """Test httpx loggers are raised to WARNING on verbose root, dood!"""
    rootLogger = logging.getLogger()
    savedLevel = rootLogger.level
    savedHandlers = rootLogger.handlers[:]
    try:
        initLogging({"level": "DEBUG", "logger": {"smapp.test.init": {"level": "ERROR"}}})

        assert rootLogger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
        assert logging.getLogger("smapp.test.init").level == logging.ERROR
    finally:
        rootLogger.setLevel(savedLevel)
        for handler in rootLogger.handlers[:]:
            rootLogger.removeHandler(handler)
        for handler in savedHandlers:
            rootLogger.addHandler(handler)
