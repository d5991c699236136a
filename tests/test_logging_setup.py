import io
import logging

from bank_history.logging_setup import configure_logging, get_logger


def test_get_logger_is_silent_until_configured():
    logger = get_logger("bank_history.test")
    pkg = logging.getLogger("bank_history")
    assert logger.name == "bank_history.test"
    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)


def test_configure_logging_once_with_env_level(monkeypatch):
    monkeypatch.setenv("BANK_HISTORY_LOG_LEVEL", "debug")
    stream = io.StringIO()
    configure_logging(stream=stream)
    configure_logging(level="ERROR", stream=io.StringIO())  # ignored: already configured

    pkg = logging.getLogger("bank_history")
    assert pkg.level == logging.DEBUG
    assert not any(isinstance(h, logging.NullHandler) for h in pkg.handlers)

    get_logger("bank_history.history").debug("hello %s", "there")
    assert "bank_history.history DEBUG hello there" in stream.getvalue()


def test_explicit_level_wins_over_env(monkeypatch):
    monkeypatch.setenv("BANK_HISTORY_LOG_LEVEL", "DEBUG")
    configure_logging(level="WARNING", stream=io.StringIO())
    assert logging.getLogger("bank_history").level == logging.WARNING


def test_unknown_level_names_fall_back_to_info(monkeypatch):
    monkeypatch.setenv("BANK_HISTORY_LOG_LEVEL", "chatty")
    configure_logging(level="verbose", stream=io.StringIO())
    assert logging.getLogger("bank_history").level == logging.INFO
