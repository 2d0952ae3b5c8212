"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers

import pytest

from creditwise.config import BaseConfig
from creditwise.logging_config import JSONFormatter, get_logger, setup_logging
from creditwise.services import simulate_payoff


@pytest.fixture
def config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CREDITWISE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CREDITWISE_DEFAULT_METHOD", raising=False)
    return BaseConfig()


def test_json_formatter():
    """Test that JSONFormatter correctly formats log records."""
    formatter = JSONFormatter()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    record.module = "test_module"
    record.funcName = "test_function"

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    """Test that JSONFormatter correctly handles exceptions."""
    formatter = JSONFormatter()

    try:
        raise ValueError("Test error")
    except ValueError:
        import sys

        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.ERROR,
        pathname="test.py",
        lineno=42,
        msg="Error occurred",
        args=(),
        exc_info=exc_info,
    )

    log_data = json.loads(formatter.format(record))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    formatter = JSONFormatter()
    record = logging.LogRecord("t", logging.INFO, "t.py", 1, "msg", (), None)
    record.open_debts = 2

    log_data = json.loads(formatter.format(record))

    assert log_data["extra"] == {"open_debts": 2}


def test_setup_logging(config, tmp_path):
    """Test that logging setup creates log files with rotation."""
    logger = setup_logging(config)

    assert logger.name == "creditwise"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "creditwise.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)


def test_setup_logging_is_idempotent(config):
    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    """Test that get_logger returns properly namespaced loggers."""
    assert get_logger("module1").name == "creditwise.module1"
    assert get_logger("creditwise.services.payoff").name == "creditwise.services.payoff"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Test that console logging level adjusts based on dev mode."""
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    assert console_handler.level == (logging.INFO if dev_mode else logging.WARNING)


def test_unresolved_simulation_logs_warning(debt_factory, caplog):
    debt = debt_factory(balance=10000.0, interest_rate=24.0, minimum_payment=250.0)

    with caplog.at_level(logging.WARNING, logger="creditwise.services.payoff"):
        simulate_payoff([debt], 150.0)

    assert any("did not converge" in record.getMessage() for record in caplog.records)


def test_json_formatter_keeps_only_caller_extras():
    record = logging.getLogger("creditwise.test").makeRecord(
        "creditwise.test",
        logging.WARNING,
        "payoff.py",
        10,
        "Payoff did not converge within %d months",
        (360,),
        None,
        extra={"method": "avalanche", "open_debts": 1},
    )

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["message"] == "Payoff did not converge within 360 months"
    assert log_data["extra"] == {"method": "avalanche", "open_debts": 1}
