"""
Tests for logging setup.
"""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from stateprop.logging_config import SeedFilter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format(monkeypatch):
    monkeypatch.setenv("STATEPROP_LOG_FORMAT", "json")
    monkeypatch.setenv("STATEPROP_LOG_LEVEL", "debug")

    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_text_format_default(monkeypatch):
    monkeypatch.delenv("STATEPROP_LOG_FORMAT", raising=False)
    monkeypatch.delenv("STATEPROP_LOG_LEVEL", raising=False)

    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_get_logger_binds_seed():
    adapter = get_logger("stateprop.test", seed="seed-1")

    assert adapter.extra == {"seed": "seed-1"}
    assert get_logger("stateprop.test").extra == {"seed": "-"}


def test_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("STATEPROP_LOG_LEVEL", "chatty")

    setup_logging()

    assert logging.getLogger().level == logging.WARNING


def test_seed_filter_fills_missing_field():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert SeedFilter().filter(record)
    assert record.seed == "-"
