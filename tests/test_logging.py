# topmark:header:start
#
#   project      : LicenseMark
#   file         : test_logging.py
#   file_relpath : tests/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from licensemark.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    LicensemarkLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.mark.parametrize(
    ("value", "level"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("nonsense", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, level: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert resolve_env_log_level() == level


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_trace_records_use_trace_level() -> None:
    logger = get_logger("licensemark.tests.trace")
    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    try:
        logger.trace("value=%d", 42)
    finally:
        logger.removeHandler(handler)

    assert isinstance(logger, LicensemarkLogger)
    assert [(r.levelname, r.getMessage()) for r in handler.records] == [("TRACE", "value=42")]


def test_trace_is_filtered_above_trace_level() -> None:
    logger = get_logger("licensemark.tests.filtered")
    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        logger.trace("hidden")
    finally:
        logger.removeHandler(handler)

    assert handler.records == []


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_defaults_to_critical() -> None:
    setup_logging()

    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_reads_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")

    setup_logging()

    assert logging.getLogger().level == logging.INFO


def test_chalk_formatter_keeps_the_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

    assert "[WARNING] careful" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)
