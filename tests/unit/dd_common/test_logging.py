"""Tests for the structlog-backed logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from dd_common.logging import _resolve_level, configure_logging

pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_resolve_level_variants() -> None:
    assert _resolve_level(None, False) == logging.WARNING
    assert _resolve_level("debug", False) == logging.DEBUG
    assert _resolve_level("15", False) == 15
    assert _resolve_level(logging.ERROR, False) == logging.ERROR
    assert _resolve_level("error", True) == logging.DEBUG
    assert _resolve_level("nonsense", False) == logging.INFO


def test_configure_logging_reads_env(monkeypatch, tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "dd.log"
    monkeypatch.setenv("DD_LOG_LEVEL", "INFO")
    monkeypatch.setenv("DD_LOG_JSON", "1")
    monkeypatch.setenv("DD_LOG_FILE", str(log_file))

    configure_logging(force=True)

    root = restore_root_logger
    assert root.level == logging.INFO
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    formatter = file_handlers[0].formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)

    logging.getLogger("dd_engine.test").info("hello")
    file_handlers[0].flush()
    assert '"event": "hello"' in log_file.read_text()


def test_configure_logging_keeps_existing_handlers(restore_root_logger) -> None:
    root = restore_root_logger
    marker = logging.NullHandler()
    root.addHandler(marker)
    configure_logging()
    assert marker in root.handlers
