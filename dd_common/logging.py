"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog

from dd_common.config.env import parse_bool_env, parse_int_env


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.WARNING
    if isinstance(value, int):
        return value
    parsed = parse_int_env(value)
    if parsed is not None:
        return parsed
    return logging.getLevelNamesMapping().get(value.upper(), logging.INFO)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Configure stdlib logging and structlog with a shared formatter.

    ``DD_LOG_LEVEL``, ``DD_LOG_JSON`` and ``DD_LOG_FILE`` fill in any
    argument left unset.
    """
    env_level = os.environ.get("DD_LOG_LEVEL")
    env_json = parse_bool_env(os.environ.get("DD_LOG_JSON"))
    env_log_file = os.environ.get("DD_LOG_FILE")

    resolved_level = _resolve_level(level or env_level, debug)
    resolved_json = env_json if json is None else json
    resolved_log_file = env_log_file if log_file is None else log_file

    renderer: structlog.types.Processor
    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        _configure_structlog()
        return

    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    if resolved_log_file:
        file_handler = logging.FileHandler(resolved_log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if force:
        root_logger.handlers.clear()

    root_logger.setLevel(resolved_level)
    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()
