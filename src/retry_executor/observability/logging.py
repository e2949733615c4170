"""Observability – structlog setup and ``get_logger`` helper.

The engine modules log through stdlib ``logging.getLogger(__name__)``;
:func:`configure_logging` routes those records through structlog's
``ProcessorFormatter`` so they come out as JSON (or console) lines with the
same processors as native structlog events.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from retry_executor.config import RetrySettings


def configure_logging(
    level: int | str = logging.INFO,
    *,
    json: bool = True,
    settings: RetrySettings | None = None,
) -> None:
    """Install a single root handler rendering stdlib and structlog events.

    When *settings* is given its ``log_level`` / ``log_json`` win over the
    keyword arguments.
    """
    if settings is not None:
        level = settings.log_level
        json = settings.log_json
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["configure_logging", "get_logger"]
