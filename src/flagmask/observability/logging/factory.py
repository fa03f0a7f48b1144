"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from flagmask.config.settings.logs import LoggingSettings
from flagmask.observability.logging.processors import ErrorDetailProcessor


class JsonLoggerFactory:
    """Configure structlog and route stdlib ``logging`` through it.

    Library modules log with :func:`logging.getLogger`; once configured,
    those records are rendered by the same processor chain as structlog
    events.
    """

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            ErrorDetailProcessor(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
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

    @classmethod
    def configure_from(cls, settings: LoggingSettings) -> None:
        """Apply a loaded :class:`~flagmask.config.LoggingSettings`."""
        cls.configure(level=settings.level_number, json=settings.json)


__all__ = ["JsonLoggerFactory"]
