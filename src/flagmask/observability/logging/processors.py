"""Observability – structlog processors and get_logger helper.

ErrorDetailProcessor — expands flagmask errors bound to a log event.
get_logger(name) — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog

from flagmask.kernel.errors.base import BaseError


class ErrorDetailProcessor:
    """structlog processor that serialises :class:`BaseError` values.

    Any event field holding a :class:`~flagmask.kernel.errors.BaseError`
    is replaced with its :meth:`~flagmask.kernel.errors.BaseError.to_dict`
    payload, so a caller can log a caught error as ``log.warning("x",
    error=exc)`` and keep its code and detail in the JSON output.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, BaseError):
                event_dict[key] = value.to_dict()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorDetailProcessor", "get_logger"]
