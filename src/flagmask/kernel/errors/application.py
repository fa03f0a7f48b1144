"""Application-layer errors — concerns outside the flag model itself."""

from __future__ import annotations

from flagmask.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
