"""Domain errors — invalid input and unknown lookups."""

from __future__ import annotations

from typing import Any

from flagmask.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a flag-set rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested item does not exist."""

    default_code = "not_found"


__all__ = ["DomainError", "NotFoundError", "ValidationError"]
