"""BaseError: the exception every flagmask error derives from.

Each error carries a stable ``code`` and a ``detail`` dict with the values
that caused it (the offending flag name, the valid positions, ...), so a
host can log or return it without parsing the message::

    try:
        flags.set("ADMIN")
    except BaseError as exc:
        log.warning("flag.rejected", **exc.to_dict())
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def _plain(value: Any) -> Any:
    """Turn sets, tuples and nested mappings in *detail* into JSON builtins."""
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        items = [_plain(item) for item in value]
        try:
            return sorted(items)
        except TypeError:
            return items
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _restore(cls: type[BaseError], message: str, state: dict[str, Any]) -> BaseError:
    err = cls.__new__(cls)
    Exception.__init__(err, message)
    err.__dict__.update(state)
    if state.get("cause") is not None:
        err.__cause__ = state["cause"]
    return err


class BaseError(Exception):
    """Root of the flagmask error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug.  Subclasses set ``default_code``.
        detail: Values describing the failure.  Sets and tuples are
            rendered as lists by :meth:`to_dict`.
        cause: Exception that triggered this one; also set as ``__cause__``.

    Subclasses may take any constructor signature; instances still pickle
    because :meth:`__reduce__` restores attributes instead of replaying
    ``__init__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (type(self), self.message, dict(self.__dict__)))

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail`` (plus ``cause`` when chained)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": _plain(self.detail),
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
