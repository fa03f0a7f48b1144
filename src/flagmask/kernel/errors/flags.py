"""Flag-set errors — definition, parsing and lookup failures.

Every error here is raised at the call site that detects it. None of them is
logged or swallowed inside the library.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flagmask.kernel.errors.domain import NotFoundError, ValidationError


class InvalidDefinitionError(ValidationError):
    """The flag definition is empty or carries an unusable entry."""

    default_code = "invalid_definition"


class DuplicateBitPositionError(ValidationError):
    """Two flag names map to the same bit position."""

    default_code = "duplicate_bit_position"

    def __init__(self, flag: str, position: int, **kwargs: Any) -> None:
        super().__init__(
            f"{flag}: {position} already exists",
            detail={"flag": flag, "position": position},
            **kwargs,
        )
        self.flag = flag
        self.position = position


class MalformedBinaryStringError(ValidationError):
    """Parse input is empty or contains characters other than ``0``/``1``."""

    default_code = "malformed_binary_string"

    def __init__(self, text: object, **kwargs: Any) -> None:
        super().__init__(
            "input string should only contain 0 or 1 as characters",
            detail={"text": text if isinstance(text, str) else repr(text)},
            **kwargs,
        )
        self.text = text


class OutOfRangeBitsError(ValidationError):
    """A parsed value has bits set above the highest defined position."""

    default_code = "out_of_range_bits"

    def __init__(self, offending_bits: int, max_position: int, **kwargs: Any) -> None:
        super().__init__(
            "input value contains bit outside of defined flags. "
            f"offending bits: {offending_bits:b}",
            detail={"offending_bits": f"{offending_bits:b}", "max_position": max_position},
            **kwargs,
        )
        self.offending_bits = offending_bits
        self.max_position = max_position


class UnknownFlagNameError(NotFoundError):
    """A flag name is absent from the definition."""

    default_code = "unknown_flag_name"

    def __init__(self, name: object, valid_names: Iterable[str], **kwargs: Any) -> None:
        names = list(valid_names)
        super().__init__(
            f"invalid key: {name}, possible values {', '.join(names)}",
            detail={"name": str(name), "valid_names": names},
            **kwargs,
        )
        self.name = name
        self.valid_names = names


class UnknownBitPositionError(NotFoundError):
    """A numeric bit position has no flag name in the definition."""

    default_code = "unknown_bit_position"

    def __init__(self, position: int, valid_positions: Iterable[int], **kwargs: Any) -> None:
        positions = sorted(valid_positions)
        super().__init__(
            f"invalid number: {position}, possible values are = "
            f"{', '.join(str(p) for p in positions)}",
            detail={"position": position, "valid_positions": positions},
            **kwargs,
        )
        self.position = position
        self.valid_positions = positions


__all__ = [
    "DuplicateBitPositionError",
    "InvalidDefinitionError",
    "MalformedBinaryStringError",
    "OutOfRangeBitsError",
    "UnknownBitPositionError",
    "UnknownFlagNameError",
]
