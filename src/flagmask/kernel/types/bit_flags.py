"""BitFlagSet — named flags stored as bits of a single integer.

Example::

    perms = BitFlagSet({"READ": 0, "WRITE": 1, "EXECUTE": 2})
    perms.set("READ").set("WRITE")
    perms.to_binary_string()        # "0011"
    perms.get_current_flag_names()  # ["READ", "WRITE"]

Instances are mutable and carry no lock.  Callers sharing one instance
between threads must serialise access themselves; the definition is
read-only and safe to share.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterator
from typing import Any, Final

from flagmask.kernel.errors.domain import ValidationError
from flagmask.kernel.errors.flags import (
    MalformedBinaryStringError,
    OutOfRangeBitsError,
    UnknownFlagNameError,
)
from flagmask.kernel.types.bits import bit, count_bits, low_mask
from flagmask.kernel.types.definition import DefinitionSource, FlagDefinition

logger = logging.getLogger(__name__)

_BINARY_PATTERN: Final = re.compile(r"[01]+")

FlagRef = str | int | enum.Enum
"""A flag identifier: its name, its bit position, or an enum member named like it."""


class BitFlagSet:
    """Mutable set of named boolean flags backed by one integer.

    Args:
        definition: Flag name → bit position mapping (``dict``, ``IntEnum``
            class or :class:`FlagDefinition`).
        initial_value: Starting mask.  Not checked against the definition:
            bits without a name ("foreign" bits) are kept as-is and show up
            in :meth:`to_number`, :meth:`to_binary_string` and
            :meth:`count_set_bits`.  Use :meth:`from_binary_string` for the
            strict path.

    Raises:
        InvalidDefinitionError: *definition* is empty or malformed.
        DuplicateBitPositionError: two names share a bit position.
        ValidationError: *initial_value* is not a non-negative integer.
    """

    __slots__ = ("_value", "_definition", "_valid_positions", "_capacity", "_all_mask")

    def __init__(
        self,
        definition: FlagDefinition | DefinitionSource,
        initial_value: int = 0,
    ) -> None:
        self._definition = FlagDefinition.of(definition)
        if isinstance(initial_value, bool) or not isinstance(initial_value, int) or initial_value < 0:
            raise ValidationError(
                f"initial value must be a non-negative integer, got {initial_value!r}",
                detail={"initial_value": repr(initial_value)},
            )
        self._value = initial_value
        self._valid_positions = self._definition.positions
        self._capacity = self._definition.capacity
        self._all_mask = self._definition.mask
        foreign = initial_value & ~self._all_mask
        logger.debug(
            "flag_set.created value=%d capacity=%d foreign_bits=%s",
            initial_value,
            self._capacity,
            f"{foreign:b}",
        )
        if foreign:
            logger.debug(
                "flag_set.foreign_bits_accepted value=%d foreign_bits=%s", initial_value, f"{foreign:b}"
            )

    @classmethod
    def create(
        cls,
        definition: FlagDefinition | DefinitionSource,
        initial_value: int = 0,
    ) -> "BitFlagSet":
        """Alias of the constructor."""
        return cls(definition, initial_value)

    @classmethod
    def from_binary_string(
        cls,
        text: str,
        definition: FlagDefinition | DefinitionSource,
    ) -> "BitFlagSet":
        """Parse a string of ``0``/``1`` digits (most significant bit first).

        Unlike the constructor this path is strict: every set bit must fall
        within ``0..max_position`` of *definition*.

        Raises:
            MalformedBinaryStringError: *text* is empty or not binary.
            InvalidDefinitionError: *definition* is empty or malformed.
            OutOfRangeBitsError: *text* sets bits above the highest position.
        """
        if not isinstance(text, str) or not _BINARY_PATTERN.fullmatch(text):
            raise MalformedBinaryStringError(text)
        value = int(text, 2)
        flags = FlagDefinition.of(definition)
        offending = value & ~low_mask(flags.max_position)
        if offending:
            raise OutOfRangeBitsError(offending, flags.max_position)
        logger.debug(
            "flag_set.parsed text=%s value=%d capacity=%d foreign_bits=%s",
            text,
            value,
            flags.capacity,
            f"{value & ~flags.mask:b}",
        )
        return cls(flags, value)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self, flag: FlagRef) -> int:
        if isinstance(flag, enum.Enum):
            flag = flag.name
        if isinstance(flag, int) and not isinstance(flag, bool):
            self._definition.name_of(flag)
            return flag
        if isinstance(flag, str):
            return self._definition.position_of(flag)
        raise UnknownFlagNameError(flag, self._definition.names)

    def _mask_for(self, flags: tuple[FlagRef, ...]) -> int:
        mask = 0
        for flag in flags:
            mask |= bit(self._resolve(flag))
        return mask

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set(self, *flags: FlagRef) -> "BitFlagSet":
        """Set each flag (by name or position).  Returns ``self``."""
        self._value |= self._mask_for(flags)
        return self

    def clear(self, *flags: FlagRef) -> "BitFlagSet":
        """Clear each flag.  Returns ``self``."""
        self._value &= ~self._mask_for(flags)
        return self

    def toggle(self, *flags: FlagRef) -> "BitFlagSet":
        """Flip each flag.  Returns ``self``."""
        self._value ^= self._mask_for(flags)
        return self

    def set_all(self) -> None:
        """Set every defined flag.  Foreign bits are left alone."""
        self._value |= self._all_mask

    def clear_all(self) -> None:
        """Reset the value to zero, foreign bits included."""
        self._value = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_set(self, flag: FlagRef) -> bool:
        return bool(self._value & bit(self._resolve(flag)))

    def get_current_flag_names(self) -> list[str]:
        """Names of the set flags, in definition order (not bit order)."""
        return [name for name, position in self._definition.items() if self._value & bit(position)]

    def count_set_bits(self) -> int:
        """Population count of the whole value, foreign bits included."""
        return count_bits(self._value)

    def foreign_bits(self) -> int:
        """Mask of set bits that have no flag name."""
        return self._value & ~self._all_mask

    def to_number(self) -> int:
        return self._value

    def capacity(self) -> int:
        return self._capacity

    def to_binary_string(self, min_width: int | None = None) -> str:
        """Render the value in base 2, zero-padded to at least :meth:`capacity` digits.

        A *min_width* below the capacity is ignored; the output never
        truncates.
        """
        width = self._capacity if min_width is None else max(min_width, self._capacity)
        return format(self._value, "b").zfill(width)

    def to_dict(self) -> dict[str, bool]:
        """``{name: is_set}`` for every defined flag, in definition order."""
        return {name: bool(self._value & bit(position)) for name, position in self._definition.items()}

    def copy(self) -> "BitFlagSet":
        """Independent instance sharing the same definition."""
        return type(self)(self._definition, self._value)

    @property
    def definition(self) -> FlagDefinition:
        return self._definition

    @property
    def valid_positions(self) -> frozenset[int]:
        return self._valid_positions

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __contains__(self, flag: FlagRef) -> bool:
        return self.is_set(flag)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_current_flag_names())

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitFlagSet):
            return NotImplemented
        return self._value == other._value and self._definition == other._definition

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = "|".join(self.get_current_flag_names()) or "-"
        foreign = self.foreign_bits()
        extra = f", foreign=0b{foreign:b}" if foreign else ""
        return f"{type(self).__name__}({names}, value={self._value}{extra})"


__all__ = ["BitFlagSet", "FlagRef"]
