"""FlagDefinition value object — an immutable name → bit-position mapping."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterator, Mapping
from typing import Any

from flagmask.kernel.errors.domain import ValidationError
from flagmask.kernel.errors.flags import (
    DuplicateBitPositionError,
    InvalidDefinitionError,
    UnknownBitPositionError,
    UnknownFlagNameError,
)
from flagmask.kernel.types.bits import capacity_for, mask_of

DefinitionSource = Mapping[str, int] | type[enum.Enum]


@dataclasses.dataclass(frozen=True, slots=True)
class FlagDefinition(Mapping[str, int]):
    """Ordered, validated mapping of flag names to zero-based bit positions.

    Insertion order of the source mapping is kept; it drives the order in
    which set flag names are reported.  Positions must be pairwise distinct
    and the definition must hold at least one entry.

    Use :meth:`of` to build one from a plain ``dict`` or an ``IntEnum``::

        perms = FlagDefinition.of({"READ": 0, "WRITE": 1, "EXECUTE": 2})
        perms.capacity  # 4
    """

    entries: tuple[tuple[str, int], ...]
    _by_name: dict[str, int] = dataclasses.field(init=False, repr=False, compare=False)
    _by_position: dict[int, str] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.entries:
            raise InvalidDefinitionError("passed flags cannot be empty")
        by_name: dict[str, int] = {}
        by_position: dict[int, str] = {}
        for name, position in self.entries:
            if not isinstance(name, str) or not name:
                raise InvalidDefinitionError(
                    f"Flag names must be non-empty strings, got {name!r}",
                    detail={"name": repr(name)},
                )
            if isinstance(position, bool) or not isinstance(position, int) or position < 0:
                raise InvalidDefinitionError(
                    f"{name}: bit position must be a non-negative integer, got {position!r}",
                    detail={"name": name, "position": repr(position)},
                )
            if name in by_name:
                raise InvalidDefinitionError(
                    f"{name}: flag name defined twice",
                    detail={"name": name},
                )
            if position in by_position:
                raise DuplicateBitPositionError(name, position)
            by_name[name] = position
            by_position[position] = name
        object.__setattr__(self, "_by_name", by_name)
        object.__setattr__(self, "_by_position", by_position)

    @classmethod
    def of(cls, flags: "FlagDefinition | DefinitionSource") -> "FlagDefinition":
        """Build a definition from a mapping or an ``Enum`` class with int values.

        An existing :class:`FlagDefinition` is returned unchanged.
        """
        if isinstance(flags, FlagDefinition):
            return flags
        if isinstance(flags, type) and issubclass(flags, enum.Flag):
            raise InvalidDefinitionError(
                f"{flags.__name__} is an enum.Flag; its values are masks, not bit positions",
                detail={"type": flags.__name__},
            )
        if isinstance(flags, type) and issubclass(flags, enum.Enum):
            return cls(tuple((member.name, member.value) for member in flags))
        if isinstance(flags, Mapping):
            return cls(tuple(flags.items()))
        raise InvalidDefinitionError(
            f"Cannot build a flag definition from {type(flags).__name__}",
            detail={"type": type(flags).__name__},
        )

    # Mapping protocol

    def __getitem__(self, name: str) -> int:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self.entries)

    # Derived views

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    @property
    def positions(self) -> frozenset[int]:
        """Set of bit positions that carry a name."""
        return frozenset(self._by_position)

    @property
    def max_position(self) -> int:
        return max(self._by_position)

    @property
    def capacity(self) -> int:
        """Power-of-two bit width covering every defined position."""
        return capacity_for(self.max_position)

    @property
    def mask(self) -> int:
        """Mask with every defined position set."""
        return mask_of(self._by_position)

    def position_of(self, name: str) -> int:
        """Return the bit position of *name* or raise :class:`UnknownFlagNameError`."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownFlagNameError(name, self._by_name) from None

    def name_of(self, position: int) -> str:
        """Return the flag name at *position* or raise :class:`UnknownBitPositionError`."""
        try:
            return self._by_position[position]
        except KeyError:
            raise UnknownBitPositionError(position, self._by_position) from None

    def to_dict(self) -> dict[str, int]:
        return dict(self.entries)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        def _validate(v: Any) -> "FlagDefinition":
            if isinstance(v, cls):
                return v
            if not isinstance(v, Mapping):
                raise ValueError(f"Cannot convert {v!r} to FlagDefinition")
            try:
                return cls.of(v)
            except ValidationError as exc:
                raise ValueError(exc.message) from exc

        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda d: d.to_dict(),
            ),
        )


__all__ = ["DefinitionSource", "FlagDefinition"]
