"""Unit tests for FlagDefinition."""

from __future__ import annotations

import enum

import pydantic
import pytest

from flagmask.kernel.errors import (
    DuplicateBitPositionError,
    InvalidDefinitionError,
    UnknownBitPositionError,
    UnknownFlagNameError,
)
from flagmask.kernel.types import FlagDefinition


class Color(enum.IntEnum):
    RED = 0
    GREEN = 3
    BLUE = 5


class Mode(enum.Flag):
    A = 1
    B = 2


class TestFlagDefinitionOf:
    def test_from_dict_keeps_order(self) -> None:
        d = FlagDefinition.of({"B": 3, "A": 0})
        assert d.names == ("B", "A")
        assert list(d) == ["B", "A"]

    def test_from_int_enum(self) -> None:
        d = FlagDefinition.of(Color)
        assert d.to_dict() == {"RED": 0, "GREEN": 3, "BLUE": 5}

    def test_enum_flag_is_rejected(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition.of(Mode)

    def test_existing_definition_returned_as_is(self) -> None:
        d = FlagDefinition.of({"A": 0})
        assert FlagDefinition.of(d) is d

    def test_unsupported_source_raises(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition.of([("A", 0)])  # type: ignore[arg-type]

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition.of({})

    def test_duplicate_position_raises(self) -> None:
        with pytest.raises(DuplicateBitPositionError) as exc_info:
            FlagDefinition.of({"A": 0, "B": 1, "C": 1})
        assert exc_info.value.flag == "C"
        assert exc_info.value.position == 1
        assert exc_info.value.detail == {"flag": "C", "position": 1}

    @pytest.mark.parametrize("position", [-1, 1.5, "2", None, True])
    def test_bad_position_raises(self, position: object) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition.of({"A": position})  # type: ignore[dict-item]

    def test_empty_name_raises(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition.of({"": 0})

    def test_duplicate_name_in_raw_entries_raises(self) -> None:
        with pytest.raises(InvalidDefinitionError):
            FlagDefinition((("A", 0), ("A", 1)))


class TestFlagDefinitionViews:
    def test_mapping_protocol(self) -> None:
        d = FlagDefinition.of({"READ": 0, "WRITE": 1})
        assert d["WRITE"] == 1
        assert len(d) == 2
        assert "READ" in d
        assert "OTHER" not in d
        assert dict(d.items()) == {"READ": 0, "WRITE": 1}

    def test_missing_key_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            FlagDefinition.of({"A": 0})["B"]

    def test_positions_and_mask(self) -> None:
        d = FlagDefinition.of({"A": 0, "B": 3})
        assert d.positions == frozenset({0, 3})
        assert d.max_position == 3
        assert d.mask == 0b1001
        assert d.capacity == 4

    def test_position_of(self) -> None:
        d = FlagDefinition.of({"A": 0, "B": 3})
        assert d.position_of("B") == 3
        with pytest.raises(UnknownFlagNameError):
            d.position_of("Z")

    def test_name_of(self) -> None:
        d = FlagDefinition.of({"A": 0, "B": 3})
        assert d.name_of(3) == "B"
        with pytest.raises(UnknownBitPositionError):
            d.name_of(1)


class TestFlagDefinitionValueSemantics:
    def test_equality_and_hash(self) -> None:
        a = FlagDefinition.of({"A": 0, "B": 1})
        b = FlagDefinition.of({"A": 0, "B": 1})
        assert a == b
        assert hash(a) == hash(b)

    def test_order_matters_for_equality(self) -> None:
        assert FlagDefinition.of({"A": 0, "B": 1}) != FlagDefinition.of({"B": 1, "A": 0})

    def test_is_frozen(self) -> None:
        d = FlagDefinition.of({"A": 0})
        with pytest.raises((AttributeError, TypeError)):
            d.entries = ()  # type: ignore[misc]


class _Model(pydantic.BaseModel):
    flags: FlagDefinition


class TestFlagDefinitionPydantic:
    def test_validates_from_dict(self) -> None:
        m = _Model(flags={"READ": 0, "WRITE": 1})
        assert isinstance(m.flags, FlagDefinition)
        assert m.flags.names == ("READ", "WRITE")

    def test_accepts_instance(self) -> None:
        d = FlagDefinition.of({"A": 0})
        assert _Model(flags=d).flags is d

    def test_serialises_to_dict(self) -> None:
        m = _Model(flags={"READ": 0, "WRITE": 1})
        assert m.model_dump() == {"flags": {"READ": 0, "WRITE": 1}}

    def test_duplicate_positions_become_pydantic_error(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="already exists"):
            _Model(flags={"A": 0, "B": 0})

    def test_non_mapping_becomes_pydantic_error(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            _Model(flags="READ")
