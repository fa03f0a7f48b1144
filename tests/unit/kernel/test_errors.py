"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json
import pickle

import pytest

from flagmask.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateBitPositionError,
    InvalidDefinitionError,
    MalformedBinaryStringError,
    NotFoundError,
    OutOfRangeBitsError,
    UnknownBitPositionError,
    UnknownFlagNameError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"

    def test_detail_sets_render_as_sorted_lists(self) -> None:
        err = BaseError("m", detail={"positions": frozenset({4, 0, 2}), "pair": ("A", 1)})
        assert err.to_dict()["detail"] == {"positions": [0, 2, 4], "pair": ["A", 1]}
        assert json.loads(str(err))["detail"]["positions"] == [0, 2, 4]

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = BaseError("m", detail=detail)
        detail["key"] = "changed"
        assert err.detail == {"key": "val"}


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        err = ValidationError("bad")
        assert err.errors == []
        assert err.to_dict()["errors"] == []

    def test_errors_included_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "x"}])
        assert err.to_dict()["errors"] == [{"field": "x"}]


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DomainError, BaseError),
            (ApplicationError, BaseError),
            (ValidationError, DomainError),
            (NotFoundError, DomainError),
            (InvalidDefinitionError, ValidationError),
            (DuplicateBitPositionError, ValidationError),
            (MalformedBinaryStringError, ValidationError),
            (OutOfRangeBitsError, ValidationError),
            (UnknownFlagNameError, NotFoundError),
            (UnknownBitPositionError, NotFoundError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)


class TestFlagErrors:
    def test_invalid_definition_code(self) -> None:
        assert InvalidDefinitionError("empty").code == "invalid_definition"

    def test_duplicate_bit_position(self) -> None:
        err = DuplicateBitPositionError("B", 0)
        assert err.code == "duplicate_bit_position"
        assert err.message == "B: 0 already exists"
        assert err.detail == {"flag": "B", "position": 0}

    def test_malformed_binary_string(self) -> None:
        err = MalformedBinaryStringError("12F0")
        assert err.code == "malformed_binary_string"
        assert err.text == "12F0"
        assert err.detail == {"text": "12F0"}

    def test_malformed_binary_string_non_str(self) -> None:
        assert MalformedBinaryStringError(101).detail == {"text": "101"}

    def test_out_of_range_bits(self) -> None:
        err = OutOfRangeBitsError(0b11000, 2)
        assert err.code == "out_of_range_bits"
        assert err.message.endswith("offending bits: 11000")
        assert err.detail == {"offending_bits": "11000", "max_position": 2}

    def test_unknown_flag_name(self) -> None:
        err = UnknownFlagNameError("NOPE", ["READ", "WRITE"])
        assert err.code == "unknown_flag_name"
        assert err.message == "invalid key: NOPE, possible values READ, WRITE"
        assert err.valid_names == ["READ", "WRITE"]

    def test_unknown_bit_position_sorts_positions(self) -> None:
        err = UnknownBitPositionError(9, frozenset({4, 0, 2}))
        assert err.code == "unknown_bit_position"
        assert err.message == "invalid number: 9, possible values are = 0, 2, 4"
        assert err.detail == {"position": 9, "valid_positions": [0, 2, 4]}

    def test_str_is_json(self) -> None:
        parsed = json.loads(str(UnknownBitPositionError(9, [0])))
        assert parsed["code"] == "unknown_bit_position"


class TestPickling:
    @pytest.mark.parametrize(
        "err",
        [
            DuplicateBitPositionError("B", 0),
            MalformedBinaryStringError("12F0"),
            OutOfRangeBitsError(0b1000, 2),
            UnknownFlagNameError("NOPE", ["READ", "WRITE"]),
            UnknownBitPositionError(9, {0, 1}),
            ValidationError("bad", errors=[{"field": "x"}]),
        ],
    )
    def test_round_trip_keeps_payload(self, err: BaseError) -> None:
        restored = pickle.loads(pickle.dumps(err))
        assert type(restored) is type(err)
        assert restored.to_dict() == err.to_dict()
        assert restored.args == (err.message,)

    def test_round_trip_keeps_cause(self) -> None:
        err = InvalidDefinitionError("bad", cause=KeyError("A"))
        restored = pickle.loads(pickle.dumps(err))
        assert isinstance(restored.__cause__, KeyError)
        assert restored.cause.args == ("A",)
