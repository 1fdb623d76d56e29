"""
Tests for IntKind and kind name parsing.
"""

import pytest

from extent.types import ErrorCode, IntKind, ValidationError, parse_kind


class TestIntKind:
    """Tests for IntKind limits."""

    @pytest.mark.parametrize(
        "kind,bits,signed,min_value,max_value",
        [
            (IntKind.I8, 8, True, -128, 127),
            (IntKind.I16, 16, True, -32768, 32767),
            (IntKind.I32, 32, True, -(2**31), 2**31 - 1),
            (IntKind.I64, 64, True, -(2**63), 2**63 - 1),
            (IntKind.I128, 128, True, -(2**127), 2**127 - 1),
            (IntKind.U8, 8, False, 0, 255),
            (IntKind.U16, 16, False, 0, 65535),
            (IntKind.U32, 32, False, 0, 2**32 - 1),
            (IntKind.U64, 64, False, 0, 2**64 - 1),
            (IntKind.U128, 128, False, 0, 2**128 - 1),
        ],
    )
    def test_limits(self, kind, bits, signed, min_value, max_value):
        assert kind.bits == bits
        assert kind.byte_size == bits // 8
        assert kind.signed is signed
        assert kind.min_value == min_value
        assert kind.max_value == max_value

    def test_contains(self):
        assert IntKind.U8.contains(0)
        assert IntKind.U8.contains(255)
        assert not IntKind.U8.contains(256)
        assert not IntKind.U8.contains(-1)
        assert IntKind.I8.contains(-128)
        assert not IntKind.I8.contains(128)

    def test_string_values(self):
        assert IntKind.U32 == "u32"
        assert str(IntKind.I16) == "i16"

    def test_every_kind_holds_empty_sentinel(self):
        """(1, 0) must be storable in every kind."""
        for kind in IntKind:
            assert kind.contains(0)
            assert kind.contains(1)


class TestParseKind:
    """Tests for parse_kind."""

    def test_names(self):
        assert parse_kind("u8") is IntKind.U8
        assert parse_kind(" I64 ") is IntKind.I64

    def test_passthrough(self):
        assert parse_kind(IntKind.U16) is IntKind.U16

    def test_unbounded(self):
        assert parse_kind(None) is None
        assert parse_kind("") is None

    def test_non_string(self):
        for value in (8, 1.5, b"u8"):
            with pytest.raises(ValidationError, match="must be a name") as exc_info:
                parse_kind(value)
            assert exc_info.value.code == ErrorCode.UNKNOWN_KIND

    def test_unknown(self):
        with pytest.raises(ValidationError, match="Unknown integer kind: 'u7'") as exc_info:
            parse_kind("u7")
        assert exc_info.value.code == ErrorCode.UNKNOWN_KIND
        assert isinstance(exc_info.value.original_error, ValueError)
