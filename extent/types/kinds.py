"""
Fixed-width integer kinds.

Python integers never overflow, so the numeric type an extent ranges over
is described explicitly. An IntKind fixes the width and signedness, and
with them the smallest and largest representable value.
"""

from __future__ import annotations

from enum import StrEnum

from extent.types.errors import ErrorCode, ErrorContext, ValidationError


class IntKind(StrEnum):
    """Fixed-width integer kinds an Extent can range over."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def byte_size(self) -> int:
        return self.bits // 8

    @property
    def min_value(self) -> int:
        """Smallest representable value (zero for unsigned kinds)."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check if an integer is representable in this kind."""
        return self.min_value <= value <= self.max_value


def parse_kind(name: str | IntKind | None) -> IntKind | None:
    """
    Resolve a kind name such as ``"u8"`` or ``"I32"``.

    Empty strings and None resolve to None (unbounded integers).

    Raises:
        ValidationError: If the name is not a known kind
    """
    if name is None or isinstance(name, IntKind):
        return name
    if not isinstance(name, str):
        raise ValidationError(
            f"Integer kind must be a name, got {type(name).__name__}",
            code=ErrorCode.UNKNOWN_KIND,
            context=ErrorContext(operation="parse_kind", value=name),
        )
    normalized = name.strip().lower()
    if not normalized:
        return None
    try:
        return IntKind(normalized)
    except ValueError as e:
        raise ValidationError(
            f"Unknown integer kind: {name!r}",
            code=ErrorCode.UNKNOWN_KIND,
            context=ErrorContext(operation="parse_kind", value=name),
            original_error=e,
        ) from e
