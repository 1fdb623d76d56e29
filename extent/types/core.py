"""
Inclusive integer ranges.

An Extent stores exactly two integers, lo and hi. When lo <= hi it is the
inclusive range {lo, lo+1, ..., hi}. The only stored pair with lo > hi is
the canonical empty value (1, 0), which every empty extent normalizes to,
so equality and hashing can simply compare the two fields.

Extent itself ranges over unbounded Python integers. Extent.of(kind), or
one of the ExtentI8 ... ExtentU128 aliases, gives the flavour whose bounds
must be representable in a fixed-width integer kind.

Usage:
    e = ExtentU8(200, 10)          # stored as [10, 200]
    e.lo(), e.hi()                 # (10, 200)
    ExtentU8.empty().lo()          # None
    list(ExtentU8(250, 255))       # [250, 251, 252, 253, 254, 255]
    (e & ExtentU8(0, 5)).is_empty()  # True
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import ClassVar, Iterator

from loguru import logger

from extent.constants import EMPTY_HI, EMPTY_LO
from extent.types.errors import (
    ConversionError,
    ErrorCode,
    ErrorContext,
    KindMismatchError,
    ValidationError,
)
from extent.types.iterators import ExtentIter, ExtentRevIter
from extent.types.kinds import IntKind, parse_kind


@dataclass(frozen=True, order=True, init=False, repr=False)
class Extent:
    """
    An inclusive range [lo, hi] of integers, or the empty range.

    Extent(a, b) accepts its endpoints in either order and stores them
    sorted, so it never produces an empty extent; use Extent.empty() for
    that. Extent.new_unchecked() is the raw path for reading back pairs
    previously written with lo_unchecked() / hi_unchecked().
    """

    __slots__ = ("_lo", "_hi")

    _lo: int
    _hi: int

    # Integer kind the bounds belong to; None means unbounded int
    kind: ClassVar[IntKind | None] = None

    def __init__(self, a: int, b: int) -> None:
        a = self._check_value(a, "new")
        b = self._check_value(b, "new")
        object.__setattr__(self, "_lo", min(a, b))
        object.__setattr__(self, "_hi", max(a, b))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, kind: IntKind | str | None) -> type[Extent]:
        """Return the Extent class whose bounds are integers of the given kind."""
        resolved = parse_kind(kind)
        if resolved is None:
            return Extent
        return _KIND_CLASSES[resolved]

    @classmethod
    def new(cls, a: int, b: int) -> Extent:
        """Checked constructor; same as calling the class."""
        return cls(a, b)

    @classmethod
    def empty(cls) -> Extent:
        """The canonical empty extent."""
        return cls._normalized(EMPTY_LO, EMPTY_HI)

    @classmethod
    def default(cls) -> Extent:
        """Default value; the canonical empty extent."""
        return cls.empty()

    @classmethod
    def new_unchecked(cls, lo: int, hi: int) -> Extent:
        """
        Rebuild an extent from a raw (lo, hi) pair without sorting it.

        Meant for pairs this type wrote out itself via lo_unchecked() and
        hi_unchecked(). A pair with lo > hi is taken to be the empty
        sentinel and normalized to Extent.empty() whatever its values;
        passing an arbitrary unordered pair silently yields an empty
        extent rather than the range between the two points.

        Args:
            lo: Raw lower field
            hi: Raw upper field

        Returns:
            The extent [lo, hi], or the canonical empty extent if lo > hi
        """
        lo = cls._check_value(lo, "new_unchecked")
        hi = cls._check_value(hi, "new_unchecked")
        if lo > hi and (lo, hi) != (EMPTY_LO, EMPTY_HI):
            logger.debug(f"Raw pair ({lo}, {hi}) is unordered, normalizing to empty")
        return cls._normalized(lo, hi)

    @classmethod
    def from_bounds(cls, bounds: tuple[int, int]) -> Extent:
        """Checked constructor from an inclusive (a, b) pair in either order."""
        a, b = bounds
        return cls(a, b)

    @classmethod
    def from_range(cls, r: range) -> Extent:
        """
        Convert an exclusive range to the extent holding the same values.

        range(a, b) becomes [a, b - 1]; an empty range becomes Extent.empty().

        Raises:
            ValidationError: If the range has a step other than 1, or its
                values are not representable in this kind
        """
        if r.step != 1:
            raise ValidationError(
                f"Only ranges with step 1 can be converted, got step {r.step}",
                context=ErrorContext(operation="from_range", kind=cls._kind_name(), value=r),
            )
        if r.start >= r.stop:
            return cls.empty()
        lo = cls._check_value(r.start, "from_range")
        hi = cls._check_value(r.stop - 1, "from_range")
        return cls._normalized(lo, hi)

    @classmethod
    def _normalized(cls, lo: int, hi: int) -> Extent:
        """Store an already validated pair; any lo > hi becomes the empty sentinel."""
        if lo > hi:
            lo, hi = EMPTY_LO, EMPTY_HI
        extent = object.__new__(cls)
        object.__setattr__(extent, "_lo", lo)
        object.__setattr__(extent, "_hi", hi)
        return extent

    @classmethod
    def _check_value(cls, value: int, operation: str) -> int:
        if isinstance(value, bool):
            raise ValidationError(
                "Extent bounds must be integers, got bool",
                context=ErrorContext(operation=operation, kind=cls._kind_name(), value=value),
            )
        try:
            value = operator.index(value)
        except TypeError as e:
            raise ValidationError(
                f"Extent bounds must be integers, got {type(value).__name__}",
                context=ErrorContext(operation=operation, kind=cls._kind_name(), value=value),
                original_error=e,
            ) from e
        if cls.kind is not None and not cls.kind.contains(value):
            raise ValidationError(
                f"{value} is not representable as {cls.kind.value}",
                code=ErrorCode.VALUE_OUT_OF_RANGE,
                context=ErrorContext(
                    operation=operation,
                    kind=cls.kind.value,
                    value=value,
                    additional_info={"min": cls.kind.min_value, "max": cls.kind.max_value},
                ),
            )
        return value

    @classmethod
    def _kind_name(cls) -> str | None:
        return cls.kind.value if cls.kind is not None else None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        """True iff this is the empty extent."""
        return self._lo > self._hi

    def lo(self) -> int | None:
        """Lower bound, or None if empty."""
        return None if self.is_empty() else self._lo

    def hi(self) -> int | None:
        """Upper bound, or None if empty."""
        return None if self.is_empty() else self._hi

    def lo_unchecked(self) -> int:
        """
        Raw lower field, without checking for emptiness.

        The caller must know the extent is nonempty, or be writing the raw
        pair out for new_unchecked() to read back. For the empty extent
        this returns 1, which is not a member of the range.
        """
        return self._lo

    def hi_unchecked(self) -> int:
        """
        Raw upper field, without checking for emptiness.

        For the empty extent this returns 0. See lo_unchecked().
        """
        return self._hi

    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (lo, hi) pair, or None if empty."""
        return None if self.is_empty() else (self._lo, self._hi)

    def count(self) -> int:
        """Number of values in the extent (hi - lo + 1, or 0 when empty)."""
        return 0 if self.is_empty() else self._hi - self._lo + 1

    def __len__(self) -> int:
        # len() is capped at sys.maxsize by CPython; count() is not
        return self.count()

    def __bool__(self) -> bool:
        return not self.is_empty()

    # ------------------------------------------------------------------
    # Set-like operations
    # ------------------------------------------------------------------

    def contains(self, value: object) -> bool:
        """Check if a value lies within the extent (inclusive).

        Only integers can be members; floats, bools and other types never are.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return not self.is_empty() and self._lo <= value <= self._hi

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def union(self, other: Extent) -> Extent:
        """
        Smallest extent enclosing both operands.

        This is a covering union, not a set union: union of [0, 2] and
        [5, 7] is [0, 7], which includes 3 and 4 although neither operand
        does. The empty extent is its identity.
        """
        self._check_same_kind(other, "union")
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return self._normalized(min(self._lo, other._lo), max(self._hi, other._hi))

    def intersection(self, other: Extent) -> Extent:
        """Values in both operands; empty when they do not overlap."""
        self._check_same_kind(other, "intersection")
        if self.is_empty() or other.is_empty():
            return self.empty()
        return self._normalized(max(self._lo, other._lo), min(self._hi, other._hi))

    def __or__(self, other: object) -> Extent:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Extent:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.intersection(other)

    def _check_same_kind(self, other: Extent, operation: str) -> None:
        if not isinstance(other, Extent):
            raise TypeError(f"{operation} expects an Extent, got {type(other).__name__}")
        if type(other) is not type(self):
            raise KindMismatchError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}",
                context=ErrorContext(
                    operation=operation,
                    kind=self._kind_name(),
                    additional_info={"other_kind": other._kind_name()},
                ),
            )

    # ------------------------------------------------------------------
    # Iteration and conversion
    # ------------------------------------------------------------------

    def iter(self) -> ExtentIter:
        """Fresh iterator counting up from lo to hi."""
        return ExtentIter(self)

    def iter_rev(self) -> ExtentRevIter:
        """Fresh iterator counting down from hi to lo."""
        return ExtentRevIter(self)

    def __iter__(self) -> Iterator[int]:
        return self.iter()

    def __reversed__(self) -> Iterator[int]:
        return self.iter_rev()

    def to_range(self) -> range:
        """
        Convert to the exclusive range holding the same values.

        The empty extent becomes range(0, 0).

        Raises:
            ConversionError: If hi is the kind's maximum, so hi + 1 is not
                representable in the kind
        """
        if self.is_empty():
            return range(0, 0)
        if self.kind is not None and self._hi == self.kind.max_value:
            logger.debug(f"{self!r} reaches {self.kind.value} max, no exclusive end")
            raise ConversionError(
                f"{type(self).__name__} upper bound is the {self.kind.value} maximum, "
                "can't represent as an exclusive range",
                context=ErrorContext(operation="to_range", kind=self.kind.value, value=self._hi),
            )
        return range(self._lo, self._hi + 1)

    def __copy__(self) -> Extent:
        return self

    def __deepcopy__(self, memo: dict) -> Extent:
        return self

    # Pickle restores through object.__setattr__, past the frozen __setattr__
    def __getstate__(self) -> tuple[int, int]:
        return (self._lo, self._hi)

    def __setstate__(self, state: tuple[int, int]) -> None:
        lo, hi = state
        object.__setattr__(self, "_lo", lo)
        object.__setattr__(self, "_hi", hi)

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.is_empty():
            return f"{name}.empty()"
        return f"{name}({self._lo}, {self._hi})"

    def __str__(self) -> str:
        if self.is_empty():
            return "[]"
        return f"[{self._lo}, {self._hi}]"


def _make_kind_class(kind: IntKind) -> type[Extent]:
    name = f"Extent{kind.name}"
    return type(
        name,
        (Extent,),
        {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "__doc__": f"An inclusive range of {kind.value} integers, or the empty range.",
            "kind": kind,
        },
    )


_KIND_CLASSES: dict[IntKind, type[Extent]] = {kind: _make_kind_class(kind) for kind in IntKind}

# Module-level names so kind classes pickle by reference
ExtentI8 = _KIND_CLASSES[IntKind.I8]
ExtentI16 = _KIND_CLASSES[IntKind.I16]
ExtentI32 = _KIND_CLASSES[IntKind.I32]
ExtentI64 = _KIND_CLASSES[IntKind.I64]
ExtentI128 = _KIND_CLASSES[IntKind.I128]
ExtentU8 = _KIND_CLASSES[IntKind.U8]
ExtentU16 = _KIND_CLASSES[IntKind.U16]
ExtentU32 = _KIND_CLASSES[IntKind.U32]
ExtentU64 = _KIND_CLASSES[IntKind.U64]
ExtentU128 = _KIND_CLASSES[IntKind.U128]
