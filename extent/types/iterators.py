"""
Iterator adapters over the values of an Extent.

Both adapters copy the bounds of their source extent and keep an explicit
exhausted flag. The working bound is only stepped while it differs from
the opposite bound, so iterating up to a kind's maximum (or down to its
minimum) never produces a value outside the kind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extent.types.core import Extent


class ExtentIter:
    """Counts up from lo to hi inclusive."""

    __slots__ = ("_lo", "_hi", "_exhausted")

    def __init__(self, extent: Extent) -> None:
        self._lo = extent.lo_unchecked()
        self._hi = extent.hi_unchecked()
        self._exhausted = extent.is_empty()

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> ExtentIter:
        return self

    def __next__(self) -> int:
        if self._exhausted:
            raise StopIteration
        value = self._lo
        if self._lo == self._hi:
            self._exhausted = True
        else:
            self._lo += 1
        return value

    def __length_hint__(self) -> int:
        return 0 if self._exhausted else self._hi - self._lo + 1

    def rev(self) -> ExtentRevIter:
        """Count the values not yet yielded downwards instead."""
        rev = ExtentRevIter.__new__(ExtentRevIter)
        rev._lo = self._lo
        rev._hi = self._hi
        rev._exhausted = self._exhausted
        return rev

    def __repr__(self) -> str:
        if self._exhausted:
            return "ExtentIter(<exhausted>)"
        return f"ExtentIter({self._lo}..={self._hi})"


class ExtentRevIter:
    """Counts down from hi to lo inclusive."""

    __slots__ = ("_lo", "_hi", "_exhausted")

    def __init__(self, extent: Extent) -> None:
        self._lo = extent.lo_unchecked()
        self._hi = extent.hi_unchecked()
        self._exhausted = extent.is_empty()

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> ExtentRevIter:
        return self

    def __next__(self) -> int:
        if self._exhausted:
            raise StopIteration
        value = self._hi
        if self._hi == self._lo:
            self._exhausted = True
        else:
            self._hi -= 1
        return value

    def __length_hint__(self) -> int:
        return 0 if self._exhausted else self._hi - self._lo + 1

    def rev(self) -> ExtentIter:
        """Count the values not yet yielded upwards instead."""
        fwd = ExtentIter.__new__(ExtentIter)
        fwd._lo = self._lo
        fwd._hi = self._hi
        fwd._exhausted = self._exhausted
        return fwd

    def __repr__(self) -> str:
        if self._exhausted:
            return "ExtentRevIter(<exhausted>)"
        return f"ExtentRevIter({self._hi}..={self._lo})"
