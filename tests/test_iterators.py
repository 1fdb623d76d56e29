"""
Tests for ExtentIter and ExtentRevIter:
- Forward and reverse order
- Empty extents start exhausted
- No stepping past a kind's maximum or minimum
- Iterators copy their source and are not restartable
"""

import operator

from extent import (
    Extent,
    ExtentI8,
    ExtentI64,
    ExtentIter,
    ExtentRevIter,
    ExtentU8,
    ExtentU64,
    IntKind,
)


class TestExtentIter:
    """Tests for forward iteration."""

    def test_counts_up(self):
        assert list(Extent(0, 5).iter()) == [0, 1, 2, 3, 4, 5]

    def test_iter_protocol(self):
        e = Extent(-2, 1)
        assert list(e) == [-2, -1, 0, 1]
        assert isinstance(iter(e), ExtentIter)

    def test_single_value(self):
        it = Extent(7, 7).iter()
        assert next(it) == 7
        assert it.exhausted is True
        assert list(it) == []

    def test_empty_starts_exhausted(self):
        it = ExtentU8.empty().iter()
        assert it.exhausted is True
        assert list(it) == []

    def test_stops_at_kind_max(self):
        """The last value is the kind maximum, never max + 1."""
        top = IntKind.U64.max_value
        values = list(ExtentU64(top - 2, top).iter())
        assert values == [top - 2, top - 1, top]
        assert all(IntKind.U64.contains(v) for v in values)

    def test_full_u8_range(self):
        assert list(ExtentU8(0, 255).iter()) == list(range(256))

    def test_full_i8_range(self):
        assert list(ExtentI8(-128, 127).iter()) == list(range(-128, 128))

    def test_not_restartable(self):
        it = Extent(0, 2).iter()
        assert list(it) == [0, 1, 2]
        assert list(it) == []

    def test_source_unaffected(self):
        e = Extent(0, 3)
        it = e.iter()
        next(it)
        next(it)
        assert e == Extent(0, 3)
        assert list(e.iter()) == [0, 1, 2, 3]

    def test_independent_iterators(self):
        e = Extent(0, 3)
        a = e.iter()
        b = e.iter()
        next(a)
        assert next(b) == 0
        assert next(a) == 1

    def test_length_hint(self):
        it = Extent(0, 5).iter()
        assert operator.length_hint(it) == 6
        next(it)
        assert operator.length_hint(it) == 5
        list(it)
        assert operator.length_hint(it) == 0

    def test_rev_continues_with_remaining(self):
        """rev() counts the values not yet yielded downwards."""
        it = Extent(0, 5).iter()
        assert next(it) == 0
        assert next(it) == 1
        rev = it.rev()
        assert isinstance(rev, ExtentRevIter)
        assert list(rev) == [5, 4, 3, 2]

    def test_rev_of_exhausted(self):
        it = Extent(0, 0).iter()
        next(it)
        assert list(it.rev()) == []

    def test_repr(self):
        it = Extent(0, 5).iter()
        assert repr(it) == "ExtentIter(0..=5)"
        list(it)
        assert repr(it) == "ExtentIter(<exhausted>)"


class TestExtentRevIter:
    """Tests for reverse iteration."""

    def test_counts_down(self):
        assert list(Extent(0, 5).iter_rev()) == [5, 4, 3, 2, 1, 0]

    def test_reversed_protocol(self):
        e = Extent(-2, 1)
        assert list(reversed(e)) == [1, 0, -1, -2]
        assert isinstance(reversed(e), ExtentRevIter)

    def test_empty_starts_exhausted(self):
        it = Extent.empty().iter_rev()
        assert it.exhausted is True
        assert list(it) == []

    def test_stops_at_unsigned_zero(self):
        """Counting down to zero never yields -1."""
        assert list(ExtentU8(0, 2).iter_rev()) == [2, 1, 0]

    def test_stops_at_signed_min(self):
        bottom = IntKind.I64.min_value
        assert list(ExtentI64(bottom, bottom + 1).iter_rev()) == [bottom + 1, bottom]

    def test_full_u8_range(self):
        assert list(ExtentU8(0, 255).iter_rev()) == list(range(255, -1, -1))

    def test_full_i8_range(self):
        assert list(ExtentI8(-128, 127).iter_rev()) == list(range(127, -129, -1))

    def test_matches_reversed_forward(self):
        e = ExtentI8(-10, 10)
        assert list(e.iter()) == list(reversed(list(e.iter_rev())))

    def test_rev_continues_with_remaining(self):
        it = Extent(0, 5).iter_rev()
        assert next(it) == 5
        fwd = it.rev()
        assert isinstance(fwd, ExtentIter)
        assert list(fwd) == [0, 1, 2, 3, 4]

    def test_length_hint(self):
        it = ExtentU8(250, 255).iter_rev()
        assert operator.length_hint(it) == 6
        next(it)
        assert operator.length_hint(it) == 5

    def test_repr(self):
        assert repr(Extent(0, 5).iter_rev()) == "ExtentRevIter(5..=0)"
