import pytest
from pyroaring import BitMap, FrozenBitMap

from roaring_bench.variants import VARIANTS, BufferVariant, RoaringVariant, get_variant

POSITIONS = [[1, 2, 3], [2, 3, 4], [], [100, 200, 300]]


def test_registry_order() -> None:
    assert list(VARIANTS) == ["roaring", "buffer"]


def test_get_variant_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown variant"):
        get_variant("sparse")


def test_roaring_builds_mutable_bitmaps() -> None:
    bitmaps = RoaringVariant().build(POSITIONS)
    assert all(isinstance(bm, BitMap) for bm in bitmaps)
    assert [list(bm) for bm in bitmaps] == POSITIONS


def test_buffer_builds_frozen_bitmaps() -> None:
    bitmaps = BufferVariant().build(POSITIONS)
    assert all(isinstance(bm, FrozenBitMap) for bm in bitmaps)
    assert [list(bm) for bm in bitmaps] == POSITIONS


@pytest.mark.parametrize("label", list(VARIANTS))
class TestVariantOperations:
    def test_pairwise(self, label: str) -> None:
        variant = get_variant(label)
        a, b = variant.build([[1, 2, 3], [2, 3, 4]])
        assert variant.and_cardinality(a, b) == 2
        assert variant.or_cardinality(a, b) == 4

    def test_wide_or(self, label: str) -> None:
        variant = get_variant(label)
        bitmaps = variant.build(POSITIONS)
        assert variant.wide_or_cardinality(bitmaps) == 7
        assert variant.wide_or_cardinality(bitmaps[:1]) == 3
        assert variant.wide_or_cardinality([]) == 0

    def test_contains_and_cardinality(self, label: str) -> None:
        variant = get_variant(label)
        (bm,) = variant.build([[5, 10]])
        assert variant.contains(bm, 10)
        assert not variant.contains(bm, 7)
        assert variant.cardinality(bm) == 2

    def test_size_in_bytes_positive(self, label: str) -> None:
        variant = get_variant(label)
        (bm,) = variant.build([list(range(1000))])
        assert variant.size_in_bytes(bm) > 0
