from collections.abc import Sequence

from pyroaring import BitMap

from .base import BitmapVariant


class RoaringVariant(BitmapVariant):
    """Mutable, heap-allocated ``pyroaring.BitMap``."""

    LABEL = "roaring"

    def build(self, positions: Sequence[Sequence[int]]) -> list[BitMap]:
        bitmaps: list[BitMap] = []
        for data in positions:
            bm = BitMap(data)
            bm.run_optimize()
            bitmaps.append(bm)
        return bitmaps

    def wide_or_cardinality(self, bitmaps: Sequence[BitMap]) -> int:
        if not bitmaps:
            return 0
        return len(BitMap.union(*bitmaps))

    def size_in_bytes(self, bitmap: BitMap) -> int:
        return len(bitmap.serialize())
