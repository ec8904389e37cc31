from collections.abc import Sequence

from pyroaring import BitMap, FrozenBitMap

from .base import BitmapVariant


class BufferVariant(BitmapVariant):
    """Read-only ``pyroaring.FrozenBitMap`` deserialized from a byte region.

    Each record is built as a mutable bitmap, run-optimized, serialized, and
    the frozen bitmap is restored from those bytes.
    """

    LABEL = "buffer"

    def build(self, positions: Sequence[Sequence[int]]) -> list[FrozenBitMap]:
        bitmaps: list[FrozenBitMap] = []
        for data in positions:
            bm = BitMap(data)
            bm.run_optimize()
            bitmaps.append(FrozenBitMap.deserialize(bm.serialize()))
        return bitmaps

    def wide_or_cardinality(self, bitmaps: Sequence[FrozenBitMap]) -> int:
        if not bitmaps:
            return 0
        return len(FrozenBitMap.union(*bitmaps))

    def size_in_bytes(self, bitmap: FrozenBitMap) -> int:
        return len(bitmap.serialize())
