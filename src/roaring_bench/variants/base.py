from collections.abc import Sequence
from typing import Any


class BitmapVariant:
    """One bitmap implementation under comparison.

    Subclasses must define:
        LABEL: Identifier used in task names and report rows
        build: Convert raw position lists into the variant's bitmaps

    The operations are assumed correct; the harness only times them.
    """

    LABEL: str = "base"

    def build(self, positions: Sequence[Sequence[int]]) -> list[Any]:
        raise NotImplementedError

    def and_cardinality(self, a: Any, b: Any) -> int:
        return len(a & b)

    def or_cardinality(self, a: Any, b: Any) -> int:
        return len(a | b)

    def wide_or_cardinality(self, bitmaps: Sequence[Any]) -> int:
        raise NotImplementedError

    def contains(self, bitmap: Any, value: int) -> bool:
        return value in bitmap

    def cardinality(self, bitmap: Any) -> int:
        return len(bitmap)

    def size_in_bytes(self, bitmap: Any) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.LABEL!r})"
