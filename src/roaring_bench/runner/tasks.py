from collections.abc import Sequence
from typing import Any

from ..measure import NamedTask
from ..variants import BitmapVariant


def query_points(universe: int) -> tuple[int, int, int]:
    """Quartile probes over ``[0, universe]`` used by the membership task."""
    return universe // 4, universe // 2, (3 * universe) // 4


class TaskFactory:
    """Builds the fixed comparison tasks for one variant over prebuilt bitmaps.

    Each task is a closure over read-only shared data and returns a count
    derived from the operation output.
    """

    def __init__(self, variant: BitmapVariant, bitmaps: Sequence[Any], universe: int) -> None:
        self.variant = variant
        self.bitmaps = bitmaps
        self.universe = universe

    def _name(self, op: str) -> str:
        return f"{self.variant.LABEL}.{op}"

    def and2by2(self) -> NamedTask:
        variant, bitmaps = self.variant, self.bitmaps

        def run() -> int:
            acc = 0
            for i in range(len(bitmaps) - 1):
                acc += variant.and_cardinality(bitmaps[i], bitmaps[i + 1])
            return acc

        return NamedTask(self._name("and2by2"), run)

    def or2by2(self) -> NamedTask:
        variant, bitmaps = self.variant, self.bitmaps

        def run() -> int:
            acc = 0
            for i in range(len(bitmaps) - 1):
                acc += variant.or_cardinality(bitmaps[i], bitmaps[i + 1])
            return acc

        return NamedTask(self._name("or2by2"), run)

    def wide_or(self) -> NamedTask:
        variant, bitmaps = self.variant, self.bitmaps
        return NamedTask(self._name("wideOr"), lambda: variant.wide_or_cardinality(bitmaps))

    def contains3(self) -> NamedTask:
        variant, bitmaps = self.variant, self.bitmaps
        q1, q2, q3 = query_points(self.universe)

        def run() -> int:
            count = 0
            for bm in bitmaps:
                if variant.contains(bm, q1):
                    count += 1
                if variant.contains(bm, q2):
                    count += 1
                if variant.contains(bm, q3):
                    count += 1
            return count

        return NamedTask(self._name("contains3"), run)

    def all_tasks(self) -> list[NamedTask]:
        """All four tasks, in report column order."""
        return [self.and2by2(), self.or2by2(), self.wide_or(), self.contains3()]
