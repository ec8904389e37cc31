import logging
import math
from collections.abc import Sequence
from typing import Any

from ..config import BenchConfig
from ..datasets import ZipPositionsDataset, universe_size
from ..errors import EmptyDatasetError
from ..measure import MeasurementEngine
from ..variants import VARIANTS, BitmapVariant
from .results import ResultRow
from .tasks import TaskFactory

logger = logging.getLogger(__name__)


def bits_per_value(variant: BitmapVariant, bitmaps: Sequence[Any]) -> float:
    """Encoded bits per stored element; NaN when the collection holds no elements."""
    total_card = 0
    total_bytes = 0
    for bm in bitmaps:
        total_card += variant.cardinality(bm)
        total_bytes += variant.size_in_bytes(bm)
    if total_card == 0:
        return math.nan
    return (total_bytes * 8.0) / total_card


class BenchmarkSuite:
    """Runs the four comparison tasks for each variant of a dataset.

    One engine (and so one sink) is shared across every task and variant.
    """

    def __init__(
        self,
        config: BenchConfig,
        *,
        engine: MeasurementEngine | None = None,
        variants: Sequence[BitmapVariant] | None = None,
    ) -> None:
        self.config = config
        self.engine = engine if engine is not None else MeasurementEngine(config)
        self.variants = list(variants) if variants is not None else list(VARIANTS.values())

    def run_variant(
        self,
        dataset_name: str,
        variant: BitmapVariant,
        positions: Sequence[Sequence[int]],
        universe: int,
    ) -> ResultRow:
        bitmaps = variant.build(positions)
        bpv = bits_per_value(variant, bitmaps)
        logger.info(
            "%s/%s: %d bitmaps, %.2f bits/value", dataset_name, variant.LABEL, len(bitmaps), bpv
        )

        factory = TaskFactory(variant, bitmaps, universe)
        stats = [self.engine.measure(t) for t in factory.all_tasks()]
        and2by2, or2by2, wide_or, contains3 = stats
        return ResultRow(
            dataset=dataset_name,
            impl=variant.LABEL,
            bits_per_value=bpv,
            and2by2=and2by2,
            or2by2=or2by2,
            wide_or=wide_or,
            contains3=contains3,
        )

    def run_dataset(
        self, dataset_name: str, positions: Sequence[Sequence[int]]
    ) -> list[ResultRow]:
        """Measure every variant over already-loaded positions.

        Raises:
            EmptyDatasetError: ``positions`` has no records.
        """
        if not positions:
            raise EmptyDatasetError(dataset_name)

        universe = universe_size(positions)
        return [
            self.run_variant(dataset_name, variant, positions, universe)
            for variant in self.variants
        ]

    def run(self, dataset: ZipPositionsDataset) -> list[ResultRow]:
        return self.run_dataset(dataset.name, dataset.fetch_positions())
