import logging
import time
from collections.abc import Callable
from enum import Enum

from ..config import MAX_BATCH, BenchConfig
from .calibrate import calibrate_batch
from .sink import Sink
from .stats import Stats, summarize
from .task import Task

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    WARMUP = "warmup"
    CALIBRATE = "calibrate"
    SAMPLE = "sample"
    DONE = "done"


class MeasurementEngine:
    """Runs warmup, batch calibration and sampling for one task at a time.

    Single-threaded and synchronous. Exceptions raised by a task propagate
    unchanged; a failing task aborts the run.
    """

    def __init__(
        self,
        config: BenchConfig,
        *,
        sink: Sink | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
        max_batch: int = MAX_BATCH,
    ) -> None:
        self.config = config
        self.sink = sink if sink is not None else Sink()
        self._clock = clock
        self._max_batch = max_batch
        self.phase = Phase.IDLE

    def _enter(self, phase: Phase, name: str) -> None:
        self.phase = phase
        logger.debug("%s: %s", name, phase.value)

    def warmup(self, task: Task) -> None:
        for _ in range(self.config.warmup_iterations):
            self.sink.fold(task.run())

    def sample(self, task: Task, batch: int) -> list[int]:
        """Collect ``sample_count`` per-op durations (ns), each from one timed batch."""
        clock = self._clock
        samples: list[int] = []
        for _ in range(self.config.sample_count):
            acc = 0
            start = clock()
            for _ in range(batch):
                acc ^= task.run()
            stop = clock()
            self.sink.fold(acc)

            # Clock anomalies must not produce negative durations
            samples.append(max(0, (stop - start) // batch))
        return samples

    def measure(self, task: Task) -> Stats:
        self._enter(Phase.WARMUP, task.name)
        self.warmup(task)

        self._enter(Phase.CALIBRATE, task.name)
        batch = calibrate_batch(
            task,
            self.config.target_sample_ns,
            sink=self.sink,
            clock=self._clock,
            max_batch=self._max_batch,
        )

        self._enter(Phase.SAMPLE, task.name)
        samples = self.sample(task, batch)

        self._enter(Phase.DONE, task.name)
        stats = summarize(samples, batch)
        logger.info(
            "Measured %s: median=%dns p90=%dns batch=%d", task.name, stats.median, stats.p90, batch
        )
        return stats
