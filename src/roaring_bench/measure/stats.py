import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties away from -inf (Java ``Math.round``)."""
    return math.floor(value + 0.5)


def percentile(sorted_samples: Sequence[int], p: float) -> int:
    """Linear-interpolated percentile over ascending samples.

    ``p <= 0`` yields the minimum and ``p >= 1`` the maximum. An empty
    sequence yields 0.
    """
    n = len(sorted_samples)
    if n == 0:
        return 0
    if p <= 0.0:
        return sorted_samples[0]
    if p >= 1.0:
        return sorted_samples[-1]

    pos = p * (n - 1)
    i = math.floor(pos)
    j = min(n - 1, i + 1)
    frac = pos - i
    return round_half_up(sorted_samples[i] * (1.0 - frac) + sorted_samples[j] * frac)


@dataclass(frozen=True)
class Stats:
    batch: int
    sorted_samples: tuple[int, ...]
    mean: float
    stdev: float
    median: int
    p90: int
    min: int
    max: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "batch": self.batch,
            "median": self.median,
            "p90": self.p90,
            "mean": self.mean,
            "stdev": self.stdev,
            "min": self.min,
            "max": self.max,
            "samples": list(self.sorted_samples),
        }


def summarize(samples: Sequence[int], batch: int) -> Stats:
    """Aggregate per-op duration samples (ns) into a Stats record.

    Args:
        samples: Non-empty, non-negative per-op durations.
        batch: Repetitions per timed sample that produced them.

    Returns:
        Stats with population mean/stdev (variance divided by n).
    """
    if not samples:
        raise ValueError("summarize() requires at least one sample")

    ordered = tuple(sorted(samples))
    n = len(ordered)

    mean = sum(ordered) / n
    var = sum((v - mean) * (v - mean) for v in ordered) / n

    return Stats(
        batch=batch,
        sorted_samples=ordered,
        mean=mean,
        stdev=math.sqrt(var),
        median=percentile(ordered, 0.50),
        p90=percentile(ordered, 0.90),
        min=ordered[0],
        max=ordered[-1],
    )
