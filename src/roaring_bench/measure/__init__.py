"""Measurement engine: warmup, batch calibration, sampling and statistics.

Modules:
    - task: Task protocol and NamedTask
    - sink: anti-elimination accumulator
    - stats: percentile and Stats aggregation
    - calibrate: one-shot batch calibration
    - engine: MeasurementEngine phase sequence
"""

from .calibrate import calibrate_batch
from .engine import MeasurementEngine, Phase
from .sink import Sink
from .stats import Stats, percentile, round_half_up, summarize
from .task import NamedTask, Task

__all__ = [
    "MeasurementEngine",
    "NamedTask",
    "Phase",
    "Sink",
    "Stats",
    "Task",
    "calibrate_batch",
    "percentile",
    "round_half_up",
    "summarize",
]
