__version__ = "0.1.0"

from .config import BenchConfig
from .measure import MeasurementEngine, NamedTask, Sink, Stats, summarize
from .runner import BenchmarkSuite, ResultRow

__all__ = [
    "__version__",
    "BenchConfig",
    "BenchmarkSuite",
    "MeasurementEngine",
    "NamedTask",
    "ResultRow",
    "Sink",
    "Stats",
    "summarize",
]
