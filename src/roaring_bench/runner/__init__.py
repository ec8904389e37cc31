"""Benchmark suite driver (variant setup, task construction, result rows).

Modules:
    - suite: BenchmarkSuite class and bits-per-value metric
    - tasks: TaskFactory for the four comparison tasks
    - results: ResultRow, RunReport data structures
    - metadata: Run metadata collection
"""

from .results import ResultRow, RunReport
from .suite import BenchmarkSuite, bits_per_value
from .tasks import TaskFactory, query_points

__all__ = [
    "BenchmarkSuite",
    "ResultRow",
    "RunReport",
    "TaskFactory",
    "bits_per_value",
    "query_points",
]
