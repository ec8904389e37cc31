import platform
import sys
from datetime import datetime
from importlib import metadata as importlib_metadata
from typing import Any

from ..config import BenchConfig


def _package_version(name: str) -> str | None:
    try:
        return importlib_metadata.version(name)
    except importlib_metadata.PackageNotFoundError:
        return None


def build_run_metadata(
    *,
    config: BenchConfig,
    datasets: list[str],
    variants: list[str],
    started_at: datetime,
    completed_at: datetime,
    duration_ms: float,
) -> dict[str, Any]:
    """Build reproducibility metadata for this benchmark run."""
    return {
        "started_at": started_at.isoformat(),
        "completed_at": completed_at.isoformat(),
        "duration_ms": duration_ms,
        "datasets": datasets,
        "variants": variants,
        "config": {
            "warmup_iterations": config.warmup_iterations,
            "sample_count": config.sample_count,
            "target_sample_ns": config.target_sample_ns,
        },
        "environment": {
            "python": sys.version.split()[0],
            "implementation": platform.python_implementation(),
            "platform": platform.platform(),
            "machine": platform.machine(),
            "roaring_bench": _package_version("roaring-bench"),
            "pyroaring": _package_version("pyroaring"),
        },
    }
