import logging
import os
from dataclasses import dataclass

from ..errors import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SAMPLES",
    "DEFAULT_TARGET_MS",
    "DEFAULT_WARMUP_ITERS",
    "ENV_DOTENV_PATH",
    "ENV_LOG_LEVEL",
    "MAX_BATCH",
    "MIN_SAMPLES",
    "MIN_WARMUP_ITERS",
    "BenchConfig",
]

# Defaults (overridable via env, then CLI)
DEFAULT_WARMUP_ITERS = 10
DEFAULT_SAMPLES = 20
DEFAULT_TARGET_MS = 50  # per timed sample

# Floors applied to user-supplied values
MIN_WARMUP_ITERS = 0
MIN_SAMPLES = 5  # below this, median/p90 are meaningless
MIN_TARGET_MS = 1

# Ceiling on task repetitions folded into one timed sample
MAX_BATCH = 100

NS_PER_MS = 1_000_000

# Environment variable names
ENV_WARMUP = "ROARING_BENCH_WARMUP"
ENV_SAMPLES = "ROARING_BENCH_SAMPLES"
ENV_TARGET_MS = "ROARING_BENCH_TARGET_MS"
ENV_LOG_LEVEL = "ROARING_BENCH_LOG_LEVEL"
ENV_DOTENV_PATH = "ROARING_BENCH_DOTENV_PATH"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(name, raw) from exc


@dataclass(frozen=True)
class BenchConfig:
    warmup_iterations: int = DEFAULT_WARMUP_ITERS
    sample_count: int = DEFAULT_SAMPLES
    target_sample_ns: int = DEFAULT_TARGET_MS * NS_PER_MS

    def __post_init__(self) -> None:
        if self.warmup_iterations < MIN_WARMUP_ITERS:
            raise ValueError(f"warmup_iterations must be >= {MIN_WARMUP_ITERS}")
        if self.sample_count < MIN_SAMPLES:
            raise ValueError(f"sample_count must be >= {MIN_SAMPLES}")
        if self.target_sample_ns <= 0:
            raise ValueError("target_sample_ns must be positive")

    @classmethod
    def create(
        cls,
        *,
        warmup: int = DEFAULT_WARMUP_ITERS,
        samples: int = DEFAULT_SAMPLES,
        target_ms: int = DEFAULT_TARGET_MS,
    ) -> "BenchConfig":
        """Build a config from user-facing values, clamping out-of-range ones.

        Negative warmup becomes 0, fewer than 5 samples becomes 5 and a
        non-positive target becomes 1 ms.
        """
        clamped_warmup = max(MIN_WARMUP_ITERS, warmup)
        clamped_samples = max(MIN_SAMPLES, samples)
        clamped_ms = max(MIN_TARGET_MS, target_ms)
        if (clamped_warmup, clamped_samples, clamped_ms) != (warmup, samples, target_ms):
            logger.debug(
                "Clamped config: warmup %d->%d, samples %d->%d, targetMs %d->%d",
                warmup,
                clamped_warmup,
                samples,
                clamped_samples,
                target_ms,
                clamped_ms,
            )
        return cls(
            warmup_iterations=clamped_warmup,
            sample_count=clamped_samples,
            target_sample_ns=clamped_ms * NS_PER_MS,
        )

    @classmethod
    def from_env(
        cls,
        *,
        warmup: int | None = None,
        samples: int | None = None,
        target_ms: int | None = None,
    ) -> "BenchConfig":
        """Resolve config with priority: explicit argument > env var > default."""
        return cls.create(
            warmup=warmup if warmup is not None else _env_int(ENV_WARMUP, DEFAULT_WARMUP_ITERS),
            samples=samples if samples is not None else _env_int(ENV_SAMPLES, DEFAULT_SAMPLES),
            target_ms=(
                target_ms if target_ms is not None else _env_int(ENV_TARGET_MS, DEFAULT_TARGET_MS)
            ),
        )

    @property
    def target_sample_ms(self) -> float:
        return self.target_sample_ns / NS_PER_MS
