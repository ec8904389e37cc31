"""Configuration module for roaring-bench."""

from .settings import (
    DEFAULT_SAMPLES,
    DEFAULT_TARGET_MS,
    DEFAULT_WARMUP_ITERS,
    ENV_DOTENV_PATH,
    ENV_LOG_LEVEL,
    MAX_BATCH,
    MIN_SAMPLES,
    MIN_WARMUP_ITERS,
    BenchConfig,
)

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
