import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from roaring_bench.config import BenchConfig
from roaring_bench.measure import MeasurementEngine, NamedTask, Sink


class FakeClock:
    """Deterministic nanosecond clock advanced explicitly by tasks."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def costed_task(fake_clock: FakeClock) -> Callable[..., NamedTask]:
    """Task factory whose every run advances ``fake_clock`` by ``cost_ns``."""

    def _make(cost_ns: int, result: int = 1, name: str = "fake") -> NamedTask:
        def run() -> int:
            fake_clock.advance(cost_ns)
            return result

        return NamedTask(name, run)

    return _make


@pytest.fixture
def fast_config() -> BenchConfig:
    return BenchConfig.create(warmup=0, samples=5, target_ms=1)


@pytest.fixture
def engine(fast_config: BenchConfig, fake_clock: FakeClock) -> MeasurementEngine:
    return MeasurementEngine(fast_config, sink=Sink(), clock=fake_clock)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in [
        "ROARING_BENCH_WARMUP",
        "ROARING_BENCH_SAMPLES",
        "ROARING_BENCH_TARGET_MS",
        "ROARING_BENCH_LOG_LEVEL",
        "ROARING_BENCH_DOTENV_PATH",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Write a dataset archive from ``(entry_name, line)`` pairs, in order."""

    def _make(entries: list[tuple[str, str | bytes]], name: str = "dataset.zip") -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry, line in entries:
                zf.writestr(entry, line)
        return path

    return _make


@pytest.fixture
def small_zip(make_zip: Callable[..., Path]) -> Path:
    return make_zip([("a.txt", "1,2,3\n"), ("b.txt", "2,3,4\n")], name="small.zip")
