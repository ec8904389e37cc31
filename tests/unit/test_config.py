import pytest

from roaring_bench.config import (
    DEFAULT_SAMPLES,
    DEFAULT_TARGET_MS,
    DEFAULT_WARMUP_ITERS,
    BenchConfig,
)
from roaring_bench.errors import ConfigError


class TestBenchConfigCreate:
    def test_defaults(self) -> None:
        config = BenchConfig.create()
        assert config.warmup_iterations == DEFAULT_WARMUP_ITERS
        assert config.sample_count == DEFAULT_SAMPLES
        assert config.target_sample_ns == DEFAULT_TARGET_MS * 1_000_000

    def test_samples_clamped_to_five(self) -> None:
        assert BenchConfig.create(samples=2).sample_count == 5

    def test_negative_warmup_clamped_to_zero(self) -> None:
        assert BenchConfig.create(warmup=-5).warmup_iterations == 0

    @pytest.mark.parametrize("target_ms", [0, -3])
    def test_non_positive_target_clamped_to_one_ms(self, target_ms: int) -> None:
        assert BenchConfig.create(target_ms=target_ms).target_sample_ns == 1_000_000

    def test_target_converted_to_ns(self) -> None:
        config = BenchConfig.create(target_ms=7)
        assert config.target_sample_ns == 7_000_000
        assert config.target_sample_ms == 7

    def test_in_range_values_kept(self) -> None:
        config = BenchConfig.create(warmup=15, samples=30, target_ms=50)
        assert (config.warmup_iterations, config.sample_count) == (15, 30)


class TestBenchConfigInvariants:
    def test_direct_construction_rejects_few_samples(self) -> None:
        with pytest.raises(ValueError, match="sample_count"):
            BenchConfig(sample_count=4)

    def test_direct_construction_rejects_negative_warmup(self) -> None:
        with pytest.raises(ValueError, match="warmup_iterations"):
            BenchConfig(warmup_iterations=-1)

    def test_direct_construction_rejects_zero_target(self) -> None:
        with pytest.raises(ValueError, match="target_sample_ns"):
            BenchConfig(target_sample_ns=0)

    def test_config_is_frozen(self) -> None:
        config = BenchConfig.create()
        with pytest.raises(AttributeError):
            config.sample_count = 50  # type: ignore[misc]


class TestBenchConfigFromEnv:
    def test_defaults_without_env(self, clean_env: None) -> None:
        assert BenchConfig.from_env() == BenchConfig.create()

    def test_env_values_used(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROARING_BENCH_WARMUP", "3")
        monkeypatch.setenv("ROARING_BENCH_SAMPLES", "11")
        monkeypatch.setenv("ROARING_BENCH_TARGET_MS", "2")
        config = BenchConfig.from_env()
        assert config.warmup_iterations == 3
        assert config.sample_count == 11
        assert config.target_sample_ns == 2_000_000

    def test_env_values_clamped(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROARING_BENCH_SAMPLES", "1")
        monkeypatch.setenv("ROARING_BENCH_WARMUP", "-2")
        config = BenchConfig.from_env()
        assert config.sample_count == 5
        assert config.warmup_iterations == 0

    def test_explicit_overrides_env(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROARING_BENCH_SAMPLES", "11")
        assert BenchConfig.from_env(samples=8).sample_count == 8

    def test_blank_env_uses_default(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROARING_BENCH_SAMPLES", "  ")
        assert BenchConfig.from_env().sample_count == DEFAULT_SAMPLES

    def test_malformed_env_raises(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROARING_BENCH_WARMUP", "lots")
        with pytest.raises(ConfigError, match="ROARING_BENCH_WARMUP") as exc_info:
            BenchConfig.from_env()
        assert exc_info.value.error_code == "CONFIG_INVALID"


def test_package_exports_match_settings() -> None:
    import roaring_bench.config as config_pkg
    import roaring_bench.config.settings as settings_mod

    assert sorted(config_pkg.__all__) == sorted(settings_mod.__all__)
    for name in config_pkg.__all__:
        assert getattr(config_pkg, name) is getattr(settings_mod, name)
