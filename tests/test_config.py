"""Tests for the run configuration."""

import pytest

from streambench.config import BenchConfig, DEFAULT_SIZES
from streambench.errors import InvalidArgument


class TestBenchConfig:
    def test_defaults(self):
        config = BenchConfig()
        assert config.workload == "int"
        assert config.sizes == DEFAULT_SIZES["int"]
        assert config.times == 4
        assert config.warmup_reps == 10_000
        assert config.workers is None
        assert config.executor == "thread"

    @pytest.mark.parametrize("workload", sorted(DEFAULT_SIZES))
    def test_default_sizes_follow_workload(self, workload):
        config = BenchConfig.default(workload)
        assert config.sizes == DEFAULT_SIZES[workload]
        assert list(config.sizes) == sorted(config.sizes)

    def test_sizes_are_sorted(self):
        assert BenchConfig(sizes=[1000, 10, 100]).sizes == (10, 100, 1000)

    def test_quick(self):
        config = BenchConfig.quick("order")
        assert config.workload == "order"
        assert config.sizes == (10, 1_000)
        assert config.workers == 2

    @pytest.mark.parametrize("kwargs", [
        {"workload": "float"},
        {"sizes": ()},
        {"sizes": (0, 10)},
        {"sizes": (-10,)},
        {"times": 0},
        {"warmup_reps": -1},
        {"warmup_size": 0},
        {"workers": 0},
        {"executor": "gpu"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidArgument):
            BenchConfig(**kwargs)
