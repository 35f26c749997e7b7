"""Tests for the timing harness."""

import io
import re

import pytest

from streambench.errors import InvalidArgument
from streambench.runner import BenchmarkResult, run_benchmark, warm_up

REPORT_LINE = re.compile(r"^(\S+) time: avg of (\d+) = (\d+\.\d{2}) us$")


class TestRunBenchmark:
    def test_calls_function_times(self):
        calls = []
        run_benchmark(lambda: calls.append(1), times=4, out=io.StringIO())
        assert len(calls) == 4

    def test_report_line(self):
        out = io.StringIO()
        run_benchmark(lambda: None, times=3, name="noop", out=out)
        match = REPORT_LINE.match(out.getvalue().strip())
        assert match is not None
        assert match.group(1) == "noop"
        assert match.group(2) == "3"

    def test_default_name_and_stdout(self, capsys):
        def square():
            return 3 * 3

        result = run_benchmark(square, times=1)
        assert result.name == "square"
        assert capsys.readouterr().out.startswith("square time: avg of 1 = ")

    def test_returns_last_value(self):
        counter = iter(range(10))
        result = run_benchmark(lambda: next(counter), times=4, out=io.StringIO())
        assert result.value == 3
        assert result.times == 4
        assert result.wall_ns > 0
        assert result.cpu_ns >= 0

    @pytest.mark.parametrize("times", [0, -1])
    def test_rejects_non_positive_times(self, times):
        with pytest.raises(InvalidArgument):
            run_benchmark(lambda: None, times=times)

    def test_failures_propagate(self):
        def fail():
            raise ValueError("bad")

        with pytest.raises(ValueError):
            run_benchmark(fail, times=2, out=io.StringIO())


class TestBenchmarkResult:
    def test_average_in_microseconds(self):
        result = BenchmarkResult("x", times=4, wall_ns=8_000_000, cpu_ns=0)
        assert result.avg_us == pytest.approx(2000.125)

    def test_rounding_offset(self):
        # 1499 ns plus the 500 ns offset is 1.999 us, printed as 2.00
        result = BenchmarkResult("x", times=1, wall_ns=1499, cpu_ns=0)
        assert f"{result.avg_us:.2f}" == "2.00"


class TestWarmUp:
    def test_calls_each_function(self):
        counts = {"a": 0, "b": 0}

        def a():
            counts["a"] += 1

        def b():
            counts["b"] += 1

        warm_up((f for f in (a, b)), repetitions=25)
        assert counts == {"a": 25, "b": 25}

    def test_zero_repetitions(self):
        warm_up([lambda: pytest.fail("should not run")], repetitions=0)

    def test_negative_repetitions(self):
        with pytest.raises(InvalidArgument):
            warm_up([], repetitions=-1)
