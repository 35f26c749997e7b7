# streambench/runner.py
#
# The timing harness shared by every benchmark. A strategy call is wrapped in
# a zero-argument function, run a fixed number of times back to back, and the
# average latency per call is written to a results stream. Inputs are built by
# the caller before timing starts, so setup cost never enters the measurement.
# An untimed warm-up pass is run once per process to let allocator caches and
# pool threads settle before the first real measurement.

import sys
import time
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgument


@dataclass
class BenchmarkResult:
    """Measurements of one `run_benchmark` call."""
    name: str
    times: int
    wall_ns: int
    cpu_ns: int
    value: Any = None  # return value of the last call

    @property
    def avg_us(self) -> float:
        """Average wall time per call in microseconds, rounded half up at the ns level."""
        return (self.wall_ns + 500.0) / 1000 / self.times


def run_benchmark(func, times=4, name=None, out=None):
    """
    Runs a function repeatedly and reports its average latency.

    Args:
        func: Zero-argument callable wrapping the strategy invocation.
        times (int): Number of timed calls, at least 1.
        name (str): Label for the report line. Defaults to the function name.
        out: Stream the report line is written to. Defaults to stdout.

    Returns:
        BenchmarkResult: The timings and the value returned by the last call.
    """
    if times < 1:
        raise InvalidArgument(f"repetition count must be at least 1, got {times}")
    name = name if name is not None else getattr(func, "__name__", "benchmark")
    out = out if out is not None else sys.stdout

    value = None
    cpu_start = time.process_time_ns()
    wall_start = time.perf_counter_ns()
    for _ in range(times):
        value = func()
    wall_ns = time.perf_counter_ns() - wall_start
    cpu_ns = time.process_time_ns() - cpu_start

    result = BenchmarkResult(name, times, wall_ns, cpu_ns, value)
    print(f"{name} time: avg of {times} = {result.avg_us:.2f} us", file=out)
    return result


def warm_up(funcs, repetitions=10_000):
    """
    Calls every function `repetitions` times without timing it.

    Args:
        funcs: Iterable of zero-argument callables, normally the strategies
               bound to a small input.
        repetitions (int): Number of calls per function.
    """
    if repetitions < 0:
        raise InvalidArgument(f"warm-up repetitions must be non-negative, got {repetitions}")
    funcs = list(funcs)
    for _ in range(repetitions):
        for func in funcs:
            func()
