# streambench/driver.py
#
# Orchestrates a benchmark run. The driver warms up once, then walks the size
# matrix in ascending order: for every size it generates a fresh input, times
# the sequential, declarative and parallel strategies, checks that all three
# returned the same value, and prints a short report. A disagreement stops the
# run with CorrectnessMismatch, because timing a wrong parallel merge is
# meaningless.

import enum
import functools
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from . import data
from .config import BenchConfig
from .errors import BenchmarkError, CorrectnessMismatch
from .runner import BenchmarkResult, run_benchmark, warm_up
from .runtime.manager import ForkJoinPool
from .strategies import sequential, declarative, parallel

# Relative tolerance when comparing per-owner sums built in different orders.
SUM_REL_TOL = 1e-9

STRATEGY_KINDS = ("sequential", "declarative", "parallel")


class DriverState(enum.Enum):
    IDLE = "idle"
    WARMING = "warming"
    RUN_SEQUENTIAL = "run_sequential"
    RUN_DECLARATIVE = "run_declarative"
    RUN_PARALLEL = "run_parallel"
    VERIFY = "verify"
    REPORT = "report"
    DONE = "done"
    FAILED = "failed"


_RUN_STATES = {
    "sequential": DriverState.RUN_SEQUENTIAL,
    "declarative": DriverState.RUN_DECLARATIVE,
    "parallel": DriverState.RUN_PARALLEL,
}


def minimums_match(left, right):
    return left == right


def sums_match(left, right, rel_tol=SUM_REL_TOL):
    """True if both mappings have the same keys and every sum agrees within `rel_tol`."""
    if left.keys() != right.keys():
        return False
    return all(math.isclose(left[key], right[key], rel_tol=rel_tol) for key in left)


@dataclass(frozen=True)
class Workload:
    """
    One benchmark: an input generator and the three strategies reducing it.

    `parallel` takes the input and a ForkJoinPool. `summary`, if set, turns
    the verified result into an extra report line.
    """
    name: str
    label: str
    prefix: str
    generate: Callable[[int], Any]
    sequential: Callable[[Any], Any]
    declarative: Callable[[Any], Any]
    parallel: Callable[[Any, ForkJoinPool], Any]
    matches: Callable[[Any, Any], bool] = minimums_match
    summary: Optional[Callable[[Any], str]] = None


WORKLOADS = {
    "int": Workload(
        name="int",
        label="array length",
        prefix="min_int",
        generate=data.random_ints,
        sequential=sequential.min_value,
        declarative=declarative.min_value,
        parallel=parallel.min_value,
    ),
    "string": Workload(
        name="string",
        label="List length",
        prefix="min_string",
        generate=data.random_strings,
        sequential=sequential.min_value,
        declarative=declarative.min_value,
        parallel=parallel.min_value,
    ),
    "order": Workload(
        name="order",
        label="orders length",
        prefix="sum_orders",
        generate=data.generate_orders,
        sequential=sequential.sum_by_owner,
        declarative=declarative.sum_by_owner,
        parallel=parallel.sum_by_owner,
        matches=sums_match,
        summary=lambda totals: f"users={len(totals)}",
    ),
}


@dataclass
class SizeReport:
    """Timings of every strategy for one entry of the size matrix."""
    size: int
    results: Dict[str, BenchmarkResult] = field(default_factory=dict)
    verified: bool = False


class BenchmarkDriver:
    """
    Runs one workload over its size matrix.

    Example:
        driver = BenchmarkDriver(WORKLOADS["int"], BenchConfig.quick("int"))
        reports = driver.run()
    """
    def __init__(self, workload, config, out=None, pool=None):
        self.workload = workload
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.pool = pool
        self.state = DriverState.IDLE
        self.history = [DriverState.IDLE]

    def _enter(self, state):
        self.state = state
        self.history.append(state)

    def _strategies(self, pool):
        """Returns the strategies in timing order as (kind, single-argument callable)."""
        return [
            ("sequential", self.workload.sequential),
            ("declarative", self.workload.declarative),
            ("parallel", functools.partial(self.workload.parallel, pool=pool)),
        ]

    def run(self):
        """
        Warms up, then benchmarks every size in the matrix.

        Returns:
            list[SizeReport]: One report per size, in ascending size order.
        """
        owns_pool = self.pool is None
        pool = self.pool
        if owns_pool:
            pool = ForkJoinPool(self.config.workers, kind=self.config.executor)
        try:
            print(f"--- Running {self.workload.name} benchmark on {pool} ---", file=self.out)
            pool.warm_up()
            self._warm(pool)
            reports = [self._run_size(size, pool) for size in self.config.sizes]
        except BenchmarkError:
            self._enter(DriverState.FAILED)
            raise
        finally:
            if owns_pool:
                pool.shutdown()
        self._enter(DriverState.DONE)
        return reports

    def _warm(self, pool):
        self._enter(DriverState.WARMING)
        if self.config.warmup_reps == 0:
            return
        sample = self.workload.generate(self.config.warmup_size)
        funcs = [functools.partial(strategy, sample) for _, strategy in self._strategies(pool)]
        warm_up(funcs, self.config.warmup_reps)

    def _run_size(self, size, pool):
        print(f"---{self.workload.label}: {size}---", file=self.out)
        collection = self.workload.generate(size)
        report = SizeReport(size)

        for kind, strategy in self._strategies(pool):
            self._enter(_RUN_STATES[kind])
            name = f"{self.workload.prefix}_{kind}"
            report.results[kind] = run_benchmark(
                functools.partial(strategy, collection),
                times=self.config.times,
                name=name,
                out=self.out,
            )

        self._enter(DriverState.VERIFY)
        values = {kind: result.value for kind, result in report.results.items()}
        report.verified = self._verify(values)
        print(report.verified, file=self.out)
        if not report.verified:
            raise CorrectnessMismatch(self.workload.name, size, values)

        self._enter(DriverState.REPORT)
        if self.workload.summary is not None:
            print(self.workload.summary(values["parallel"]), file=self.out)
        return report

    def _verify(self, values):
        reference = values["sequential"]
        return all(self.workload.matches(reference, values[kind]) for kind in STRATEGY_KINDS[1:])


def run_workload(name, config=None, out=None, err=None):
    """
    Runs a workload end to end and converts failures into an exit code.

    Returns:
        int: 0 when every size verified, 1 on any BenchmarkError.
    """
    err = err if err is not None else sys.stderr
    try:
        config = config if config is not None else BenchConfig.default(name)
        BenchmarkDriver(WORKLOADS[config.workload], config, out=out).run()
    except BenchmarkError as e:
        print(f"streambench: {type(e).__name__}: {e}", file=err)
        return 1
    return 0
