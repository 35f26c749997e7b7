# streambench/config.py
#
# Run configuration for the benchmark driver. There are no config files or
# environment variables: the defaults below are the configuration, and the
# command line tool overrides individual fields.

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidArgument
from .runtime.manager import EXECUTOR_KINDS

# Ascending size matrices per workload. The string and order workloads build
# one Python object per element, so they stop earlier than the integer one.
DEFAULT_SIZES = {
    "int": (10_000, 100_000, 1_000_000, 10_000_000, 100_000_000),
    "string": (10_000, 100_000, 1_000_000, 10_000_000),
    "order": (10_000, 100_000, 1_000_000, 10_000_000),
}


@dataclass
class BenchConfig:
    """
    Settings for one benchmark run.

    `sizes` is the size matrix, walked in ascending order. `times` is the
    number of timed calls per strategy and size. The warm-up calls every
    strategy `warmup_reps` times on a `warmup_size` input before any timing.
    """

    workload: str = "int"
    sizes: Optional[Tuple[int, ...]] = None  # None: the workload default
    times: int = 4
    warmup_reps: int = 10_000
    warmup_size: int = 100
    workers: Optional[int] = None  # None: one worker per CPU
    executor: str = "thread"

    def __post_init__(self):
        if self.workload not in DEFAULT_SIZES:
            raise InvalidArgument(
                f"unknown workload '{self.workload}', expected one of {sorted(DEFAULT_SIZES)}"
            )
        if self.sizes is None:
            self.sizes = DEFAULT_SIZES[self.workload]
        self.sizes = tuple(sorted(self.sizes))
        if not self.sizes:
            raise InvalidArgument("the size matrix is empty")
        if self.sizes[0] < 1:
            raise InvalidArgument(f"sizes must be positive, got {self.sizes[0]}")
        if self.times < 1:
            raise InvalidArgument(f"repetition count must be at least 1, got {self.times}")
        if self.warmup_reps < 0 or self.warmup_size < 1:
            raise InvalidArgument("warm-up needs a non-negative repetition count and a positive size")
        if self.workers is not None and self.workers < 1:
            raise InvalidArgument(f"worker count must be positive, got {self.workers}")
        if self.executor not in EXECUTOR_KINDS:
            raise InvalidArgument(
                f"unknown executor kind '{self.executor}', expected one of {sorted(EXECUTOR_KINDS)}"
            )

    @classmethod
    def default(cls, workload) -> "BenchConfig":
        """Returns the full measurement run for `workload`."""
        return cls(workload=workload)

    @classmethod
    def quick(cls, workload) -> "BenchConfig":
        """Returns a run small enough for smoke tests (a few milliseconds)."""
        return cls(
            workload=workload,
            sizes=(10, 1_000),
            times=2,
            warmup_reps=5,
            warmup_size=10,
            workers=2,
        )
