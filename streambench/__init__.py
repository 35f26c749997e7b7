# streambench/__init__.py

# Expose the user-facing pieces of streambench at the top-level package
# namespace: the inputs, the strategies, the harness and the driver.

from .errors import BenchmarkError, InvalidArgument, EmptyInput, CorrectnessMismatch
from .data import Order, random_ints, random_strings, generate_orders
from .strategies import sequential, declarative, parallel
from .runtime import ForkJoinPool
from .runner import BenchmarkResult, run_benchmark, warm_up
from .config import BenchConfig
from .driver import BenchmarkDriver, DriverState, WORKLOADS, run_workload
