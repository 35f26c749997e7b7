# streambench/tools/bench_cli.py
#
# Implements the `streambench` command. It runs one workload with the default
# configuration, optionally overriding the size matrix, repetition count,
# warm-up and worker pool from the command line.

import argparse
import sys

from ..config import BenchConfig
from ..driver import WORKLOADS, run_workload
from ..errors import InvalidArgument
from ..runtime.manager import EXECUTOR_KINDS


def build_parser():
    parser = argparse.ArgumentParser(
        prog="streambench",
        description="Time sequential, declarative and parallel reductions over growing inputs."
    )
    parser.add_argument(
        "workload",
        choices=sorted(WORKLOADS),
        help="Which reduction to benchmark."
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+",
        help="Input sizes to benchmark (default: the workload's size matrix)."
    )
    parser.add_argument("--times", type=int, help="Timed calls per strategy and size.")
    parser.add_argument("--warmup-reps", type=int, help="Untimed warm-up calls per strategy.")
    parser.add_argument("--workers", type=int, help="Worker count of the parallel strategy.")
    parser.add_argument(
        "--executor", choices=sorted(EXECUTOR_KINDS),
        help="Run parallel partitions on threads or processes."
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    overrides = {
        "sizes": args.sizes,
        "times": args.times,
        "warmup_reps": args.warmup_reps,
        "workers": args.workers,
        "executor": args.executor,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        config = BenchConfig(workload=args.workload, **overrides)
    except InvalidArgument as e:
        print(f"streambench: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return run_workload(args.workload, config)


if __name__ == "__main__":
    sys.exit(main())
