# benchmarks/micro/min_int.py
#
# Finds the minimum of arrays of random 32-bit integers, from ten thousand
# up to a hundred million elements, with a plain loop, a pandas reduction and
# a fork-join reduction across all cores. Command line arguments are ignored.

import sys

from streambench.driver import run_workload


def main():
    return run_workload("int")


if __name__ == "__main__":
    sys.exit(main())
