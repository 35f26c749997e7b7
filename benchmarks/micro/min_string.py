# benchmarks/micro/min_string.py
#
# Finds the lexicographically smallest of a list of random ten-letter
# strings. Unlike the integer benchmark every element is a separate Python
# object, which makes the cost of iteration itself dominate.

import sys

from streambench.driver import run_workload


def main():
    return run_workload("string")


if __name__ == "__main__":
    sys.exit(main())
