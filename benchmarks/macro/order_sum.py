# benchmarks/macro/order_sum.py
#
# Sums order amounts per owner over lists of synthetic orders (about 200
# orders per owner). This is the only benchmark whose parallel merge step is
# more than taking a minimum: partial per-owner sums from every worker are
# added together, and the result is checked value for value against the
# sequential and pandas groupby versions.

import sys

from streambench.driver import run_workload


def main():
    return run_workload("order")


if __name__ == "__main__":
    sys.exit(main())
