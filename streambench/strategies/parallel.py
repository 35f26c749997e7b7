# streambench/strategies/parallel.py
#
# Fork-join versions of the reductions. The input is partitioned across the
# workers of a ForkJoinPool, each worker runs the sequential reducer over its
# own partition, and the partials are folded with an associative combinator
# once every worker has finished.

import functools

from ..errors import EmptyInput
from ..runtime.manager import ForkJoinPool
from . import sequential
from .combinators import min_combine, merge_sums


def min_value(collection, pool=None):
    """
    Finds the smallest element by taking the minimum of per-partition minimums.

    Args:
        collection: A non-empty sliceable sequence of comparable values.
        pool (ForkJoinPool): Pool to run on. Defaults to the shared instance.
    """
    if len(collection) == 0:
        raise EmptyInput("cannot take the minimum of an empty collection")
    pool = pool if pool is not None else ForkJoinPool.get_instance()

    partials = pool.fork_join(sequential.min_value, collection)
    return functools.reduce(min_combine, partials)


def sum_by_owner(orders, pool=None):
    """Sums order amounts per owner key by merging per-partition sums."""
    pool = pool if pool is not None else ForkJoinPool.get_instance()

    partials = pool.fork_join(sequential.sum_by_owner, orders)
    return functools.reduce(merge_sums, partials, {})
