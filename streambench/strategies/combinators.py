# streambench/strategies/combinators.py
#
# Merge functions used to fold the partial results of a fork-join reduction.
# Both are associative and commutative, so where the partition boundaries
# fall cannot change the final value (sums only up to rounding order).


def min_combine(left, right):
    """Returns the smaller of two partial minimums."""
    return right if right < left else left


def merge_sums(left, right):
    """
    Merges two per-owner partial sums by adding the amounts of shared keys.
    Neither argument is modified.
    """
    merged = dict(left)
    for key, amount in right.items():
        if key in merged:
            merged[key] = merged[key] + amount
        else:
            merged[key] = amount
    return merged
