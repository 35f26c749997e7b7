# streambench/data/generator.py
#
# Builds the synthetic inputs the benchmarks reduce over: arrays of random
# 32-bit integers, lists of random lowercase strings and lists of order
# records. Everything is generated in memory with NumPy's random Generator
# and is never mutated afterwards.

import time
import uuid
from typing import NamedTuple

import numpy as np

from ..errors import InvalidArgument

# Average number of orders placed by each distinct owner.
ORDERS_PER_OWNER = 200

# Upper bound (exclusive) of a generated order amount.
MAX_AMOUNT = 1000.0

STRING_LENGTH = 10

_INT32 = np.iinfo(np.int32)


class Order(NamedTuple):
    """A single synthetic order. Grouped by `owner_key` when aggregating."""
    owner_key: str
    amount: float
    created_at: int


def _check_size(n):
    if n < 0:
        raise InvalidArgument(f"collection size must be non-negative, got {n}")


def random_ints(n, rng=None):
    """
    Generates `n` random signed 32-bit integers spanning the full range.

    Args:
        n (int): Number of values to generate.
        rng (np.random.Generator): Optional source of randomness.

    Returns:
        np.ndarray: A 1-D array of dtype int32.
    """
    _check_size(n)
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(_INT32.min, _INT32.max, size=n, dtype=np.int32, endpoint=True)


def random_strings(n, length=STRING_LENGTH, rng=None):
    """
    Generates `n` random strings of `length` lowercase ASCII letters.

    Args:
        n (int): Number of strings to generate.
        length (int): Length of every string.
        rng (np.random.Generator): Optional source of randomness.

    Returns:
        list[str]: The generated strings.
    """
    _check_size(n)
    if length < 1:
        raise InvalidArgument(f"string length must be positive, got {length}")
    rng = rng if rng is not None else np.random.default_rng()

    # One row of letter codes per string, reinterpreted as fixed-width bytes.
    codes = rng.integers(ord("a"), ord("z"), size=(n, length), dtype=np.uint8, endpoint=True)
    packed = codes.view(f"S{length}").reshape(n)
    return np.char.decode(packed, "ascii").tolist()


def generate_orders(n, rng=None):
    """
    Generates `n` orders spread over `max(1, n // 200)` distinct owners.

    Owner keys are random UUID strings, amounts are uniform in [0, 1000) and
    `created_at` is a monotonic clock reading taken as each record is built.
    """
    _check_size(n)
    rng = rng if rng is not None else np.random.default_rng()

    owners = [str(uuid.uuid4()) for _ in range(max(1, n // ORDERS_PER_OWNER))]
    picks = rng.integers(0, len(owners), size=n).tolist()
    amounts = (rng.random(n) * MAX_AMOUNT).tolist()

    return [
        Order(owners[pick], amount, time.monotonic_ns())
        for pick, amount in zip(picks, amounts)
    ]
