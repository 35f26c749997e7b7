# streambench/strategies/sequential.py
#
# Plain single-pass loops on the calling thread. These are the reference
# results the other strategies are verified against, and they double as the
# per-partition reducers of the parallel strategies.

from ..errors import EmptyInput


def min_value(collection):
    """
    Finds the smallest element with an explicit loop.

    The running minimum is seeded with the first element and only replaced by
    a strictly smaller one, so the same routine serves integers and strings.
    """
    iterator = iter(collection)
    try:
        smallest = next(iterator)
    except StopIteration:
        raise EmptyInput("cannot take the minimum of an empty collection") from None

    for value in iterator:
        if value < smallest:
            smallest = value
    return smallest


def sum_by_owner(orders):
    """Sums order amounts per owner key with a single accumulator dict."""
    totals = {}
    for order in orders:
        key = order.owner_key
        if key in totals:
            totals[key] += order.amount
        else:
            totals[key] = order.amount
    return totals
