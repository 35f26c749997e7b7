# streambench/strategies/declarative.py
#
# The same reductions written declaratively with pandas and run on a single
# thread. Timing these against the sequential loops isolates the cost of the
# abstraction itself from any gain due to parallelism.

import numpy as np
import pandas as pd

from ..data.generator import Order
from ..errors import EmptyInput


def _to_builtin(value):
    # pandas hands back NumPy scalars for numeric columns.
    return value.item() if isinstance(value, np.generic) else value


def min_value(collection):
    """Finds the smallest element through `pandas.Series.min`."""
    if len(collection) == 0:
        raise EmptyInput("cannot take the minimum of an empty collection")
    return _to_builtin(pd.Series(collection).min())


def sum_by_owner(orders):
    """Groups orders by owner key and sums their amounts with a pandas groupby."""
    frame = pd.DataFrame(orders, columns=list(Order._fields))
    totals = frame.groupby("owner_key", sort=False)["amount"].sum()
    return {key: float(amount) for key, amount in totals.items()}
