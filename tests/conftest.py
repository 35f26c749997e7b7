import os
import sys

import numpy as np
import pytest

# Make the 'streambench' package in the project root importable, even if it
# has not been installed yet.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from streambench.data import Order
from streambench.runtime import ForkJoinPool


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def pool():
    with ForkJoinPool(workers=4) as p:
        yield p


@pytest.fixture
def sample_orders():
    return [
        Order("A", 10.0, 1),
        Order("B", 20.0, 2),
        Order("A", 30.0, 3),
        Order("B", 5.0, 4),
        Order("A", 1.0, 5),
    ]
