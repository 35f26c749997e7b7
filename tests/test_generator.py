"""Tests for the synthetic data generators."""

import numpy as np
import pytest

from streambench.data import Order, random_ints, random_strings, generate_orders
from streambench.errors import InvalidArgument


class TestRandomInts:
    def test_size_and_dtype(self, rng):
        arr = random_ints(1000, rng=rng)
        assert arr.shape == (1000,)
        assert arr.dtype == np.int32

    def test_spans_negative_and_positive(self, rng):
        arr = random_ints(10_000, rng=rng)
        assert arr.min() < -(2 ** 30)
        assert arr.max() > 2 ** 30

    def test_zero_size(self):
        assert len(random_ints(0)) == 0

    def test_negative_size(self):
        with pytest.raises(InvalidArgument):
            random_ints(-1)


class TestRandomStrings:
    def test_fixed_length_lowercase(self, rng):
        strings = random_strings(500, rng=rng)
        assert len(strings) == 500
        for s in strings:
            assert isinstance(s, str)
            assert len(s) == 10
            assert s.isalpha() and s.islower()

    def test_custom_length(self, rng):
        assert all(len(s) == 3 for s in random_strings(20, length=3, rng=rng))

    def test_covers_alphabet_edges(self, rng):
        letters = set("".join(random_strings(2000, rng=rng)))
        assert "a" in letters
        assert "z" in letters

    def test_zero_size(self):
        assert random_strings(0) == []

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgument):
            random_strings(-5)
        with pytest.raises(InvalidArgument):
            random_strings(5, length=0)


class TestGenerateOrders:
    def test_records(self, rng):
        orders = generate_orders(1000, rng=rng)
        assert len(orders) == 1000
        for order in orders:
            assert isinstance(order, Order)
            assert 0.0 <= order.amount < 1000.0

    def test_owner_count(self, rng):
        orders = generate_orders(10_000, rng=rng)
        owners = {order.owner_key for order in orders}
        # 50 keys exist; with 200 draws per key every one of them is picked.
        assert len(owners) == 50

    def test_small_input_has_one_owner(self):
        orders = generate_orders(150)
        assert len({order.owner_key for order in orders}) == 1

    def test_created_at_is_monotonic(self, rng):
        stamps = [order.created_at for order in generate_orders(500, rng=rng)]
        assert stamps == sorted(stamps)

    def test_records_are_immutable(self):
        order = generate_orders(1)[0]
        with pytest.raises(AttributeError):
            order.amount = 0.0

    def test_zero_and_negative_size(self):
        assert generate_orders(0) == []
        with pytest.raises(InvalidArgument):
            generate_orders(-1)
