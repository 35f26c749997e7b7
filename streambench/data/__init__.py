# streambench/data/__init__.py

from .generator import Order, random_ints, random_strings, generate_orders

__all__ = ["Order", "random_ints", "random_strings", "generate_orders"]
