# streambench/strategies/__init__.py
#
# Three interchangeable implementations of each reduction. For the same input
# they must return the same value.

from . import sequential, declarative, parallel
from .combinators import min_combine, merge_sums

__all__ = ["sequential", "declarative", "parallel", "min_combine", "merge_sums"]
