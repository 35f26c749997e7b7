# streambench/runtime/__init__.py

from .manager import ForkJoinPool, chunk_bounds, partition, default_workers

__all__ = ["ForkJoinPool", "chunk_bounds", "partition", "default_workers"]
