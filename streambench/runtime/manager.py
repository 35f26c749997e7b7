# streambench/runtime/manager.py
#
# The fork-join worker pool the parallel strategies run on. A collection is
# split into one contiguous partition per worker, every partition is reduced
# by its own task, and the partial results are only read back once all tasks
# have finished. The caller then folds the partials with a combinator.

import os
from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, wait

from ..errors import InvalidArgument

EXECUTOR_KINDS = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}


def default_workers():
    """Returns the hardware parallelism available to this process."""
    return os.cpu_count() or 1


def chunk_bounds(length, n_chunks):
    """
    Splits `range(length)` into at most `n_chunks` contiguous, non-empty
    (start, end) pairs whose sizes differ by at most one.
    """
    if n_chunks < 1:
        raise InvalidArgument(f"number of chunks must be positive, got {n_chunks}")
    n_chunks = min(n_chunks, length)
    if n_chunks == 0:
        return []

    base, remainder = divmod(length, n_chunks)
    bounds = []
    start = 0
    for i in range(n_chunks):
        end = start + base + (1 if i < remainder else 0)
        bounds.append((start, end))
        start = end
    return bounds


def partition(collection, n_chunks):
    """Slices a sequence into the partitions described by `chunk_bounds`."""
    return [collection[start:end] for start, end in chunk_bounds(len(collection), n_chunks)]


def _noop():
    return None


class ForkJoinPool:
    """
    A fixed-size pool of workers used for fork-join reductions.

    Example:
        pool = ForkJoinPool(workers=4)
        partials = pool.fork_join(reduce_chunk, collection)
        result = functools.reduce(combine, partials)
    """
    _instance = None

    def __init__(self, workers=None, kind="thread"):
        if kind not in EXECUTOR_KINDS:
            raise InvalidArgument(
                f"unknown executor kind '{kind}', expected one of {sorted(EXECUTOR_KINDS)}"
            )
        workers = default_workers() if workers is None else workers
        if workers < 1:
            raise InvalidArgument(f"worker count must be positive, got {workers}")

        self.workers = workers
        self.kind = kind
        self._executor = EXECUTOR_KINDS[kind](max_workers=workers)

    @classmethod
    def get_instance(cls):
        """Returns the process-wide shared pool, creating and warming it on first use."""
        if cls._instance is None:
            cls._instance = cls()
            cls._instance.warm_up()
        return cls._instance

    def warm_up(self):
        """Submits one no-op per worker so that worker start-up is not timed later."""
        futures = [self._executor.submit(_noop) for _ in range(self.workers)]
        wait(futures)

    def fork_join(self, func, collection):
        """
        Applies `func` to every partition of `collection` concurrently.

        Args:
            func: A single-argument function reducing one partition. In
                  "process" mode it must be a picklable module-level function.
            collection: A sliceable sequence.

        Returns:
            list: One partial result per non-empty partition, in partition order.
        """
        futures = [self._executor.submit(func, chunk) for chunk in partition(collection, self.workers)]
        # Join: every partition must finish before any partial is read.
        wait(futures)
        return [future.result() for future in futures]

    def shutdown(self):
        self._executor.shutdown(wait=True)
        if ForkJoinPool._instance is self:
            ForkJoinPool._instance = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()

    def __repr__(self):
        return f"ForkJoinPool(workers={self.workers}, kind='{self.kind}')"
