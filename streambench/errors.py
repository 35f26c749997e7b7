# streambench/errors.py
#
# Defines the error conditions a benchmark run can hit. Every one of them is
# fatal to the run: benchmarking an implementation that produced a wrong
# answer, or was handed an impossible input, has no meaningful result.


class BenchmarkError(Exception):
    """Base class for all errors raised by streambench."""
    pass


class InvalidArgument(BenchmarkError, ValueError):
    """A size, repetition count or option is outside its allowed range."""
    pass


class EmptyInput(BenchmarkError, ValueError):
    """The minimum of a zero-length collection was requested."""
    pass


class CorrectnessMismatch(BenchmarkError, AssertionError):
    """
    The reduction strategies disagree on the result for the same input.

    This points at a broken partition or merge step in a parallel strategy,
    so the run must stop rather than keep timing a wrong implementation.
    """
    def __init__(self, workload, size, results):
        self.workload = workload
        self.size = size
        self.results = dict(results)
        names = ", ".join(self.results)
        super().__init__(
            f"{workload} strategies disagree for length {size}: {names}"
        )
