"""Timing utilities."""

import time
from typing import Optional


class Timer:
    """Context manager that measures elapsed wall time in milliseconds.

    Usage:
        with Timer() as t:
            do_work()
        print(t.elapsed_ms)
    """

    def __init__(self):
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self.end_time = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end_time = time.perf_counter()

    @property
    def elapsed_ms(self) -> int:
        """Elapsed time in whole milliseconds (running total if still open)."""
        if self.start_time is None:
            return 0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return int((end - self.start_time) * 1000)
