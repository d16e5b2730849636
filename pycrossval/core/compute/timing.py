"""
Execution timing utilities.

Provides accumulating section timers used by every backend to report
where time went (decomposition, solve, scoring, aggregation).
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('qr_decomposition'):
            Q, R, piv = scipy.linalg.qr(X, mode='economic', pivoting=True)

        with timer.section('back_substitution'):
            beta = solve_triangular(R, Q.T @ y)

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.05, 'qr_decomposition': 0.03, 'back_substitution': 0.02}

    A Timer is not shared between threads; each fold task owns its own.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Args:
            name: Section identifier (used as key in result dict)

        Note:
            Sections can overlap with each other and with the total time.
            Repeated sections with the same name accumulate.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result

