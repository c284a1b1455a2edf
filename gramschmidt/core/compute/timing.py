"""
Wall-clock timing for engine runs.

Engines time the factorization and the accuracy diagnostics separately;
the breakdown ends up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer plus named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('factorization'):
            engine.compute(A)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'factorization': ...}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`; repeated names add up."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        Seconds spent overall and per section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block without managing start/stop.

    Usage:
        with timed() as timer:
            Q, R = cgs2(A)
        seconds = timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
