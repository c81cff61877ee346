import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordgrid")


class StageTimer:
    """Wall-clock timings for the stages of one solve (load, generate, search...)."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            # Repeated stages accumulate
            elapsed_ms = (time.perf_counter() - t0) * 1000
            self.timings[name] = round(self.timings.get(name, 0.0) + elapsed_ms, 1)
            logger.info("stage=%s elapsed=%.1fms", name, elapsed_ms)

    def elapsed(self, name: str) -> float:
        return self.timings.get(name, 0.0)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
