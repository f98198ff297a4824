"""Lightweight in-process profiler."""

import time
from types import TracebackType

from loguru import logger

# Set logger to record the calling function in the profiler
logger = logger.opt(depth=1)


class Profiler:
    """Measure wall and CPU time of a block and log it at debug level.

      - wall_time_sec, cpu_time_sec
    """

    def __init__(self, step: str) -> None:
        """Initialize profiler."""
        self.step = step
        self._t0: float | None = None
        self._cpu0: float | None = None
        self.metrics: dict[str, object] = {}

    def __enter__(self) -> "Profiler":
        """Start profiling context."""
        self._t0 = time.perf_counter()
        self._cpu0 = time.process_time()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        wall = time.perf_counter() - self._t0
        cpu = time.process_time() - self._cpu0

        self.metrics = {
            "step": self.step,
            "wall_time_sec": round(wall, 4),
            "cpu_time_sec": round(cpu, 4),
            "completed": exc_type is None,
        }

        logger.debug(f"{self.metrics}")
