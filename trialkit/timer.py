"""Elapsed wall-clock time measurement."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class Timer:
    """Measures time elapsed since creation."""

    clock: Callable[[], float] = time.monotonic
    start: float = field(init=False)

    def __post_init__(self) -> None:
        self.start = self.clock()

    def elapsed(self) -> str:
        """Return the elapsed time as ``HH:MM:SS.sss``."""
        total = max(self.clock() - self.start, 0.0)
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{int(hours):02d}:{int(minutes):02d}:{seconds:06.3f}"

    def print_elapsed(self) -> str:
        """Write the elapsed time to standard output and return the line written."""
        line = f"Elapsed time: {self.elapsed()}\n"
        sys.stdout.write(line)
        sys.stdout.flush()
        return line.rstrip("\n")