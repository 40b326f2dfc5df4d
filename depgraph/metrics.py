"""Optional instrumentation for the analysis stages.

Each algorithm accepts an optional observer implementing :class:`Metrics`. The
observer is a pure side channel: passing ``None`` never changes a result.
:class:`StageMetrics` is the bundled implementation, counting named
operations and timing a stage with ``time.perf_counter``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from depgraph.logging import get_logger

logger = get_logger(__name__)


class Metrics(Protocol):
    """Observer interface consumed by the algorithms."""

    def start_timer(self) -> None: ...

    def stop_timer(self) -> None: ...

    def increment_counter(self, name: str, amount: int = 1) -> None: ...

    def elapsed(self) -> float:
        """Return elapsed time in seconds."""
        ...


@dataclass
class StageMetrics:
    """Counters and wall-clock timer for a single pipeline stage.

    Attributes:
        name: Stage name used in reports and log messages.
        counters: Operation counters keyed by name.
    """

    name: str = "stage"
    counters: Dict[str, int] = field(default_factory=dict)
    _start: Optional[float] = field(default=None, repr=False)
    _end: Optional[float] = field(default=None, repr=False)

    def reset(self) -> None:
        """Clear all counters and the timer."""
        self.counters.clear()
        self._start = None
        self._end = None

    def start_timer(self) -> None:
        self._start = time.perf_counter()
        self._end = None

    def stop_timer(self) -> None:
        """Stop a running timer; a stopped or unstarted timer is left as is."""
        if self._start is not None and self._end is None:
            self._end = time.perf_counter()
            logger.debug(f"Stage {self.name} finished in {self.elapsed_ms():.3f} ms")

    @property
    def running(self) -> bool:
        return self._start is not None and self._end is None

    def elapsed(self) -> float:
        """Return elapsed seconds; live while the timer runs, 0.0 if never started."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start

    def elapsed_ms(self) -> float:
        return self.elapsed() * 1000.0

    def increment_counter(self, name: str, amount: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + amount

    def counter(self, name: str) -> int:
        """Return the value of a counter, 0 if it was never incremented."""
        return self.counters.get(name, 0)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "elapsed_ms": self.elapsed_ms(),
            "counters": dict(self.counters),
        }

    def report(self) -> str:
        """Return a multi-line human-readable summary."""
        lines = [
            f"=== Metrics: {self.name} ===",
            f"Execution time: {self.elapsed_ms():.3f} ms",
            "Operation counters:",
        ]
        for counter_name in sorted(self.counters):
            lines.append(f"  {counter_name}: {self.counters[counter_name]}")
        return "\n".join(lines)
