"""Per-run evaluation state.

One EvalContext belongs to one program run. It carries the `while` step
counter and the pause policy the driver sets for the current quantum, the
cancellation flag, and the host capabilities the output forms call into.
"""

from __future__ import annotations

import math
import time
from typing import Callable

from tock import Evaluation
from tock.config import DEFAULT_PAUSE_EVERY
from tock.errors import Cancelled
from tock.host.capabilities import TextSink, Surface


class Pause:
    """Yielded by the evaluator at a checkpoint where it may be suspended."""

    __slots__ = ("steps",)

    def __init__(self, steps: int):
        self.steps = steps

    def __repr__(self):
        return f"Pause(steps={self.steps})"


class EvalContext:
    __slots__ = (
        "sink",
        "surface",
        "pause_every",
        "steps",
        "deadline",
        "cancelled",
        "clock",
    )

    def __init__(
        self,
        sink: TextSink | None = None,
        surface: Surface | None = None,
        pause_every: int = DEFAULT_PAUSE_EVERY,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sink = sink
        self.surface = surface
        self.pause_every = pause_every
        self.steps = 0
        # No deadline until a driver opens a quantum
        self.deadline = math.inf
        self.cancelled = False
        self.clock = clock

    def checkpoint(self) -> Evaluation:
        """Count one loop-body pass; yield a Pause when the quantum should end."""
        self.steps += 1
        if self.cancelled:
            raise Cancelled("run cancelled")
        if self.steps % self.pause_every == 0 or self.clock() >= self.deadline:
            yield Pause(self.steps)
            if self.cancelled:
                raise Cancelled("run cancelled")
