"""Reference schedulers: something that can run a continuation "on the next tick"."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Callable


class QueueScheduler:
    """FIFO of pending continuations, pumped explicitly by the host."""

    def __init__(self):
        self.pending: deque[Callable[[], None]] = deque()

    def schedule_resume(self, continuation: Callable[[], None]) -> None:
        self.pending.append(continuation)

    def run_pending(self) -> int:
        """Run the continuations queued so far (one tick); returns how many ran."""
        count = len(self.pending)
        for _ in range(count):
            self.pending.popleft()()
        return count

    def run_until_idle(self, max_ticks: int | None = None) -> int:
        """Pump ticks until nothing is queued; returns the number of ticks."""
        ticks = 0
        while self.pending and (max_ticks is None or ticks < max_ticks):
            self.run_pending()
            ticks += 1
        return ticks

    def __len__(self) -> int:
        return len(self.pending)


class AsyncioScheduler:
    """Resumes on the asyncio event loop, letting other tasks run in between."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop

    def schedule_resume(self, continuation: Callable[[], None]) -> None:
        loop = self.loop if self.loop is not None else asyncio.get_running_loop()
        loop.call_soon(continuation)
