"""Capability interfaces the evaluator and driver call into.

Implementations signal failure by raising; the evaluator re-raises any such
exception as CapabilityError.
"""

from __future__ import annotations
from typing import Callable, Protocol


class TextSink(Protocol):
    def write(self, sink_id: str, text: str) -> None: ...


class Surface(Protocol):
    def fill_rectangle(
        self,
        surface_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str | None = None,
    ) -> None: ...


class Scheduler(Protocol):
    def schedule_resume(self, continuation: Callable[[], None]) -> None: ...
