from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar("T")

# Defaults
DEFAULT_QUANTUM_MS = 100.0
DEFAULT_PAUSE_EVERY = 5000
# Every language-level call nests several generator frames
DEFAULT_RECURSION_LIMIT = 10000


def value_from_env(var: str, default: T, convert: Callable[[str], T]) -> T:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"{var} has an invalid value: {raw!r}") from None


def get_quantum_ms() -> float:
    return value_from_env('TOCK_QUANTUM_MS', DEFAULT_QUANTUM_MS, float)


def get_pause_every() -> int:
    return value_from_env('TOCK_PAUSE_EVERY', DEFAULT_PAUSE_EVERY, int)


def get_recursion_limit() -> int:
    return value_from_env('TOCK_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT, int)


@dataclass(frozen=True)
class DriverConfig:
    """Scheduling knobs for the cooperative driver.

    quantum_ms: wall-clock budget of one quantum, in milliseconds.
    pause_every: request a pause after this many `while` body passes.
    """
    quantum_ms: float = DEFAULT_QUANTUM_MS
    pause_every: int = DEFAULT_PAUSE_EVERY

    def __post_init__(self):
        if self.quantum_ms <= 0:
            raise ValueError("quantum_ms must be positive")
        if self.pause_every < 1:
            raise ValueError("pause_every must be at least 1")

    @classmethod
    def from_env(cls) -> DriverConfig:
        return cls(quantum_ms=get_quantum_ms(), pause_every=get_pause_every())
