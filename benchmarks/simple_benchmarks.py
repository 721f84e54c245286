from timeit import timeit

from tock.config import DriverConfig
from tock.driver import Driver
from tock.host.scheduler import QueueScheduler
from tock.interpreter import Interpreter
from tock.reader.parser import parse_source
from tock.types.environment import Environment
from tock.types.symbol import Symbol


def time_uninterrupted(code: str, rounds: int) -> float:
    """Time evaluation with pauses effectively disabled. Parses once and
    repeatedly drives a fresh run of the same program."""
    program = parse_source(code)
    driver = Driver(None, DriverConfig(quantum_ms=60_000, pause_every=10**9))
    driver.prepare(program).run_to_completion()
    return timeit(lambda: driver.prepare(program).run_to_completion(), number=rounds)


def time_cooperative(code: str, rounds: int, pause_every: int = 100) -> float:
    """Time the same program suspended every `pause_every` loop passes and
    resumed through a QueueScheduler, to measure the cost of pausing."""
    program = parse_source(code)
    scheduler = QueueScheduler()
    driver = Driver(scheduler, DriverConfig(quantum_ms=60_000, pause_every=pause_every))

    def once():
        driver.start(program)
        scheduler.run_until_idle()

    once()
    return timeit(once, number=rounds)


# Environment micro-benchmark: every call copies the caller's bindings

def bench_environment_copy(n_bindings: int = 1000, n_copies: int = 10000) -> float:
    env = Environment.global_env()
    for i in range(n_bindings):
        env.define(Symbol(f"v{i}"), float(i))
    env.copy()
    return timeit(env.copy, number=n_copies)


WHILE_COUNT_CODE = r"""
(def i 0)
(while (< i 2000) (set i (+ i 1)))
i
"""

RECURSIVE_FIB_CODE = r"""
(func fib (n)
  (if (< n 2) (return n))
  (return (+ (fib (- n 1)) (fib (- n 2)))))
(fib 12)
"""

LIST_BUILD_CODE = r"""
(def i 0)
(def acc nil)
(while (< i 300)
  (set acc (cons i acc))
  (set i (+ i 1)))
(length (reverse acc))
"""


def _print_pair(name: str, code: str, rounds: int) -> None:
    tplain = time_uninterrupted(code, rounds)
    tcoop = time_cooperative(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  uninterrupted: {tplain:.6f}s  |  paused every 100 passes: {tcoop:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment copy (1000 bindings)")
    print(f"  time: {bench_environment_copy():.6f}s")

    _print_pair("while loop counting to 2000", WHILE_COUNT_CODE, rounds=20)
    _print_pair("recursive fibonacci", RECURSIVE_FIB_CODE, rounds=20)
    _print_pair("list building in a loop", LIST_BUILD_CODE, rounds=50)

    result = Interpreter().eval(RECURSIVE_FIB_CODE)
    print(f"fib(12) = {result:g}")
