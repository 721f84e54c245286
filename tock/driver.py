"""Cooperative driver: runs a whole program in bounded quanta.

A program run is one generator (see tock.evaluation.evaluator). Each quantum
advances it until the evaluator yields at a `while` checkpoint, which happens
every `pause_every` loop passes or once the quantum's deadline has passed. The
driver then asks the host scheduler to resume it later and returns. Because
the generator keeps every pending evaluation frame, a paused program continues
exactly where it stopped.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable

from tock import SExpression, LispValue
from tock.config import DriverConfig
from tock.errors import TockError, Cancelled, RecursionDepthError
from tock.evaluation.context import EvalContext
from tock.evaluation.evaluator import evaluate_program
from tock.host.capabilities import Scheduler
from tock.types.environment import Environment
from tock.types.undefined import Undefined

logger = logging.getLogger(__name__)


class RunState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"
    FAILED = "failed"
    CANCELLED = "cancelled"


TERMINAL_STATES = frozenset((RunState.FINISHED, RunState.FAILED, RunState.CANCELLED))


class Run:
    """One resumable execution of a program."""

    def __init__(
        self,
        program: list[SExpression],
        env: Environment,
        ctx: EvalContext,
        config: DriverConfig,
        scheduler: Scheduler | None = None,
    ):
        self.env = env
        self.ctx = ctx
        self.config = config
        self.scheduler = scheduler
        self.state = RunState.PENDING
        self.result: LispValue = Undefined
        self.error: TockError | None = None
        self.quanta = 0
        self._gen = evaluate_program(program, env, ctx)
        self._callbacks: list[Callable[[Run], None]] = []

    @property
    def steps(self) -> int:
        return self.ctx.steps

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES

    def add_done_callback(self, fn: Callable[[Run], None]) -> None:
        """Call `fn(run)` once the run ends; immediately if it already has."""
        if self.done:
            fn(self)
        else:
            self._callbacks.append(fn)

    def cancel(self) -> bool:
        """Request cancellation. A paused or pending run ends at once; a running
        one stops at its next checkpoint. Returns False if the run already ended."""
        if self.done:
            return False
        self.ctx.cancelled = True
        if self.state is not RunState.RUNNING:
            self._gen.close()
            self._finish(RunState.CANCELLED, error=Cancelled("run cancelled"))
        return True

    def resume(self) -> None:
        """Run one quantum."""
        if self.done:
            return
        if self.ctx.cancelled:
            self._gen.close()
            self._finish(RunState.CANCELLED, error=Cancelled("run cancelled"))
            return

        self.state = RunState.RUNNING
        self.quanta += 1
        self.ctx.deadline = self.ctx.clock() + self.config.quantum_ms / 1000.0
        started = time.perf_counter()
        try:
            pause = next(self._gen)
        except StopIteration as stop:
            self._finish(RunState.FINISHED, result=stop.value)
            return
        except Cancelled as ex:
            self._finish(RunState.CANCELLED, error=ex)
            return
        except RecursionError:
            self._finish(RunState.FAILED, error=RecursionDepthError("Maximum recursion depth exceeded"))
            return
        except TockError as ex:
            self._finish(RunState.FAILED, error=ex)
            return
        except Exception:
            self.state = RunState.FAILED
            raise

        self.state = RunState.PAUSED
        logger.debug(
            "Quantum %d paused at step %d after %.1f ms",
            self.quanta, pause.steps, (time.perf_counter() - started) * 1000.0,
        )
        if self.scheduler is not None:
            self.scheduler.schedule_resume(self.resume)

    def run_to_completion(self) -> LispValue:
        """Drive the run without a scheduler, quantum after quantum."""
        while not self.done:
            self.resume()
        return self.get()

    def get(self) -> LispValue:
        """The program's result; re-raises the error of a failed or cancelled run."""
        if self.error is not None:
            raise self.error
        if not self.done:
            raise RuntimeError(f"Run is still {self.state.value}")
        return self.result

    def _finish(
        self, state: RunState, result: LispValue = Undefined, error: TockError | None = None
    ) -> None:
        self.state = state
        self.result = result
        self.error = error
        if error is None:
            logger.debug("Run finished after %d quanta, %d steps", self.quanta, self.steps)
        elif state is RunState.CANCELLED:
            logger.info("Run cancelled after %d quanta, %d steps", self.quanta, self.steps)
        else:
            logger.info("Run failed: %s", error)
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            try:
                fn(self)
            except Exception:
                logger.exception("Done callback %r failed", fn)

    def __repr__(self) -> str:
        return f"<Run {self.state.value} quanta={self.quanta} steps={self.steps}>"


class Driver:
    """Starts runs and hands their later quanta to the host scheduler."""

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        config: DriverConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.scheduler = scheduler
        self.config = config if config is not None else DriverConfig.from_env()
        self.clock = clock

    def new_context(self, sink=None, surface=None) -> EvalContext:
        return EvalContext(
            sink=sink, surface=surface, pause_every=self.config.pause_every, clock=self.clock
        )

    def prepare(
        self,
        program: list[SExpression],
        env: Environment | None = None,
        ctx: EvalContext | None = None,
    ) -> Run:
        """Create a run without executing any of it."""
        if env is None:
            env = Environment.global_env()
        if ctx is None:
            ctx = self.new_context()
        return Run(program, env, ctx, self.config, self.scheduler)

    def start(
        self,
        program: list[SExpression],
        env: Environment | None = None,
        ctx: EvalContext | None = None,
    ) -> Run:
        """Run the first quantum now; later quanta go through the scheduler."""
        if self.scheduler is None:
            raise ValueError("Driver.start needs a scheduler; use prepare().run_to_completion()")
        run = self.prepare(program, env, ctx)
        logger.debug("Starting run of %d top-level forms", len(program))
        run.resume()
        return run
