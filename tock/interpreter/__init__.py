from __future__ import annotations

import asyncio
import logging
import sys

from tock import LispValue
from tock.config import DriverConfig, get_recursion_limit
from tock.driver import Driver, Run
from tock.host.capabilities import TextSink, Surface, Scheduler
from tock.host.scheduler import QueueScheduler, AsyncioScheduler
from tock.reader.parser import parse_source
from tock.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and cooperatively evaluating Tock code.
    Maintains one global Environment across calls, so definitions made by one
    `eval`/`start` are visible to the next.
    """

    def __init__(
        self,
        sink: TextSink | None = None,
        surface: Surface | None = None,
        scheduler: Scheduler | None = None,
        config: DriverConfig | None = None,
        *,
        error_sink: str | None = None,
    ):
        self.sink = sink
        self.surface = surface
        self.scheduler: Scheduler = scheduler if scheduler is not None else QueueScheduler()
        self.config: DriverConfig = config if config is not None else DriverConfig.from_env()
        # Sink id that receives "Error: ..." lines when a run fails
        self.error_sink = error_sink
        self.env: Environment = Environment.global_env()

        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

    def _driver(self, scheduler: Scheduler | None) -> Driver:
        return Driver(scheduler=scheduler, config=self.config)

    def _prepare(self, code: str, scheduler: Scheduler | None) -> Run:
        program = parse_source(code)
        logger.debug("Parsed %d top-level forms", len(program))
        driver = self._driver(scheduler)
        ctx = driver.new_context(sink=self.sink, surface=self.surface)
        run = driver.prepare(program, self.env, ctx)
        run.add_done_callback(self._report_error)
        return run

    def _report_error(self, run: Run) -> None:
        if run.error is None or self.error_sink is None or self.sink is None:
            return
        try:
            self.sink.write(self.error_sink, f"Error: {run.error}")
        except Exception:
            logger.exception("Could not report run error to %r", self.error_sink)

    def eval(self, code: str) -> LispValue:
        """Run `code` to completion right now and return its last top-level value."""
        return self._prepare(code, None).run_to_completion()

    def start(self, code: str) -> Run:
        """Start `code` cooperatively: one quantum now, the rest via the scheduler."""
        run = self._prepare(code, self.scheduler)
        run.resume()
        return run

    async def run_async(self, code: str) -> LispValue:
        """Run `code` on the running asyncio loop, yielding to it between quanta."""
        loop = asyncio.get_running_loop()
        finished: asyncio.Future = loop.create_future()
        run = self._prepare(code, AsyncioScheduler(loop))
        run.add_done_callback(lambda r: finished.done() or finished.set_result(r))
        loop.call_soon(run.resume)
        try:
            await finished
        except asyncio.CancelledError:
            run.cancel()
            raise
        return run.get()


def run_program(
    source: str,
    sink: TextSink | None = None,
    surface: Surface | None = None,
    config: DriverConfig | None = None,
) -> LispValue:
    """One-shot helper: fresh interpreter, run to completion, return the result."""
    return Interpreter(sink=sink, surface=surface, config=config).eval(source)
