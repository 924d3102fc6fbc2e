"""Asyncio poller driving prediction cycles on a fixed cadence."""

from __future__ import annotations

import asyncio
from typing import Optional, Set

from src.application.use_cases.prediction_cycle_use_case import (
    RunPredictionCycleUseCase,
)
from src.domain.entities.forecast import Prediction
from src.domain.ports.scheduler import IPredictionScheduler, SchedulerState
from src.shared import get_logger

logger = get_logger(__name__)

_DEFAULT_INTERVAL_SECONDS = 30.0


class PollingScheduler(IPredictionScheduler):
    """Run a prediction cycle at start-up, every ``interval_seconds`` and on demand.

    At most one cycle runs at a time. A trigger arriving while a cycle is in
    flight waits for that cycle instead of starting a second request. Any
    unexpected error inside a cycle is turned into a fallback prediction.
    """

    def __init__(
        self,
        cycle_use_case: RunPredictionCycleUseCase,
        interval_seconds: float = _DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self._cycle_use_case = cycle_use_case
        self._interval_seconds = interval_seconds
        self._state = SchedulerState.IDLE
        self._inflight: Optional[asyncio.Task] = None
        self._timer_task: Optional[asyncio.Task] = None
        self._manual_tasks: Set[asyncio.Task] = set()
        self._manual_waiters = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._manual_waiters > 0

    @property
    def running(self) -> bool:
        return self._timer_task is not None and not self._timer_task.done()

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def start(self) -> None:
        """Arm the recurring timer; the first cycle runs right away."""
        if self.running:
            logger.debug("poller.start.already_running")
            return

        self._timer_task = asyncio.create_task(self._run_forever(), name="poller")
        logger.info("poller.started", interval_seconds=self._interval_seconds)

    async def stop(self) -> None:
        """Cancel the timer, pending manual requests and the in-flight cycle."""
        tasks = [task for task in (self._timer_task, self._inflight) if task]
        tasks.extend(self._manual_tasks)

        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        self._timer_task = None
        self._inflight = None
        self._manual_tasks.clear()
        self._manual_waiters = 0
        self._state = SchedulerState.IDLE
        logger.info("poller.stopped")

    async def run_cycle(self) -> Optional[Prediction]:
        """Run a cycle, or join the one already running."""
        return await self._join(self._current_cycle())

    async def trigger_manual(self) -> None:
        self._manual_waiters += 1
        await self._wait_manual(self._current_cycle())

    def request_manual(self) -> bool:
        """Start or join a cycle without waiting for it.

        Returns True when the request joined a cycle already in flight.
        The cycle task and the loading flag are both set before returning.
        """
        coalesced = self.in_flight
        cycle = self._current_cycle()
        self._manual_waiters += 1

        task = asyncio.create_task(self._wait_manual(cycle))
        self._manual_tasks.add(task)
        task.add_done_callback(self._manual_tasks.discard)
        return coalesced

    def _current_cycle(self) -> asyncio.Task:
        if self.in_flight:
            logger.info("poller.cycle.coalesced")
        else:
            self._inflight = asyncio.create_task(self._guarded_cycle())
        return self._inflight

    async def _join(self, cycle: asyncio.Task) -> Optional[Prediction]:
        # shield: a joiner being cancelled must not abort the shared cycle
        return await asyncio.shield(cycle)

    async def _wait_manual(self, cycle: asyncio.Task) -> None:
        try:
            await self._join(cycle)
        finally:
            self._manual_waiters = max(0, self._manual_waiters - 1)

    async def _run_forever(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()

        while True:
            try:
                await self.run_cycle()
            except asyncio.CancelledError:
                raise
            except Exception as exc:  # pragma: no cover - fallback itself failed
                logger.error("poller.tick.failed", error=str(exc), exc_info=exc)
            next_tick += self._interval_seconds
            # fixed cadence; a slow cycle shortens the following wait
            await asyncio.sleep(max(0.0, next_tick - loop.time()))

    async def _guarded_cycle(self) -> Optional[Prediction]:
        self._state = SchedulerState.FETCHING
        try:
            return await self._cycle_use_case.execute()
        except asyncio.CancelledError:
            logger.info("poller.cycle.cancelled")
            raise
        except Exception as exc:
            logger.error("poller.cycle.failed", error=str(exc), exc_info=exc)
            return self._cycle_use_case.apply_fallback()
        finally:
            self._state = SchedulerState.IDLE
