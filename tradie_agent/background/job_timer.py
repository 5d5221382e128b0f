"""
Job timer: a cancellable periodic task that accrues elapsed time on the
active job.
"""

import asyncio
from typing import Callable, Optional
from uuid import UUID

from tradie_agent.application.interfaces.services import JobTimerInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.infrastructure.monitoring.metrics import record_timer_tick

logger = get_logger(__name__)


class AsyncioJobTimer(JobTimerInterface):
    """Timer driven by the running asyncio event loop.

    Each binding gets a new generation number. A tick only lands when its
    generation is still current, so a tick already in flight when the
    binding is cancelled is dropped.
    """

    def __init__(
        self,
        on_tick: Callable[[UUID], bool],
        interval_seconds: float = 1.0,
    ):
        if interval_seconds <= 0:
            raise ValueError("Timer interval must be positive")

        self._on_tick = on_tick
        self.interval_seconds = interval_seconds
        self._job_id: Optional[UUID] = None
        self._task: Optional[asyncio.Task] = None
        self._generation = 0
        self._closed = False

    @property
    def job_id(self) -> Optional[UUID]:
        return self._job_id

    @property
    def is_scheduled(self) -> bool:
        """Check if a periodic task is currently running."""
        return self._task is not None and not self._task.done()

    def start(self, job_id: UUID) -> None:
        if self._closed:
            raise RuntimeError("Job timer is closed")

        self.stop()
        self._job_id = job_id
        generation = self._generation

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Synchronous callers drive ticks through fire()
            logger.debug("No running event loop, timer not scheduled", job_id=str(job_id))
            return

        self._task = loop.create_task(
            self._run(job_id, generation), name=f"job-timer-{job_id}"
        )
        logger.debug(
            "Job timer started",
            job_id=str(job_id),
            interval_seconds=self.interval_seconds,
        )

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

        if self._job_id is not None:
            logger.debug("Job timer stopped", job_id=str(self._job_id))

        self._job_id = None
        self._generation += 1

    def close(self) -> None:
        self.stop()
        self._closed = True

    def fire(self) -> bool:
        """Deliver one tick to the bound job now."""
        if self._job_id is None:
            return False
        return self._deliver(self._job_id, self._generation)

    async def _run(self, job_id: UUID, generation: int) -> None:
        try:
            while generation == self._generation:
                await asyncio.sleep(self.interval_seconds)
                self._deliver(job_id, generation)
        except asyncio.CancelledError:
            logger.debug("Job timer task cancelled", job_id=str(job_id))
            raise

    def _deliver(self, job_id: UUID, generation: int) -> bool:
        if generation != self._generation or job_id != self._job_id:
            return False

        applied = self._on_tick(job_id)
        if applied:
            record_timer_tick()
        return applied
