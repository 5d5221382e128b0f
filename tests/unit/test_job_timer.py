"""
Unit tests for AsyncioJobTimer.
"""

import asyncio

import pytest

from tradie_agent.background.job_timer import AsyncioJobTimer


class TestAsyncioJobTimer:
    """Test cases for AsyncioJobTimer."""

    @pytest.fixture
    def job(self, job_store):
        return job_store.create_job("Wilson deck build", "Auckland, NZ")

    def test_rejects_non_positive_interval(self, job_store):
        with pytest.raises(ValueError):
            AsyncioJobTimer(job_store.tick, interval_seconds=0)

    def test_without_event_loop_binds_but_does_not_schedule(
        self, job_store, job_timer, job
    ):
        job_timer.start(job.id)

        assert job_timer.job_id == job.id
        assert job_timer.is_scheduled is False

        assert job_timer.fire() is True
        assert job_store.get_job(job.id).elapsed_time == 1

    def test_fire_after_stop_does_nothing(self, job_store, job_timer, job):
        job_timer.start(job.id)
        job_timer.stop()

        assert job_timer.fire() is False
        assert job_store.get_job(job.id).elapsed_time == 0

    def test_stale_tick_is_dropped(self, job_store, job_timer, job):
        """Test a tick already in flight when the binding is replaced."""
        job_timer.start(job.id)
        stale_generation = job_timer._generation

        job_timer.stop()
        job_timer.start(job.id)

        assert job_timer._deliver(job.id, stale_generation) is False
        assert job_store.get_job(job.id).elapsed_time == 0

    def test_start_after_close_raises(self, job_timer, job):
        job_timer.close()

        with pytest.raises(RuntimeError, match="closed"):
            job_timer.start(job.id)

    @pytest.mark.asyncio
    async def test_accrues_time_while_running(self, job_store, job):
        # Arrange
        timer = AsyncioJobTimer(job_store.tick, interval_seconds=0.01)

        # Act
        timer.start(job.id)
        assert timer.is_scheduled is True
        await asyncio.sleep(0.1)
        timer.close()

        # Assert
        assert job_store.get_job(job.id).elapsed_time > 0

    @pytest.mark.asyncio
    async def test_no_ticks_after_stop(self, job_store, job):
        timer = AsyncioJobTimer(job_store.tick, interval_seconds=0.01)
        timer.start(job.id)
        await asyncio.sleep(0.05)

        timer.stop()
        elapsed = job_store.get_job(job.id).elapsed_time
        await asyncio.sleep(0.05)

        assert timer.is_scheduled is False
        assert job_store.get_job(job.id).elapsed_time == elapsed

    @pytest.mark.asyncio
    async def test_rebinding_moves_ticks_to_new_job(self, job_store, job):
        timer = AsyncioJobTimer(job_store.tick, interval_seconds=0.01)
        timer.start(job.id)
        await asyncio.sleep(0.03)

        second = job_store.create_job("Smith bathroom", "Auckland, NZ")
        timer.start(second.id)
        first_elapsed = job_store.get_job(job.id).elapsed_time
        await asyncio.sleep(0.05)
        timer.close()

        assert job_store.get_job(job.id).elapsed_time == first_elapsed
        assert job_store.get_job(second.id).elapsed_time > 0
