"""
Unit tests for StartJobUseCase.
"""

from unittest.mock import MagicMock, call

import pytest

from tradie_agent.application.use_cases.start_job import StartJobUseCase
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.value_objects.intent import StartJob


class TestStartJobUseCase:
    """Test cases for StartJobUseCase."""

    @pytest.fixture
    def new_job(self):
        return Job(name="Wilson deck build", location="Auckland, NZ")

    @pytest.fixture
    def use_case(self, mock_job_store, mock_timer):
        return StartJobUseCase(mock_job_store, mock_timer, location="Auckland, NZ")

    def test_start_job_success(
        self, use_case, mock_job_store, mock_timer, new_job, builder_profile
    ):
        # Arrange
        mock_job_store.create_job.return_value = new_job
        manager = MagicMock()
        manager.attach_mock(mock_timer.stop, "stop")
        manager.attach_mock(mock_job_store.create_job, "create_job")
        manager.attach_mock(mock_timer.start, "start")

        # Act
        result = use_case.execute(StartJob(name="Wilson deck build"), builder_profile)

        # Assert
        assert result.job is new_job
        assert result.notification.title == "Job Started"
        assert result.notification.message == "Wilson deck build - Timer running"
        assert manager.mock_calls == [
            call.stop(),
            call.create_job("Wilson deck build", "Auckland, NZ"),
            call.start(new_job.id),
        ]

    def test_replacing_job_leaves_previous_open(
        self, use_case, mock_job_store, new_job, builder_profile
    ):
        previous = Job(name="Smith bathroom", location="Auckland, NZ")
        mock_job_store.create_job.return_value = new_job

        use_case.execute(StartJob(name="Wilson deck build"), builder_profile, previous)

        mock_job_store.complete_job.assert_not_called()

    def test_auto_complete_previous(
        self, mock_job_store, mock_timer, new_job, builder_profile
    ):
        previous = Job(name="Smith bathroom", location="Auckland, NZ")
        mock_job_store.create_job.return_value = new_job
        use_case = StartJobUseCase(
            mock_job_store,
            mock_timer,
            location="Auckland, NZ",
            auto_complete_previous=True,
        )

        use_case.execute(StartJob(name="Wilson deck build"), builder_profile, previous)

        mock_job_store.complete_job.assert_called_once_with(previous.id)
