"""
Unit tests for the use cases that write to the active job.
"""

import pytest

from tradie_agent.application.use_cases.complete_job import CompleteJobUseCase
from tradie_agent.application.use_cases.log_material import LogMaterialUseCase
from tradie_agent.application.use_cases.log_progress import LogProgressUseCase
from tradie_agent.application.use_cases.safety_check import SafetyCheckUseCase
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.value_objects.intent import (
    CompleteJob,
    LogMaterial,
    LogProgress,
    SafetyCheck,
)


@pytest.fixture
def active_job():
    return Job(name="Wilson deck build", location="Auckland, NZ")


class TestLogMaterialUseCase:
    """Test cases for LogMaterialUseCase."""

    def test_appends_priced_entry(
        self, mock_job_store, make_costs, active_job, builder_profile
    ):
        # Arrange
        costs = make_costs([75])
        mock_job_store.append_material.return_value = active_job
        use_case = LogMaterialUseCase(mock_job_store, costs, cost_min=50, cost_max=250)

        # Act
        result = use_case.execute(
            LogMaterial(description="20 nails"), builder_profile, active_job
        )

        # Assert
        job_id, entry = mock_job_store.append_material.call_args.args
        assert job_id == active_job.id
        assert entry.description == "20 nails"
        assert entry.cost == 75
        assert costs.calls == [(50, 250)]
        assert result.notification.title == "Materials Logged"
        assert result.notification.message == "20 nails"


class TestLogProgressUseCase:
    """Test cases for LogProgressUseCase."""

    def test_stated_percentage_skips_estimate(
        self, mock_job_store, fixed_costs, active_job, builder_profile
    ):
        mock_job_store.append_progress.return_value = active_job
        use_case = LogProgressUseCase(mock_job_store, fixed_costs)

        result = use_case.execute(
            LogProgress(description="framing 45% done", percentage=45),
            builder_profile,
            active_job,
        )

        entry = mock_job_store.append_progress.call_args.args[1]
        assert entry.percentage == 45
        assert fixed_costs.calls == []
        assert result.notification.message == "45% complete"

    def test_estimates_missing_percentage(
        self, mock_job_store, make_costs, active_job, builder_profile
    ):
        costs = make_costs([72])
        mock_job_store.append_progress.return_value = active_job
        use_case = LogProgressUseCase(mock_job_store, costs)

        result = use_case.execute(
            LogProgress(description="framing done"), builder_profile, active_job
        )

        assert costs.calls == [(60, 90)]
        assert result.notification.title == "Progress Updated"
        assert result.notification.message == "72% complete"


class TestSafetyCheckUseCase:
    """Test cases for SafetyCheckUseCase."""

    def test_files_report(
        self,
        mock_job_store,
        knowledge_base,
        active_job,
        electrician_profile,
    ):
        mock_job_store.append_compliance.return_value = active_job
        use_case = SafetyCheckUseCase(mock_job_store, knowledge_base)

        result = use_case.execute(SafetyCheck(), electrician_profile, active_job)

        report = mock_job_store.append_compliance.call_args.args[1]
        assert report.inspector == "Mike"
        assert report.job_reference == "Wilson deck build"
        assert report.items == knowledge_base.daily_checklist()
        assert result.notification.title == "Compliance Report"
        assert result.notification.message == "H&S report generated"


class TestCompleteJobUseCase:
    """Test cases for CompleteJobUseCase."""

    def test_stops_timer_and_completes(
        self, mock_job_store, mock_timer, active_job, builder_profile
    ):
        completed = active_job.snapshot()
        completed.mark_completed()
        mock_job_store.complete_job.return_value = completed
        use_case = CompleteJobUseCase(mock_job_store, mock_timer)

        result = use_case.execute(CompleteJob(), builder_profile, active_job)

        mock_timer.stop.assert_called_once()
        mock_job_store.complete_job.assert_called_once_with(active_job.id)
        assert result.job is completed
        assert result.notification.message == "Wilson deck build finished"
