"""
Unit tests for value objects.
"""

from tradie_agent.domain.exceptions.job_error import NoActiveJobError
from tradie_agent.domain.value_objects.intent import (
    IntentType,
    LogMaterial,
    SafetyCheck,
)
from tradie_agent.domain.value_objects.job_status import JobStatus
from tradie_agent.domain.value_objects.notification import Notification
from tradie_agent.domain.value_objects.trade import Trade


class TestIntentType:
    """Test IntentType value object."""

    def test_requires_active_job(self):
        assert IntentType.LOG_MATERIAL.requires_active_job is True
        assert IntentType.LOG_PROGRESS.requires_active_job is True
        assert IntentType.SAFETY_CHECK.requires_active_job is True
        assert IntentType.COMPLETE_JOB.requires_active_job is True

        assert IntentType.START_JOB.requires_active_job is False
        assert IntentType.GENERATE_QUOTE.requires_active_job is False
        assert IntentType.UNRECOGNIZED.requires_active_job is False

    def test_intent_carries_its_type(self):
        assert LogMaterial(description="nails").intent_type == IntentType.LOG_MATERIAL
        assert SafetyCheck().intent_type == IntentType.SAFETY_CHECK


class TestJobStatus:
    """Test JobStatus value object."""

    def test_values(self):
        assert [status.value for status in JobStatus] == ["In Progress", "Complete"]

    def test_is_final(self):
        assert JobStatus.COMPLETE.is_final() is True
        assert JobStatus.IN_PROGRESS.is_final() is False


class TestTrade:
    """Test Trade value object."""

    def test_enum_comparison(self):
        assert Trade.BUILDER == "builder"
        assert Trade("electrician") is Trade.ELECTRICIAN

    def test_display_name(self):
        assert Trade.PLUMBER.display_name == "Plumber"


class TestNotification:
    """Test Notification value object."""

    def test_plain_notification(self):
        notification = Notification("Job Started", "Deck - Timer running")

        assert notification.is_error is False
        assert notification.error_code is None

    def test_from_error(self):
        notification = Notification.from_error(NoActiveJobError("log materials"))

        assert notification.title == "No Active Job"
        assert notification.message == "Start a job first"
        assert notification.error_code == "no_active_job"
        assert notification.is_error is True
