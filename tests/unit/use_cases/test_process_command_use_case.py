"""
Unit tests for ProcessCommandUseCase.
"""

from unittest.mock import MagicMock

import pytest

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.services.command_classifier import CommandClassifier
from tradie_agent.application.use_cases.process_command import ProcessCommandUseCase
from tradie_agent.application.use_cases.unrecognized_command import (
    UnrecognizedCommandUseCase,
)
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.exceptions.job_error import JobMismatchError
from tradie_agent.domain.value_objects.intent import (
    GenerateQuote,
    IntentType,
    LogMaterial,
)
from tradie_agent.domain.value_objects.notification import Notification


class TestProcessCommandUseCase:
    """Test cases for ProcessCommandUseCase."""

    @pytest.fixture
    def handlers(self):
        handlers = {
            intent_type: MagicMock(spec=CommandHandlerInterface)
            for intent_type in IntentType
        }
        handlers[IntentType.UNRECOGNIZED] = UnrecognizedCommandUseCase()
        return handlers

    @pytest.fixture
    def active_job(self):
        return Job(name="Wilson deck build", location="Auckland, NZ")

    @pytest.fixture
    def use_case(self, handlers, mock_job_store):
        return ProcessCommandUseCase(CommandClassifier(), handlers, mock_job_store)

    def test_missing_handler_rejected(self, handlers, mock_job_store):
        del handlers[IntentType.SAFETY_CHECK]

        with pytest.raises(ValueError, match="safety_check"):
            ProcessCommandUseCase(CommandClassifier(), handlers, mock_job_store)

    def test_dispatches_with_active_job(
        self, use_case, handlers, mock_job_store, active_job, builder_profile
    ):
        # Arrange
        mock_job_store.get_active_job.return_value = active_job
        expected = CommandResult(notification=Notification("Materials Logged", "nails"))
        handlers[IntentType.LOG_MATERIAL].execute.return_value = expected

        # Act
        result = use_case.execute("Used nails", builder_profile)

        # Assert
        assert result is expected
        handlers[IntentType.LOG_MATERIAL].execute.assert_called_once_with(
            LogMaterial(description="nails"), builder_profile, active_job
        )

    @pytest.mark.parametrize(
        "text, message",
        [
            ("Used nails", "Start a job first"),
            ("framing done", "Start a job first"),
            ("Safety check", "Start a job first"),
            ("Job complete", "No job to complete"),
        ],
    )
    def test_job_intents_need_active_job(
        self, use_case, handlers, builder_profile, text, message
    ):
        result = use_case.execute(text, builder_profile)

        assert result.notification.title == "No Active Job"
        assert result.notification.message == message
        assert result.notification.error_code == "no_active_job"
        for handler in handlers.values():
            if isinstance(handler, MagicMock):
                handler.execute.assert_not_called()

    def test_quote_runs_without_active_job(self, use_case, handlers, builder_profile):
        handlers[IntentType.GENERATE_QUOTE].execute.return_value = CommandResult(
            notification=Notification("Quote Generated", "deck: $1541")
        )

        use_case.execute("Quote for deck", builder_profile)

        handlers[IntentType.GENERATE_QUOTE].execute.assert_called_once_with(
            GenerateQuote(description="deck", days=2), builder_profile, None
        )

    def test_handler_error_becomes_notification(
        self, use_case, handlers, mock_job_store, active_job, builder_profile
    ):
        mock_job_store.get_active_job.return_value = active_job
        handlers[IntentType.LOG_MATERIAL].execute.side_effect = JobMismatchError(
            active_job.id, active_job.id
        )

        result = use_case.execute("Used nails", builder_profile)

        assert result.notification.title == "Job Not Active"
        assert result.notification.error_code == "job_mismatch"
        assert result.job is None

    def test_unrecognized_command(self, use_case, handlers, builder_profile):
        result = use_case.execute("put the kettle on", builder_profile)

        assert result.notification.title == "Command not recognized"
        assert result.notification.message.startswith("Try:")
        for intent_type, handler in handlers.items():
            if intent_type != IntentType.UNRECOGNIZED:
                handler.execute.assert_not_called()
