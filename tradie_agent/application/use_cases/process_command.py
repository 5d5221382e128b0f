"""Process command use case."""

from typing import Dict

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.services.command_classifier import CommandClassifier
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.exceptions.command_error import CommandError
from tradie_agent.domain.exceptions.job_error import JobError, NoActiveJobError
from tradie_agent.domain.value_objects.intent import Intent, IntentType
from tradie_agent.domain.value_objects.notification import Notification
from tradie_agent.infrastructure.monitoring.metrics import (
    record_command,
    record_command_failure,
)

logger = get_logger(__name__)

# What the operator was trying to do, for the no-active-job error
JOB_ACTIONS = {
    IntentType.LOG_MATERIAL: "log materials",
    IntentType.LOG_PROGRESS: "log progress",
    IntentType.SAFETY_CHECK: "file compliance report",
    IntentType.COMPLETE_JOB: "complete job",
}

NO_ACTIVE_JOB_HINTS = {
    IntentType.COMPLETE_JOB: "No job to complete",
}


class ProcessCommandUseCase:
    """Classifies a command and dispatches it to its handler.

    Intents that require an active job are rejected here when there is
    none, before any handler runs. Job and command errors raised by
    handlers become error notifications; the store is left as the failed
    handler found it.
    """

    def __init__(
        self,
        classifier: CommandClassifier,
        handlers: Dict[IntentType, CommandHandlerInterface],
        job_store: JobStoreInterface,
    ):
        missing = set(IntentType) - set(handlers)
        if missing:
            raise ValueError(
                f"No handler registered for: {sorted(i.value for i in missing)}"
            )

        self.classifier = classifier
        self.handlers = handlers
        self.job_store = job_store

    def execute(self, text: str, profile: OperatorProfile) -> CommandResult:
        intent = self.classifier.classify(text)
        record_command(intent.intent_type.value)

        try:
            return self._dispatch(intent, profile)
        except (JobError, CommandError) as e:
            logger.warning(
                "Command rejected",
                command=text,
                intent=intent.intent_type.value,
                error_code=e.code,
                error=str(e),
            )
            record_command_failure(e.code)
            return CommandResult(notification=Notification.from_error(e))

    def _dispatch(self, intent: Intent, profile: OperatorProfile) -> CommandResult:
        intent_type = intent.intent_type
        active_job = self.job_store.get_active_job()

        if intent_type.requires_active_job and active_job is None:
            hint = NO_ACTIVE_JOB_HINTS.get(intent_type, "Start a job first")
            raise NoActiveJobError(JOB_ACTIONS[intent_type], hint=hint)

        return self.handlers[intent_type].execute(intent, profile, active_job)
