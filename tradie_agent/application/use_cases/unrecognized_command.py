"""Unrecognized command use case."""

from typing import Optional

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.exceptions.command_error import UnrecognizedCommandError
from tradie_agent.domain.value_objects.intent import Unrecognized


class UnrecognizedCommandUseCase(CommandHandlerInterface):
    """Rejects commands the classifier could not place."""

    def execute(
        self,
        intent: Unrecognized,
        profile: OperatorProfile,
        active_job: Optional[Job] = None,
    ) -> CommandResult:
        raise UnrecognizedCommandError(intent.original)
