"""
Command handler interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.entities.quote import Quote
from tradie_agent.domain.value_objects.intent import Intent
from tradie_agent.domain.value_objects.notification import Notification


@dataclass
class CommandResult:
    """Result of applying an intent."""

    notification: Notification
    job: Optional[Job] = None
    quote: Optional[Quote] = None


class CommandHandlerInterface(ABC):
    """Handler for a single intent type."""

    @abstractmethod
    def execute(
        self,
        intent: Intent,
        profile: OperatorProfile,
        active_job: Optional[Job] = None,
    ) -> CommandResult:
        """Apply the intent to the active job snapshot, if any.

        The dispatcher only calls handlers of intents that require an
        active job when one exists. Domain errors propagate to it.
        """
        pass
