"""Log progress use case."""

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import CostSourceInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import Job, ProgressEntry
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import LogProgress
from tradie_agent.domain.value_objects.notification import Notification

logger = get_logger(__name__)


class LogProgressUseCase(CommandHandlerInterface):
    """Use case for recording progress on the active job.

    A percentage stated in the command wins; otherwise a placeholder
    estimate is drawn from the cost source.
    """

    def __init__(
        self,
        job_store: JobStoreInterface,
        cost_source: CostSourceInterface,
        percent_min: int = 60,
        percent_max: int = 90,
    ):
        self.job_store = job_store
        self.cost_source = cost_source
        self.percent_min = percent_min
        self.percent_max = percent_max

    def execute(
        self, intent: LogProgress, profile: OperatorProfile, active_job: Job
    ) -> CommandResult:
        percentage = intent.percentage
        if percentage is None:
            percentage = self.cost_source.next_cost(self.percent_min, self.percent_max)

        entry = ProgressEntry(description=intent.description, percentage=percentage)
        job = self.job_store.append_progress(active_job.id, entry)

        logger.info(
            "Progress logged",
            job_id=str(job.id),
            percentage=percentage,
            stated=intent.percentage is not None,
        )

        return CommandResult(
            notification=Notification("Progress Updated", f"{percentage}% complete"),
            job=job,
        )
