"""Complete job use case."""

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import JobTimerInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import CompleteJob
from tradie_agent.domain.value_objects.notification import Notification

logger = get_logger(__name__)


class CompleteJobUseCase(CommandHandlerInterface):
    """Use case for finishing the active job."""

    def __init__(self, job_store: JobStoreInterface, timer: JobTimerInterface):
        self.job_store = job_store
        self.timer = timer

    def execute(
        self, intent: CompleteJob, profile: OperatorProfile, active_job: Job
    ) -> CommandResult:
        self.timer.stop()
        job = self.job_store.complete_job(active_job.id)

        logger.info(
            "Job finished",
            job_id=str(job.id),
            job_name=job.name,
            elapsed=job.elapsed_display,
            materials_logged=len(job.materials),
            materials_cost=job.materials_cost,
        )

        return CommandResult(
            notification=Notification("Job Complete", f"{job.name} finished"),
            job=job,
        )
