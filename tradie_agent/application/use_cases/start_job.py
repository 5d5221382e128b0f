"""Start job use case."""

from typing import Optional

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import JobTimerInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import StartJob
from tradie_agent.domain.value_objects.notification import Notification

logger = get_logger(__name__)


class StartJobUseCase(CommandHandlerInterface):
    """Use case for starting a job and its timer."""

    def __init__(
        self,
        job_store: JobStoreInterface,
        timer: JobTimerInterface,
        location: str,
        auto_complete_previous: bool = False,
    ):
        self.job_store = job_store
        self.timer = timer
        self.location = location
        self.auto_complete_previous = auto_complete_previous

    def execute(
        self,
        intent: StartJob,
        profile: OperatorProfile,
        active_job: Optional[Job] = None,
    ) -> CommandResult:
        """Start a new job, replacing the active one."""
        self.timer.stop()

        if active_job:
            if self.auto_complete_previous:
                self.job_store.complete_job(active_job.id)
            logger.info(
                "Replacing active job",
                previous_job_id=str(active_job.id),
                previous_job_name=active_job.name,
                auto_completed=self.auto_complete_previous,
            )

        job = self.job_store.create_job(intent.name, self.location)
        self.timer.start(job.id)

        logger.info(
            "Job started",
            job_id=str(job.id),
            job_name=job.name,
            operator=profile.name,
        )

        return CommandResult(
            notification=Notification("Job Started", f"{job.name} - Timer running"),
            job=job,
        )
