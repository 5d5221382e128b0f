"""Log material use case."""

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import CostSourceInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import Job, MaterialEntry
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import LogMaterial
from tradie_agent.domain.value_objects.notification import Notification

logger = get_logger(__name__)


class LogMaterialUseCase(CommandHandlerInterface):
    """Use case for logging materials against the active job."""

    def __init__(
        self,
        job_store: JobStoreInterface,
        cost_source: CostSourceInterface,
        cost_min: int = 50,
        cost_max: int = 250,
    ):
        self.job_store = job_store
        self.cost_source = cost_source
        self.cost_min = cost_min
        self.cost_max = cost_max

    def execute(
        self, intent: LogMaterial, profile: OperatorProfile, active_job: Job
    ) -> CommandResult:
        # Placeholder until materials are priced from a catalogue
        entry = MaterialEntry(
            description=intent.description,
            cost=self.cost_source.next_cost(self.cost_min, self.cost_max),
        )
        job = self.job_store.append_material(active_job.id, entry)

        logger.info(
            "Materials logged",
            job_id=str(job.id),
            description=entry.description,
            cost=entry.cost,
        )

        return CommandResult(
            notification=Notification("Materials Logged", entry.description),
            job=job,
        )
