"""
In-memory job store.
"""

from typing import Callable, Dict, List, Optional
from uuid import UUID

from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import (
    ComplianceReport,
    Job,
    MaterialEntry,
    ProgressEntry,
)
from tradie_agent.domain.exceptions.job_error import (
    JobMismatchError,
    NoActiveJobError,
)

logger = get_logger(__name__)


class InMemoryJobStore(JobStoreInterface):
    """Process-lifetime job store with a single active job slot."""

    def __init__(self):
        self._jobs: Dict[UUID, Job] = {}  # insertion order is creation order
        self._active_job_id: Optional[UUID] = None

    def create_job(self, name: str, location: str) -> Job:
        job = Job(name=name, location=location)

        previous_job_id = self._active_job_id
        if previous_job_id is not None:
            # Replaced jobs stay In Progress but stop accruing time
            self._jobs[previous_job_id].stop_timer()

        self._jobs[job.id] = job
        self._active_job_id = job.id

        logger.info(
            "Job created",
            job_id=str(job.id),
            job_name=job.name,
            replaced_job_id=str(previous_job_id) if previous_job_id else None,
        )
        return job.snapshot()

    def append_material(self, job_id: UUID, entry: MaterialEntry) -> Job:
        return self._update_active(
            job_id, "log materials", lambda job: job.add_material(entry)
        )

    def append_progress(self, job_id: UUID, entry: ProgressEntry) -> Job:
        return self._update_active(
            job_id, "log progress", lambda job: job.add_progress(entry)
        )

    def append_compliance(self, job_id: UUID, report: ComplianceReport) -> Job:
        return self._update_active(
            job_id, "file compliance report", lambda job: job.add_compliance(report)
        )

    def complete_job(self, job_id: UUID) -> Job:
        job = self._require_active(job_id, "complete job", hint="No job to complete")

        job.mark_completed()
        self._active_job_id = None

        logger.info(
            "Job completed",
            job_id=str(job.id),
            job_name=job.name,
            elapsed_time=job.elapsed_time,
        )
        return job.snapshot()

    def tick(self, job_id: UUID, seconds: int = 1) -> bool:
        if job_id != self._active_job_id:
            return False

        return self._jobs[job_id].advance_timer(seconds)

    def get_active_job(self) -> Optional[Job]:
        if self._active_job_id is None:
            return None
        return self._jobs[self._active_job_id].snapshot()

    def get_job(self, job_id: UUID) -> Optional[Job]:
        job = self._jobs.get(job_id)
        return job.snapshot() if job else None

    def list_jobs(self) -> List[Job]:
        return [job.snapshot() for job in self._jobs.values()]

    @property
    def active_job_id(self) -> Optional[UUID]:
        return self._active_job_id

    def _require_active(
        self, job_id: UUID, action: str, hint: str = "Start a job first"
    ) -> Job:
        if self._active_job_id is None:
            raise NoActiveJobError(action, hint=hint)
        if job_id != self._active_job_id:
            raise JobMismatchError(job_id, self._active_job_id)
        return self._jobs[job_id]

    def _update_active(
        self, job_id: UUID, action: str, mutate: Callable[[Job], None]
    ) -> Job:
        job = self._require_active(job_id, action)
        mutate(job)

        logger.debug("Job updated", job_id=str(job_id), action=action)
        return job.snapshot()
