"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from tradie_agent.domain.entities.job import (
    ComplianceReport,
    Job,
    MaterialEntry,
    ProgressEntry,
)


class JobStoreInterface(ABC):
    """Job store interface.

    The store owns every job record. Readers only ever receive snapshots,
    and every mutation validates before it touches state.
    """

    @abstractmethod
    def create_job(self, name: str, location: str) -> Job:
        """Create a job and make it the active one.

        A replaced active job keeps its status and elapsed time but its
        timer stops.
        """
        pass

    @abstractmethod
    def append_material(self, job_id: UUID, entry: MaterialEntry) -> Job:
        """Append a material entry to the active job."""
        pass

    @abstractmethod
    def append_progress(self, job_id: UUID, entry: ProgressEntry) -> Job:
        """Append a progress entry to the active job."""
        pass

    @abstractmethod
    def append_compliance(self, job_id: UUID, report: ComplianceReport) -> Job:
        """Append a compliance report to the active job."""
        pass

    @abstractmethod
    def complete_job(self, job_id: UUID) -> Job:
        """Complete the active job and clear the active slot."""
        pass

    @abstractmethod
    def tick(self, job_id: UUID, seconds: int = 1) -> bool:
        """Advance elapsed time if the job is active and running."""
        pass

    @abstractmethod
    def get_active_job(self) -> Optional[Job]:
        """Get the active job."""
        pass

    @abstractmethod
    def get_job(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID."""
        pass

    @abstractmethod
    def list_jobs(self) -> List[Job]:
        """Get all jobs in creation order."""
        pass
