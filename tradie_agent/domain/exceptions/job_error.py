"""
Job-related domain exceptions.
"""

from typing import Optional
from uuid import UUID


class JobError(Exception):
    """Base exception for job lifecycle errors."""

    code = "job_error"
    title = "Job Error"

    def __init__(self, message: str, hint: Optional[str] = None):
        self.hint = hint or message
        super().__init__(message)


class NoActiveJobError(JobError):
    """Raised when an update needs an active job and there is none."""

    code = "no_active_job"
    title = "No Active Job"

    def __init__(self, action: str, hint: str = "Start a job first"):
        self.action = action
        super().__init__(f"Cannot {action}: no active job", hint=hint)


class JobMismatchError(JobError):
    """Raised when an update targets a job that is not the active one."""

    code = "job_mismatch"
    title = "Job Not Active"

    def __init__(self, job_id: UUID, active_job_id: UUID):
        self.job_id = job_id
        self.active_job_id = active_job_id
        super().__init__(
            f"Job {job_id} is not the active job ({active_job_id})",
            hint="That job is no longer active",
        )
