"""Job endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from tradie_agent.api.dependencies import AssistantDep
from tradie_agent.api.schemas.job import JobResponse

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=List[JobResponse])
async def list_jobs(assistant: AssistantDep):
    """List every job, oldest first, including completed ones."""
    return [JobResponse.from_entity(job) for job in assistant.get_all_jobs()]


@router.get("/active", response_model=JobResponse)
async def get_active_job(assistant: AssistantDep):
    """Get the job currently receiving updates."""
    job = assistant.get_active_job()
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active job")
    return JobResponse.from_entity(job)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: UUID, assistant: AssistantDep):
    job = assistant.get_job(job_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Job {job_id} not found"
        )
    return JobResponse.from_entity(job)
