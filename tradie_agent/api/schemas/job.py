"""
Job-related API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from tradie_agent.domain.entities.job import (
    ComplianceReport,
    Job,
    MaterialEntry,
    ProgressEntry,
)
from tradie_agent.domain.value_objects.job_status import JobStatus


class MaterialEntrySchema(BaseModel):
    """Material entry schema."""

    id: UUID
    timestamp: datetime
    description: str
    cost: int = Field(..., ge=0)

    @classmethod
    def from_entity(cls, entry: MaterialEntry) -> "MaterialEntrySchema":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            description=entry.description,
            cost=entry.cost,
        )


class ProgressEntrySchema(BaseModel):
    """Progress entry schema."""

    id: UUID
    timestamp: datetime
    description: str
    percentage: int = Field(..., ge=0, le=100)

    @classmethod
    def from_entity(cls, entry: ProgressEntry) -> "ProgressEntrySchema":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            description=entry.description,
            percentage=entry.percentage,
        )


class ComplianceReportSchema(BaseModel):
    """Compliance report schema."""

    id: UUID
    timestamp: datetime
    type: str
    items: List[str]
    job_reference: str
    inspector: str
    status: str

    @classmethod
    def from_entity(cls, report: ComplianceReport) -> "ComplianceReportSchema":
        return cls(
            id=report.id,
            timestamp=report.timestamp,
            type=report.report_type,
            items=list(report.items),
            job_reference=report.job_reference,
            inspector=report.inspector,
            status=report.status,
        )


class JobResponse(BaseModel):
    """Job response schema."""

    id: UUID
    name: str
    location: str
    status: JobStatus
    start_time: datetime
    end_time: Optional[datetime] = None
    elapsed_time: int
    elapsed_display: str
    timer_running: bool
    materials_cost: int
    materials: List[MaterialEntrySchema] = []
    progress: List[ProgressEntrySchema] = []
    compliance: List[ComplianceReportSchema] = []

    @classmethod
    def from_entity(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            name=job.name,
            location=job.location,
            status=job.status,
            start_time=job.start_time,
            end_time=job.end_time,
            elapsed_time=job.elapsed_time,
            elapsed_display=job.elapsed_display,
            timer_running=job.timer_running,
            materials_cost=job.materials_cost,
            materials=[MaterialEntrySchema.from_entity(e) for e in job.materials],
            progress=[ProgressEntrySchema.from_entity(e) for e in job.progress],
            compliance=[ComplianceReportSchema.from_entity(r) for r in job.compliance],
        )
