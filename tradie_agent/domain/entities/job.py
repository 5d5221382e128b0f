"""Job domain entity and its log entries."""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from tradie_agent.domain.value_objects.job_status import JobStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MaterialEntry:
    """Material used on a job."""

    description: str
    cost: int
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        if self.cost < 0:
            raise ValueError("Material cost cannot be negative")


@dataclass(frozen=True)
class ProgressEntry:
    """Progress update on a job."""

    description: str
    percentage: int
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        if not 0 <= self.percentage <= 100:
            raise ValueError("Progress percentage must be between 0 and 100")


@dataclass(frozen=True)
class ComplianceReport:
    """Health and safety report filed against a job."""

    report_type: str
    items: Tuple[str, ...]
    job_reference: str
    inspector: str
    status: str = "Compliant"
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=_now)


@dataclass
class Job:
    """Job domain entity."""

    name: str
    location: str
    id: UUID = field(default_factory=uuid4)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: JobStatus = JobStatus.IN_PROGRESS
    elapsed_time: int = 0
    timer_running: bool = True

    # Append-only logs
    materials: List[MaterialEntry] = field(default_factory=list)
    progress: List[ProgressEntry] = field(default_factory=list)
    compliance: List[ComplianceReport] = field(default_factory=list)

    def __post_init__(self):
        """Validate job data."""
        if not self.name or not self.name.strip():
            raise ValueError("Job name is required")

        if not self.start_time:
            self.start_time = _now()

    @property
    def is_running(self) -> bool:
        """Check if job is accruing time."""
        return self.timer_running and not self.status.is_final()

    @property
    def elapsed_display(self) -> str:
        """Get elapsed time formatted as hours and minutes."""
        hours = self.elapsed_time // 3600
        minutes = (self.elapsed_time % 3600) // 60
        return f"{hours}h {minutes}m"

    @property
    def materials_cost(self) -> int:
        """Get total cost of logged materials."""
        return sum(entry.cost for entry in self.materials)

    def add_material(self, entry: MaterialEntry) -> None:
        self._ensure_open()
        self.materials.append(entry)

    def add_progress(self, entry: ProgressEntry) -> None:
        self._ensure_open()
        self.progress.append(entry)

    def add_compliance(self, report: ComplianceReport) -> None:
        self._ensure_open()
        self.compliance.append(report)

    def advance_timer(self, seconds: int = 1) -> bool:
        """Add running time. Returns False when the timer is stopped."""
        if seconds < 0:
            raise ValueError("Elapsed time cannot go backwards")
        if not self.is_running:
            return False

        self.elapsed_time += seconds
        return True

    def stop_timer(self) -> None:
        """Stop accruing time. Status and elapsed time are kept."""
        self.timer_running = False

    def mark_completed(self, end_time: Optional[datetime] = None) -> None:
        """Mark job as completed."""
        self._ensure_open()

        self.status = JobStatus.COMPLETE
        self.end_time = end_time or _now()
        self.stop_timer()

    def snapshot(self) -> "Job":
        """Get a detached copy safe to hand to readers."""
        return copy.deepcopy(self)

    def _ensure_open(self) -> None:
        if self.status.is_final():
            raise ValueError("Job is already completed")
