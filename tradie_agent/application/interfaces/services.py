"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class CostSourceInterface(ABC):
    """Source of placeholder costs and percentages."""

    @abstractmethod
    def next_cost(self, low: int, high: int) -> int:
        """Get the next integer in the half-open range [low, high)."""
        pass


class JobTimerInterface(ABC):
    """Periodic tick source bound to at most one job."""

    @property
    @abstractmethod
    def job_id(self) -> Optional[UUID]:
        """Get the job the timer is bound to."""
        pass

    @abstractmethod
    def start(self, job_id: UUID) -> None:
        """Bind to a job, cancelling any previous binding first."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Cancel the current binding."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the timer for good."""
        pass
