"""
Job status value object.
"""

from enum import Enum


class JobStatus(str, Enum):
    """Job lifecycle status enumeration."""

    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"

    def is_final(self) -> bool:
        """Check if status is final (no more updates accepted)."""
        return self == self.COMPLETE
