"""
Notification value object.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Notification:
    """User-facing outcome of a command."""

    title: str
    message: str
    error_code: Optional[str] = None

    @property
    def is_error(self) -> bool:
        """Check if notification reports a rejected command."""
        return self.error_code is not None

    @classmethod
    def from_error(cls, error: Exception) -> "Notification":
        """Build a notification from a domain error."""
        return cls(
            title=getattr(error, "title", "Error"),
            message=getattr(error, "hint", str(error)),
            error_code=getattr(error, "code", "error"),
        )
