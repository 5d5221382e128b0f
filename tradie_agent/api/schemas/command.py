"""
Command API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from tradie_agent.domain.value_objects.notification import Notification


class CommandRequest(BaseModel):
    """Free-text command, as transcribed from the operator."""

    text: str = Field(..., max_length=1000, examples=["Job start, Wilson deck build"])


class NotificationResponse(BaseModel):
    """Notification schema."""

    title: str
    message: str
    error_code: Optional[str] = None
    is_error: bool = False

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            title=notification.title,
            message=notification.message,
            error_code=notification.error_code,
            is_error=notification.is_error,
        )
