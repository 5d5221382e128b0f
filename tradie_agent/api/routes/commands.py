"""Command endpoints."""

from fastapi import APIRouter

from tradie_agent.api.dependencies import AssistantDep
from tradie_agent.api.schemas.command import CommandRequest, NotificationResponse
from tradie_agent.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/commands", tags=["commands"])


@router.post("", response_model=NotificationResponse)
async def submit_command(request: CommandRequest, assistant: AssistantDep):
    """Interpret a free-text command.

    Rejected commands still return 200; the notification carries the
    error code.
    """
    notification = assistant.submit_command(request.text)
    return NotificationResponse.from_notification(notification)
