"""Quote endpoints."""

from fastapi import APIRouter, HTTPException, status

from tradie_agent.api.dependencies import AssistantDep
from tradie_agent.api.schemas.command import NotificationResponse
from tradie_agent.api.schemas.quote import QuoteResponse

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.get("/last", response_model=QuoteResponse)
async def get_last_quote(assistant: AssistantDep):
    quote = assistant.get_last_quote()
    if not quote:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No quote generated yet"
        )
    return QuoteResponse.from_entity(quote)


@router.post("/last/send", response_model=NotificationResponse)
async def send_last_quote(assistant: AssistantDep):
    return NotificationResponse.from_notification(assistant.confirm_quote_send())
