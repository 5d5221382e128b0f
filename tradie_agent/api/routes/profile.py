"""Operator profile endpoints."""

from fastapi import APIRouter

from tradie_agent.api.dependencies import AssistantDep
from tradie_agent.api.schemas.profile import ProfileResponse, ProfileSelectRequest

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(assistant: AssistantDep):
    return ProfileResponse.from_entity(assistant.current_profile)


@router.put("", response_model=ProfileResponse)
async def select_profile(request: ProfileSelectRequest, assistant: AssistantDep):
    """Switch operator profile. Unknown trades are rejected with 400."""
    assistant.select_profile(request.trade)
    return ProfileResponse.from_entity(assistant.current_profile)
