"""
Operator profile API schemas.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.trade import Trade


class ProfileSelectRequest(BaseModel):
    """Profile switch request. Trade slang such as 'sparky' is accepted."""

    trade: str = Field(..., min_length=1, max_length=50)

    @field_validator("trade")
    @classmethod
    def normalize_trade(cls, v):
        return v.strip().lower()


class ProfileResponse(BaseModel):
    """Operator profile schema."""

    trade: Trade
    name: str
    team_size: int
    label: str
    features_used: List[str]
    daily_summary: bool
    photo_upload: bool

    @classmethod
    def from_entity(cls, profile: OperatorProfile) -> "ProfileResponse":
        return cls(
            trade=profile.trade,
            name=profile.name,
            team_size=profile.team_size,
            label=profile.display_label,
            features_used=list(profile.preferences.features_used),
            daily_summary=profile.preferences.daily_summary,
            photo_upload=profile.preferences.photo_upload,
        )
