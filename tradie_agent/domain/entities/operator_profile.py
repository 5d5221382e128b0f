"""Operator profile domain entity."""

from dataclasses import dataclass, field
from typing import Tuple

from tradie_agent.domain.value_objects.trade import Trade


@dataclass(frozen=True)
class ProfilePreferences:
    """Feature preferences of an operator."""

    features_used: Tuple[str, ...] = ()
    daily_summary: bool = True
    photo_upload: bool = False


@dataclass(frozen=True)
class OperatorProfile:
    """Operator profile domain entity."""

    trade: Trade
    name: str
    team_size: int = 1
    preferences: ProfilePreferences = field(default_factory=ProfilePreferences)

    def __post_init__(self):
        """Validate profile data."""
        if not self.name or not self.name.strip():
            raise ValueError("Operator name is required")
        if self.team_size < 1:
            raise ValueError("Team size must be at least 1")

    @property
    def display_label(self) -> str:
        """Get header label, e.g. 'Dave - Builder'."""
        return f"{self.name} - {self.trade.display_name}"
