"""
Operator profile domain exceptions.
"""

from tradie_agent.domain.value_objects.trade import Trade


class ProfileError(Exception):
    """Base exception for operator profile errors."""

    hint = None


class UnknownTradeError(ProfileError):
    """Raised when a trade name or alias cannot be resolved."""

    def __init__(self, value: str):
        self.value = value
        self.hint = f"Known trades: {', '.join(trade.value for trade in Trade)}"
        super().__init__(f"Unknown trade '{value}'")
