"""
Trade value object.
"""

from enum import Enum


class Trade(str, Enum):
    """Operator trade enumeration."""

    BUILDER = "builder"
    ELECTRICIAN = "electrician"
    PLUMBER = "plumber"

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.title()
