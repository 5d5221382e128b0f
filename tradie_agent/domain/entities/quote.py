"""Quote domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple
from uuid import UUID, uuid4

from tradie_agent.domain.value_objects.trade import Trade


@dataclass(frozen=True)
class LabourEstimate:
    """Labour line of a quote."""

    days: int
    daily_rate: int

    def __post_init__(self):
        if self.days < 1:
            raise ValueError("Labour days must be a positive integer")
        if self.daily_rate < 0:
            raise ValueError("Daily rate cannot be negative")

    @property
    def total(self) -> int:
        return self.days * self.daily_rate


@dataclass(frozen=True)
class MaterialLine:
    """Single estimated material."""

    item: str
    cost: int


@dataclass(frozen=True)
class MaterialsEstimate:
    """Itemized materials estimate."""

    items: Tuple[MaterialLine, ...]

    @property
    def total(self) -> int:
        return sum(line.cost for line in self.items)


@dataclass(frozen=True)
class Quote:
    """Price quote drafted for a client.

    Quotes are transient: they are never attached to a job record.
    """

    description: str
    trade: Trade
    labour: LabourEstimate
    materials: MaterialsEstimate
    markup: float
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.markup <= 0:
            raise ValueError("Markup must be positive")

    @property
    def subtotal(self) -> int:
        """Get labour plus materials before markup."""
        return self.labour.total + self.materials.total

    @property
    def markup_amount(self) -> float:
        return round(self.subtotal * self.markup, 2)

    @property
    def total(self) -> float:
        """Get quoted total including markup, rounded to cents."""
        return round(self.subtotal * (1 + self.markup), 2)

    @property
    def display_total(self) -> int:
        """Get total rounded to whole dollars."""
        return round(self.total)
