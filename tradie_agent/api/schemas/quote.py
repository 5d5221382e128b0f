"""
Quote API schemas.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel

from tradie_agent.domain.entities.quote import Quote
from tradie_agent.domain.value_objects.trade import Trade


class LabourSchema(BaseModel):
    days: int
    rate: int
    total: int


class MaterialLineSchema(BaseModel):
    item: str
    cost: int


class MaterialsEstimateSchema(BaseModel):
    items: List[MaterialLineSchema]
    total: int


class QuoteResponse(BaseModel):
    """Quote response schema."""

    id: UUID
    created_at: datetime
    description: str
    trade: Trade
    labour: LabourSchema
    materials: MaterialsEstimateSchema
    markup: float
    markup_amount: float
    total: float
    display_total: int

    @classmethod
    def from_entity(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            id=quote.id,
            created_at=quote.created_at,
            description=quote.description,
            trade=quote.trade,
            labour=LabourSchema(
                days=quote.labour.days,
                rate=quote.labour.daily_rate,
                total=quote.labour.total,
            ),
            materials=MaterialsEstimateSchema(
                items=[
                    MaterialLineSchema(item=line.item, cost=line.cost)
                    for line in quote.materials.items
                ],
                total=quote.materials.total,
            ),
            markup=quote.markup,
            markup_amount=quote.markup_amount,
            total=quote.total,
            display_total=quote.display_total,
        )
