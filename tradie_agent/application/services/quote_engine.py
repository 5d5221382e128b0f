"""
Quote engine for labour and materials estimates.
"""

from tradie_agent.application.interfaces.services import CostSourceInterface
from tradie_agent.application.services.knowledge_base import TradeKnowledgeBase
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.quote import (
    LabourEstimate,
    MaterialLine,
    MaterialsEstimate,
    Quote,
)
from tradie_agent.domain.value_objects.trade import Trade

logger = get_logger(__name__)


class QuoteEngine:
    """Builds quotes from trade rates and the materials catalogue."""

    def __init__(
        self,
        knowledge_base: TradeKnowledgeBase,
        cost_source: CostSourceInterface,
        markup: float = 0.15,
        default_days: int = 2,
        material_items: int = 3,
        item_cost_min: int = 25,
        item_cost_max: int = 175,
    ):
        self.knowledge_base = knowledge_base
        self.cost_source = cost_source
        self.markup = markup
        self.default_days = default_days
        self.material_items = material_items
        self.item_cost_min = item_cost_min
        self.item_cost_max = item_cost_max
        self.logger = logger

    def estimate(self, trade: Trade, description: str, days: int) -> Quote:
        """
        Estimate a job.

        Args:
            trade: Trade whose daily rate and materials apply
            description: Free-text job description
            days: Labour days; values below 1 fall back to the default

        Returns:
            Quote with labour, materials, markup and total
        """
        if days is None or days < 1:
            self.logger.warning(
                "Invalid quote days, using default",
                days=days,
                default_days=self.default_days,
            )
            days = self.default_days

        labour = LabourEstimate(
            days=days, daily_rate=self.knowledge_base.daily_rate(trade)
        )
        materials = self._estimate_materials(trade)

        quote = Quote(
            description=description,
            trade=trade,
            labour=labour,
            materials=materials,
            markup=self.markup,
        )

        self.logger.info(
            "Quote estimated",
            quote_id=str(quote.id),
            trade=trade.value,
            days=days,
            labour_total=labour.total,
            materials_total=materials.total,
            total=quote.total,
        )

        return quote

    def _estimate_materials(self, trade: Trade) -> MaterialsEstimate:
        catalogue = self.knowledge_base.materials_for(trade)
        lines = tuple(
            MaterialLine(
                item=item,
                cost=self.cost_source.next_cost(
                    self.item_cost_min, self.item_cost_max
                ),
            )
            for item in catalogue[: self.material_items]
        )
        return MaterialsEstimate(items=lines)
