"""Generate quote use case."""

from typing import Optional

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.services.quote_engine import QuoteEngine
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import GenerateQuote
from tradie_agent.domain.value_objects.notification import Notification
from tradie_agent.infrastructure.monitoring.metrics import record_quote


class GenerateQuoteUseCase(CommandHandlerInterface):
    """Use case for drafting a quote. Does not need an active job."""

    def __init__(self, quote_engine: QuoteEngine):
        self.quote_engine = quote_engine

    def execute(
        self,
        intent: GenerateQuote,
        profile: OperatorProfile,
        active_job: Optional[Job] = None,
    ) -> CommandResult:
        quote = self.quote_engine.estimate(
            profile.trade, intent.description, intent.days
        )
        record_quote(profile.trade.value)

        return CommandResult(
            notification=Notification(
                "Quote Generated", f"{quote.description}: ${quote.display_total}"
            ),
            quote=quote,
        )
