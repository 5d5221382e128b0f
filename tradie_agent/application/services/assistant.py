"""
Job assistant: the entry point a UI uses to drive the command engine.
"""

from typing import List, Optional, Union
from uuid import UUID

from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import (
    CostSourceInterface,
    JobTimerInterface,
)
from tradie_agent.application.services.command_classifier import CommandClassifier
from tradie_agent.application.services.cost_source import RandomCostSource
from tradie_agent.application.services.knowledge_base import (
    DEMO_PROFILES,
    NZ_TRADE_KNOWLEDGE,
    TradeKnowledgeBase,
)
from tradie_agent.application.services.quote_engine import QuoteEngine
from tradie_agent.application.use_cases.complete_job import CompleteJobUseCase
from tradie_agent.application.use_cases.generate_quote import GenerateQuoteUseCase
from tradie_agent.application.use_cases.log_material import LogMaterialUseCase
from tradie_agent.application.use_cases.log_progress import LogProgressUseCase
from tradie_agent.application.use_cases.process_command import ProcessCommandUseCase
from tradie_agent.application.use_cases.safety_check import SafetyCheckUseCase
from tradie_agent.application.use_cases.start_job import StartJobUseCase
from tradie_agent.application.use_cases.unrecognized_command import (
    UnrecognizedCommandUseCase,
)
from tradie_agent.background.job_timer import AsyncioJobTimer
from tradie_agent.config.logging import get_logger
from tradie_agent.config.settings import Settings, settings
from tradie_agent.domain.entities.job import Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.entities.quote import Quote
from tradie_agent.domain.value_objects.intent import IntentType
from tradie_agent.domain.value_objects.notification import Notification
from tradie_agent.domain.value_objects.trade import Trade
from tradie_agent.infrastructure.repositories.in_memory_job_store import (
    InMemoryJobStore,
)

logger = get_logger(__name__)


class JobAssistant:
    """Owns the job store, operator profile, timer and last quote.

    All state lives on the instance; nothing is shared between assistants.
    """

    def __init__(
        self,
        job_store: Optional[JobStoreInterface] = None,
        knowledge_base: TradeKnowledgeBase = NZ_TRADE_KNOWLEDGE,
        cost_source: Optional[CostSourceInterface] = None,
        timer: Optional[JobTimerInterface] = None,
        profile: Optional[OperatorProfile] = None,
        config: Settings = settings,
    ):
        self.config = config
        self.knowledge_base = knowledge_base
        self.job_store = job_store or InMemoryJobStore()
        self.cost_source = cost_source or RandomCostSource(config.COST_SEED)
        self.timer = timer or AsyncioJobTimer(
            self.job_store.tick, interval_seconds=config.TIMER_INTERVAL_SECONDS
        )
        self._profile = profile or DEMO_PROFILES[
            knowledge_base.resolve_trade(config.DEFAULT_TRADE)
        ]
        self._last_quote: Optional[Quote] = None

        quote_engine = QuoteEngine(
            knowledge_base,
            self.cost_source,
            markup=config.QUOTE_MARKUP,
            default_days=config.QUOTE_DEFAULT_DAYS,
            material_items=config.QUOTE_MATERIAL_ITEMS,
            item_cost_min=config.QUOTE_ITEM_COST_MIN,
            item_cost_max=config.QUOTE_ITEM_COST_MAX,
        )

        self.process_command = ProcessCommandUseCase(
            CommandClassifier(
                default_days=config.QUOTE_DEFAULT_DAYS,
                default_job_name=config.DEFAULT_JOB_NAME,
            ),
            {
                IntentType.START_JOB: StartJobUseCase(
                    self.job_store,
                    self.timer,
                    location=config.DEFAULT_JOB_LOCATION,
                    auto_complete_previous=config.AUTO_COMPLETE_PREVIOUS_JOB,
                ),
                IntentType.LOG_MATERIAL: LogMaterialUseCase(
                    self.job_store,
                    self.cost_source,
                    cost_min=config.MATERIAL_COST_MIN,
                    cost_max=config.MATERIAL_COST_MAX,
                ),
                IntentType.GENERATE_QUOTE: GenerateQuoteUseCase(quote_engine),
                IntentType.LOG_PROGRESS: LogProgressUseCase(
                    self.job_store,
                    self.cost_source,
                    percent_min=config.PROGRESS_PERCENT_MIN,
                    percent_max=config.PROGRESS_PERCENT_MAX,
                ),
                IntentType.SAFETY_CHECK: SafetyCheckUseCase(
                    self.job_store, knowledge_base
                ),
                IntentType.COMPLETE_JOB: CompleteJobUseCase(self.job_store, self.timer),
                IntentType.UNRECOGNIZED: UnrecognizedCommandUseCase(),
            },
            self.job_store,
        )

    @property
    def current_profile(self) -> OperatorProfile:
        return self._profile

    def submit_command(self, text: str) -> Notification:
        """Interpret a command and apply it to the job store."""
        result = self.process_command.execute(text, self._profile)

        if result.quote is not None:
            self._last_quote = result.quote

        return result.notification

    def select_profile(self, trade: Union[Trade, str]) -> Notification:
        """Switch operator profile. Existing jobs are not touched."""
        resolved = self.knowledge_base.resolve_trade(trade)
        self._profile = DEMO_PROFILES[resolved]

        logger.info(
            "Operator profile selected",
            trade=resolved.value,
            operator=self._profile.name,
        )
        return Notification("Profile Switched", self._profile.display_label)

    def get_active_job(self) -> Optional[Job]:
        return self.job_store.get_active_job()

    def get_all_jobs(self) -> List[Job]:
        return self.job_store.list_jobs()

    def get_job(self, job_id: UUID) -> Optional[Job]:
        return self.job_store.get_job(job_id)

    def get_last_quote(self) -> Optional[Quote]:
        return self._last_quote

    def confirm_quote_send(self) -> Notification:
        """Send the last quote to the client. Nothing leaves the process."""
        if self._last_quote is None:
            return Notification(
                "No Quote", "Generate a quote first", error_code="no_quote"
            )

        logger.info(
            "Quote sent",
            quote_id=str(self._last_quote.id),
            total=self._last_quote.total,
        )
        return Notification("Quote Sent", "Professional quote sent to client")

    def close(self) -> None:
        """Stop the timer. Safe to call more than once."""
        self.timer.close()

    def __enter__(self) -> "JobAssistant":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
