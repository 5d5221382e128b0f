"""Safety check use case."""

from tradie_agent.application.interfaces.handlers import (
    CommandHandlerInterface,
    CommandResult,
)
from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.services.knowledge_base import TradeKnowledgeBase
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.entities.job import ComplianceReport, Job
from tradie_agent.domain.entities.operator_profile import OperatorProfile
from tradie_agent.domain.value_objects.intent import SafetyCheck
from tradie_agent.domain.value_objects.notification import Notification

logger = get_logger(__name__)

DAILY_SAFETY_CHECK = "Daily Safety Check"


class SafetyCheckUseCase(CommandHandlerInterface):
    """Use case for filing a daily health and safety report."""

    def __init__(self, job_store: JobStoreInterface, knowledge_base: TradeKnowledgeBase):
        self.job_store = job_store
        self.knowledge_base = knowledge_base

    def execute(
        self, intent: SafetyCheck, profile: OperatorProfile, active_job: Job
    ) -> CommandResult:
        report = ComplianceReport(
            report_type=DAILY_SAFETY_CHECK,
            items=self.knowledge_base.daily_checklist(),
            job_reference=active_job.name,
            inspector=profile.name,
        )
        job = self.job_store.append_compliance(active_job.id, report)

        logger.info(
            "Compliance report filed",
            job_id=str(job.id),
            report_id=str(report.id),
            inspector=report.inspector,
            items=len(report.items),
        )

        return CommandResult(
            notification=Notification("Compliance Report", "H&S report generated"),
            job=job,
        )
