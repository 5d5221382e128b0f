"""
Command intent value objects.

An intent is the classified meaning of a raw command string together with
the parameters extracted from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional


class IntentType(str, Enum):
    """Intent type enumeration."""

    START_JOB = "start_job"
    LOG_MATERIAL = "log_material"
    GENERATE_QUOTE = "generate_quote"
    LOG_PROGRESS = "log_progress"
    SAFETY_CHECK = "safety_check"
    COMPLETE_JOB = "complete_job"
    UNRECOGNIZED = "unrecognized"

    @property
    def requires_active_job(self) -> bool:
        """Check if intent can only be applied to an active job."""
        return self in [
            self.LOG_MATERIAL,
            self.LOG_PROGRESS,
            self.SAFETY_CHECK,
            self.COMPLETE_JOB,
        ]


@dataclass(frozen=True)
class Intent:
    """Base intent."""

    intent_type: ClassVar[IntentType]


@dataclass(frozen=True)
class StartJob(Intent):
    intent_type: ClassVar[IntentType] = IntentType.START_JOB

    name: str


@dataclass(frozen=True)
class LogMaterial(Intent):
    intent_type: ClassVar[IntentType] = IntentType.LOG_MATERIAL

    description: str


@dataclass(frozen=True)
class GenerateQuote(Intent):
    intent_type: ClassVar[IntentType] = IntentType.GENERATE_QUOTE

    description: str
    days: int


@dataclass(frozen=True)
class LogProgress(Intent):
    intent_type: ClassVar[IntentType] = IntentType.LOG_PROGRESS

    description: str
    percentage: Optional[int] = None  # Only when the operator stated one


@dataclass(frozen=True)
class SafetyCheck(Intent):
    intent_type: ClassVar[IntentType] = IntentType.SAFETY_CHECK


@dataclass(frozen=True)
class CompleteJob(Intent):
    intent_type: ClassVar[IntentType] = IntentType.COMPLETE_JOB


@dataclass(frozen=True)
class Unrecognized(Intent):
    intent_type: ClassVar[IntentType] = IntentType.UNRECOGNIZED

    original: str
