"""
Domain value objects package.
"""

from .intent import (
    CompleteJob,
    GenerateQuote,
    Intent,
    IntentType,
    LogMaterial,
    LogProgress,
    SafetyCheck,
    StartJob,
    Unrecognized,
)
from .job_status import JobStatus
from .notification import Notification
from .trade import Trade

__all__ = [
    "CompleteJob",
    "GenerateQuote",
    "Intent",
    "IntentType",
    "JobStatus",
    "LogMaterial",
    "LogProgress",
    "Notification",
    "SafetyCheck",
    "StartJob",
    "Trade",
    "Unrecognized",
]
