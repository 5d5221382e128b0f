"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "ComplianceReport",
    "Job",
    "MaterialEntry",
    "OperatorProfile",
    "ProgressEntry",
    "Quote",

    # Exceptions
    "CommandError",
    "JobError",
    "NoActiveJobError",
    "ProfileError",

    # Value Objects
    "Intent",
    "IntentType",
    "JobStatus",
    "Notification",
    "Trade",
]
