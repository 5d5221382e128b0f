"""
Domain exceptions package.
"""

from .command_error import (
    CommandError,
    InvalidParameterError,
    UnrecognizedCommandError,
)
from .job_error import JobError, JobMismatchError, NoActiveJobError
from .profile_error import ProfileError, UnknownTradeError

__all__ = [
    "CommandError",
    "InvalidParameterError",
    "JobError",
    "JobMismatchError",
    "NoActiveJobError",
    "ProfileError",
    "UnknownTradeError",
    "UnrecognizedCommandError",
]
