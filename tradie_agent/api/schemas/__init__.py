"""
API schemas for the Tradie Job Assistant.
"""

from .command import CommandRequest, NotificationResponse
from .common import BaseResponse, ErrorResponse
from .job import JobResponse
from .profile import ProfileResponse, ProfileSelectRequest
from .quote import QuoteResponse

__all__ = [
    "BaseResponse",
    "CommandRequest",
    "ErrorResponse",
    "JobResponse",
    "NotificationResponse",
    "ProfileResponse",
    "ProfileSelectRequest",
    "QuoteResponse",
]
