"""
API package.
"""

from .app import create_app
from .dependencies import AssistantDep
from .middleware import *
from .routes import *
from .schemas import *

__all__ = [
    "create_app",

    # Dependencies
    "AssistantDep",

    # Middleware
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",

    # Routes
    "commands_router",
    "health_router",
    "jobs_router",
    "profile_router",
    "quotes_router",

    # Schemas
    "CommandRequest",
    "JobResponse",
    "NotificationResponse",
    "ProfileResponse",
    "QuoteResponse",
]
