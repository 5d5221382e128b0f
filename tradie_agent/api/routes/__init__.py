"""
API routes package.
"""

from .commands import router as commands_router
from .health import router as health_router
from .jobs import router as jobs_router
from .profile import router as profile_router
from .quotes import router as quotes_router

__all__ = [
    "commands_router",
    "health_router",
    "jobs_router",
    "profile_router",
    "quotes_router",
]
