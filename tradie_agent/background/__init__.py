"""
Background tasks package.
"""

from .job_timer import AsyncioJobTimer

__all__ = [
    "AsyncioJobTimer",
]
