"""
Repository implementations package.
"""

from .in_memory_job_store import InMemoryJobStore

__all__ = [
    "InMemoryJobStore",
]
