"""
Infrastructure layer package.

Concrete implementations of the application interfaces.
"""

from .repositories import InMemoryJobStore

__all__ = [
    "InMemoryJobStore",
]
