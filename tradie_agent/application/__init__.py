"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the command engine.
"""

from .interfaces import (
    CommandHandlerInterface,
    CommandResult,
    CostSourceInterface,
    JobStoreInterface,
    JobTimerInterface,
)
from .services import CommandClassifier, QuoteEngine, RandomCostSource

__all__ = [
    # Interfaces
    "CommandHandlerInterface",
    "CommandResult",
    "CostSourceInterface",
    "JobStoreInterface",
    "JobTimerInterface",
    # Services
    "CommandClassifier",
    "QuoteEngine",
    "RandomCostSource",
]
