"""
Application interfaces package.
"""

from .handlers import CommandHandlerInterface, CommandResult
from .repositories import JobStoreInterface
from .services import CostSourceInterface, JobTimerInterface

__all__ = [
    "CommandHandlerInterface",
    "CommandResult",
    "CostSourceInterface",
    "JobStoreInterface",
    "JobTimerInterface",
]
