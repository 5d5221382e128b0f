"""
Use cases package.

One handler per command intent, plus the dispatcher that routes a raw
command to its handler.
"""

from .complete_job import CompleteJobUseCase
from .generate_quote import GenerateQuoteUseCase
from .log_material import LogMaterialUseCase
from .log_progress import LogProgressUseCase
from .process_command import ProcessCommandUseCase
from .safety_check import SafetyCheckUseCase
from .start_job import StartJobUseCase
from .unrecognized_command import UnrecognizedCommandUseCase

__all__ = [
    "CompleteJobUseCase",
    "GenerateQuoteUseCase",
    "LogMaterialUseCase",
    "LogProgressUseCase",
    "ProcessCommandUseCase",
    "SafetyCheckUseCase",
    "StartJobUseCase",
    "UnrecognizedCommandUseCase",
]
