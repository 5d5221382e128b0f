"""
Tradie Job Assistant.

Turns free-text field commands into job lifecycle updates, compliance
reports and price quotes.
"""

__version__ = "0.1.0"
__author__ = "Traide Team"
__description__ = "Tradie Job Assistant"

from .application.services.assistant import JobAssistant
from .config import settings

__all__ = [
    "JobAssistant",
    "settings",
]
