"""
Command classifier for free-text field commands.
"""

import re
from typing import Optional

from tradie_agent.config.logging import get_logger
from tradie_agent.domain.exceptions.command_error import InvalidParameterError
from tradie_agent.domain.value_objects.intent import (
    CompleteJob,
    GenerateQuote,
    Intent,
    LogMaterial,
    LogProgress,
    SafetyCheck,
    StartJob,
    Unrecognized,
)

logger = get_logger(__name__)

START_JOB_PREFIX = re.compile(r"^job start,?\s*", re.IGNORECASE)
USED_PREFIX = re.compile(r"^used\s*", re.IGNORECASE)
QUOTE_PREFIX = re.compile(r"^quote for\s*", re.IGNORECASE)
DAYS_PATTERN = re.compile(r"(\d+)\s*days?\b", re.IGNORECASE)
PERCENT_PATTERN = re.compile(r"(\d+)\s*%")

COMPLETE_JOB_PHRASE = "job complete"
PROGRESS_KEYWORDS = ("complete", "done")


class CommandClassifier:
    """Keyword-based classifier mapping a command to an intent.

    Rules are checked in priority order and the first match wins:

    1. exactly "job complete"       -> CompleteJob
    2. starts with "job start"      -> StartJob
    3. contains "used"              -> LogMaterial
    4. starts with "quote for"      -> GenerateQuote
    5. contains "complete"/"done"   -> LogProgress
    6. contains "safety check"      -> SafetyCheck
    7. anything else                -> Unrecognized

    The exact "job complete" phrase is checked first; otherwise the
    "complete" keyword of rule 5 would always shadow it.
    """

    def __init__(self, default_days: int = 2, default_job_name: str = "Untitled job"):
        self.default_days = default_days
        self.default_job_name = default_job_name
        self.logger = logger

    def classify(self, text: str) -> Intent:
        """Classify a raw command string."""
        stripped = (text or "").strip()
        command = stripped.lower()

        intent = self._match(stripped, command) if command else None
        if intent is None:
            intent = Unrecognized(original=text or "")

        self.logger.debug(
            "Command classified",
            command=stripped,
            intent=intent.intent_type.value,
        )
        return intent

    def _match(self, stripped: str, command: str) -> Optional[Intent]:
        if command == COMPLETE_JOB_PHRASE:
            return CompleteJob()

        if command.startswith("job start"):
            name = START_JOB_PREFIX.sub("", stripped, count=1).strip()
            return StartJob(name=name or self.default_job_name)

        if "used" in command:
            description = USED_PREFIX.sub("", stripped, count=1).strip()
            return LogMaterial(description=description or stripped)

        if command.startswith("quote for"):
            description = QUOTE_PREFIX.sub("", stripped, count=1).strip()
            return GenerateQuote(
                description=description, days=self._days_or_default(stripped)
            )

        if any(keyword in command for keyword in PROGRESS_KEYWORDS):
            return LogProgress(
                description=stripped, percentage=self._extract_percentage(stripped)
            )

        if "safety check" in command:
            return SafetyCheck()

        return None

    def _days_or_default(self, text: str) -> int:
        try:
            return self._extract_days(text)
        except InvalidParameterError as e:
            self.logger.warning(
                "Invalid day count in quote, using default",
                error=str(e),
                default_days=self.default_days,
            )
            return self.default_days

    def _extract_days(self, text: str) -> int:
        match = DAYS_PATTERN.search(text)
        if not match:
            return self.default_days

        days = int(match.group(1))
        if days < 1:
            raise InvalidParameterError("days", days, "must be a positive integer")
        return days

    def _extract_percentage(self, text: str) -> Optional[int]:
        match = PERCENT_PATTERN.search(text)
        if not match:
            return None
        return min(int(match.group(1)), 100)
