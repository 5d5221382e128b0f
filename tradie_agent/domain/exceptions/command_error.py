"""
Command-related domain exceptions.
"""

from typing import Any


class CommandError(Exception):
    """Base exception for command interpretation errors."""

    code = "command_error"
    title = "Command Error"

    def __init__(self, message: str, hint: str = None):
        self.hint = hint or message
        super().__init__(message)


class UnrecognizedCommandError(CommandError):
    """Raised when a command matches none of the known phrasings."""

    code = "unrecognized_command"
    title = "Command not recognized"

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Command not recognized: {text!r}",
            hint='Try: "Job start, [job name]" or "Used [materials]"',
        )


class InvalidParameterError(CommandError):
    """Raised when an extracted command parameter is unusable."""

    code = "invalid_parameter"
    title = "Invalid Parameter"

    def __init__(self, field_name: str, value: Any, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Parameter '{field_name}'={value!r} is invalid: {reason}")
