"""
Monitoring package.
"""

from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_command,
    record_command_failure,
    record_quote,
    record_timer_tick,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "record_command",
    "record_command_failure",
    "record_quote",
    "record_timer_tick",
]
