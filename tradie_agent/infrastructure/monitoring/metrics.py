"""
Prometheus metrics for the command engine.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

registry = CollectorRegistry()


COMMANDS_PROCESSED = Counter(
    "commands_processed_total",
    "Total number of commands processed",
    ["intent"],
    registry=registry,
)

COMMAND_FAILURES = Counter(
    "command_failures_total",
    "Total number of commands rejected with a notification",
    ["error_code"],
    registry=registry,
)

QUOTES_GENERATED = Counter(
    "quotes_generated_total",
    "Total number of quotes generated",
    ["trade"],
    registry=registry,
)

TIMER_TICKS = Counter(
    "job_timer_ticks_total",
    "Total number of timer ticks applied to active jobs",
    registry=registry,
)


def record_command(intent: str) -> None:
    COMMANDS_PROCESSED.labels(intent=intent).inc()


def record_command_failure(error_code: str) -> None:
    COMMAND_FAILURES.labels(error_code=error_code).inc()


def record_quote(trade: str) -> None:
    QUOTES_GENERATED.labels(trade=trade).inc()


def record_timer_tick() -> None:
    TIMER_TICKS.inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
