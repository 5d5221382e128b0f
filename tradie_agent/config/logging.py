"""
Logging configuration for the application.

Request-scoped values such as the request id are bound with
``structlog.contextvars`` by the API middleware and merged into every
event logged while the request is handled.
"""

import logging
import sys

import structlog

from tradie_agent.config.settings import Settings, settings

QUIET_LOGGERS = ("asyncio", "httpx", "uvicorn.access")


def _add_app_context(app_name: str, environment: str):
    def processor(logger, method_name, event_dict):
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def configure_logging(config: Settings = settings) -> None:
    """Configure structured logging for the given settings."""
    renderer = (
        structlog.processors.JSONRenderer()
        if config.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer(colors=config.DEBUG)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _add_app_context(config.APP_NAME, config.ENVIRONMENT),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.LOG_LEVEL.upper()),
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = None) -> structlog.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
