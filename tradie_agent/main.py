"""
Main application entry point.
"""

from tradie_agent.api.app import create_app
from tradie_agent.config.logging import configure_logging, get_logger
from tradie_agent.config.settings import settings

configure_logging()
logger = get_logger(__name__)

app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    logger.info(
        "Starting Tradie Job Assistant server",
        host=settings.API_HOST,
        port=settings.API_PORT,
    )

    uvicorn.run(
        "tradie_agent.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
