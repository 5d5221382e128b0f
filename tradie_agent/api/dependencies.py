"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends, Request

from tradie_agent.application.services.assistant import JobAssistant


def get_assistant(request: Request) -> JobAssistant:
    """Get the assistant owned by the running application."""
    return request.app.state.assistant


# Type aliases for cleaner dependency injection
AssistantDep = Annotated[JobAssistant, Depends(get_assistant)]
