"""
Pytest configuration and fixtures.
"""

from itertools import cycle
from typing import Iterable, List, Tuple
from unittest.mock import MagicMock

import pytest

from tradie_agent.application.interfaces.repositories import JobStoreInterface
from tradie_agent.application.interfaces.services import (
    CostSourceInterface,
    JobTimerInterface,
)
from tradie_agent.application.services.assistant import JobAssistant
from tradie_agent.application.services.knowledge_base import (
    DEMO_PROFILES,
    NZ_TRADE_KNOWLEDGE,
)
from tradie_agent.background.job_timer import AsyncioJobTimer
from tradie_agent.config.settings import Settings
from tradie_agent.domain.value_objects.trade import Trade
from tradie_agent.infrastructure.repositories.in_memory_job_store import (
    InMemoryJobStore,
)


class FixedCostSource(CostSourceInterface):
    """Cost source that replays the given values, ignoring the range."""

    def __init__(self, values: Iterable[int]):
        self._values = cycle(list(values))
        self.calls: List[Tuple[int, int]] = []

    def next_cost(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return next(self._values)


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="DEBUG",
        DEBUG=True,
        COST_SEED=1234,
    )


@pytest.fixture
def knowledge_base():
    return NZ_TRADE_KNOWLEDGE


@pytest.fixture
def builder_profile():
    return DEMO_PROFILES[Trade.BUILDER]


@pytest.fixture
def electrician_profile():
    return DEMO_PROFILES[Trade.ELECTRICIAN]


@pytest.fixture
def fixed_costs():
    """Cost source that always returns 100."""
    return FixedCostSource([100])


@pytest.fixture
def make_costs():
    """Factory for cost sources replaying a given sequence."""
    return FixedCostSource


@pytest.fixture
def job_store():
    return InMemoryJobStore()


@pytest.fixture
def job_timer(job_store):
    """Timer bound to the test store. Outside an event loop it only ticks via fire()."""
    timer = AsyncioJobTimer(job_store.tick, interval_seconds=0.01)
    yield timer
    timer.close()


@pytest.fixture
def assistant(job_store, job_timer, fixed_costs, test_settings):
    """Assistant wired to the in-memory store and pinned costs."""
    with JobAssistant(
        job_store=job_store,
        cost_source=fixed_costs,
        timer=job_timer,
        config=test_settings,
    ) as assistant:
        yield assistant


@pytest.fixture
def mock_job_store():
    """Mock job store."""
    mock_store = MagicMock(spec=JobStoreInterface)
    mock_store.get_active_job = MagicMock(return_value=None)

    return mock_store


@pytest.fixture
def mock_timer():
    """Mock job timer."""
    return MagicMock(spec=JobTimerInterface)
