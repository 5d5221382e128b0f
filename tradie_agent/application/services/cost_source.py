"""
Placeholder cost generation.
"""

import random
from typing import Optional

from tradie_agent.application.interfaces.services import CostSourceInterface


class RandomCostSource(CostSourceInterface):
    """Pseudo-random costs; pass a seed for repeatable figures."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_cost(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty cost range [{low}, {high})")
        return self._random.randrange(low, high)
