"""
Application services package.
"""

from .command_classifier import CommandClassifier
from .cost_source import RandomCostSource
from .knowledge_base import DEMO_PROFILES, NZ_TRADE_KNOWLEDGE, TradeKnowledgeBase
from .quote_engine import QuoteEngine

__all__ = [
    "CommandClassifier",
    "DEMO_PROFILES",
    "NZ_TRADE_KNOWLEDGE",
    "QuoteEngine",
    "RandomCostSource",
    "TradeKnowledgeBase",
]
