"""
Unit tests for the trade knowledge base.
"""

import pytest

from tradie_agent.application.services.knowledge_base import (
    DEMO_PROFILES,
    TradeKnowledgeBase,
)
from tradie_agent.domain.exceptions.profile_error import UnknownTradeError
from tradie_agent.domain.value_objects.trade import Trade


class TestTradeKnowledgeBase:
    """Test TradeKnowledgeBase lookups."""

    def test_rates(self, knowledge_base):
        assert knowledge_base.daily_rate(Trade.BUILDER) == 520
        assert knowledge_base.daily_rate(Trade.ELECTRICIAN) == 600
        assert knowledge_base.daily_rate(Trade.PLUMBER) == 560
        assert knowledge_base.hourly_rate(Trade.ELECTRICIAN) == 75

    def test_every_trade_has_rates_and_materials(self, knowledge_base):
        for trade in Trade:
            assert knowledge_base.daily_rate(trade) > 0
            assert len(knowledge_base.materials_for(trade)) >= 3

    def test_checklists(self, knowledge_base):
        assert knowledge_base.daily_checklist() == (
            "Site safety check",
            "Tool tag verification",
            "PPE compliance",
        )
        assert "Method statement" in knowledge_base.job_checklist()

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("gib", "plasterboard"),
            ("Preline", "pre-line inspection"),
            ("scaffold", "scaffold"),
        ],
    )
    def test_resolve_term(self, knowledge_base, word, expected):
        assert knowledge_base.resolve_term(word) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Trade.PLUMBER, Trade.PLUMBER),
            ("builder", Trade.BUILDER),
            (" Electrician ", Trade.ELECTRICIAN),
            ("sparky", Trade.ELECTRICIAN),
            ("chippy", Trade.BUILDER),
        ],
    )
    def test_resolve_trade(self, knowledge_base, value, expected):
        assert knowledge_base.resolve_trade(value) == expected

    def test_resolve_unknown_trade(self, knowledge_base):
        with pytest.raises(UnknownTradeError, match="astronaut"):
            knowledge_base.resolve_trade("astronaut")


class TestDemoProfiles:
    """Test demo operator profiles."""

    def test_profile_per_trade(self):
        assert set(DEMO_PROFILES) == set(Trade)
        for trade, profile in DEMO_PROFILES.items():
            assert profile.trade == trade

    def test_builder_profile(self):
        profile = DEMO_PROFILES[Trade.BUILDER]

        assert profile.name == "Dave"
        assert profile.team_size == 4
        assert profile.display_label == "Dave - Builder"
        assert "quotes" in profile.preferences.features_used


class TestSharedTables:
    """Test that the shared tables cannot be changed by a caller."""

    def test_lookup_tables_are_read_only(self, knowledge_base):
        with pytest.raises(TypeError):
            knowledge_base.terms["chippy"] = "plumber"
        with pytest.raises(TypeError):
            knowledge_base.materials[Trade.BUILDER] = ("glue",)
        with pytest.raises(TypeError):
            DEMO_PROFILES[Trade.BUILDER] = DEMO_PROFILES[Trade.PLUMBER]

        assert knowledge_base.resolve_term("chippy") == "builder"

    def test_source_tables_are_copied(self):
        terms = {"chippy": "builder"}
        knowledge_base = TradeKnowledgeBase(terms=terms)

        terms["chippy"] = "plumber"

        assert knowledge_base.resolve_trade("chippy") == Trade.BUILDER
