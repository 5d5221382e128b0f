"""
Trade knowledge base: terminology, materials, labour rates and compliance
checklists for New Zealand trades.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from tradie_agent.domain.entities.operator_profile import (
    OperatorProfile,
    ProfilePreferences,
)
from tradie_agent.domain.exceptions.profile_error import UnknownTradeError
from tradie_agent.domain.value_objects.trade import Trade


@dataclass(frozen=True)
class TradeRate:
    """Labour rates for a trade."""

    hourly: int
    daily: int


@dataclass(frozen=True)
class TradeKnowledgeBase:
    """Static lookup tables used by handlers and the quote engine.

    The tables are copied into read-only mappings, so one instance can be
    shared by every assistant.
    """

    terms: Mapping[str, str] = field(default_factory=dict)
    materials: Mapping[Trade, Tuple[str, ...]] = field(default_factory=dict)
    rates: Mapping[Trade, TradeRate] = field(default_factory=dict)
    daily_compliance: Tuple[str, ...] = ()
    job_compliance: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", MappingProxyType(dict(self.terms)))
        object.__setattr__(
            self,
            "materials",
            MappingProxyType({k: tuple(v) for k, v in self.materials.items()}),
        )
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))
        object.__setattr__(self, "daily_compliance", tuple(self.daily_compliance))
        object.__setattr__(self, "job_compliance", tuple(self.job_compliance))

    def daily_rate(self, trade: Trade) -> int:
        return self.rates[trade].daily

    def hourly_rate(self, trade: Trade) -> int:
        return self.rates[trade].hourly

    def materials_for(self, trade: Trade) -> Tuple[str, ...]:
        """Get the materials catalogue of a trade, most common first."""
        return self.materials.get(trade, ())

    def daily_checklist(self) -> Tuple[str, ...]:
        return tuple(self.daily_compliance)

    def job_checklist(self) -> Tuple[str, ...]:
        return tuple(self.job_compliance)

    def resolve_term(self, word: str) -> str:
        """Translate trade slang, e.g. 'gib' -> 'plasterboard'."""
        return self.terms.get(word.strip().lower(), word)

    def resolve_trade(self, value: Union[Trade, str]) -> Trade:
        """Resolve a trade from an enum, its name, or slang like 'sparky'."""
        if isinstance(value, Trade):
            return value

        name = self.resolve_term(value).strip().lower()
        try:
            return Trade(name)
        except ValueError:
            raise UnknownTradeError(value)


NZ_TRADE_KNOWLEDGE = TradeKnowledgeBase(
    terms={
        "chippy": "builder",
        "sparky": "electrician",
        "gib": "plasterboard",
        "preline": "pre-line inspection",
        "rough-in": "rough-in work",
    },
    materials={
        Trade.BUILDER: (
            "2x4 timber",
            "gib sheets",
            "nails",
            "screws",
            "insulation",
            "weatherboards",
        ),
        Trade.ELECTRICIAN: (
            "cable",
            "junction boxes",
            "power outlets",
            "light fittings",
            "conduit",
        ),
        Trade.PLUMBER: (
            "copper pipe",
            "PVC pipe",
            "fittings",
            "taps",
            "toilet suite",
            "shower mixer",
        ),
    },
    rates={
        Trade.BUILDER: TradeRate(hourly=65, daily=520),
        Trade.ELECTRICIAN: TradeRate(hourly=75, daily=600),
        Trade.PLUMBER: TradeRate(hourly=70, daily=560),
    },
    daily_compliance=(
        "Site safety check",
        "Tool tag verification",
        "PPE compliance",
    ),
    job_compliance=(
        "Building consent reference",
        "Site Safe registration",
        "Method statement",
    ),
)


DEMO_PROFILES: Mapping[Trade, OperatorProfile] = MappingProxyType({
    Trade.BUILDER: OperatorProfile(
        trade=Trade.BUILDER,
        name="Dave",
        team_size=4,
        preferences=ProfilePreferences(
            features_used=("jobLogging", "materials", "quotes", "progress"),
            daily_summary=True,
            photo_upload=False,
        ),
    ),
    Trade.ELECTRICIAN: OperatorProfile(
        trade=Trade.ELECTRICIAN,
        name="Mike",
        team_size=2,
        preferences=ProfilePreferences(
            features_used=("jobLogging", "materials", "compliance"),
            daily_summary=True,
            photo_upload=True,
        ),
    ),
    Trade.PLUMBER: OperatorProfile(
        trade=Trade.PLUMBER,
        name="Hemi",
        team_size=1,
        preferences=ProfilePreferences(
            features_used=("jobLogging", "materials", "quotes"),
            daily_summary=False,
            photo_upload=True,
        ),
    ),
})
