"""Badge data model: requirements, definitions, and evaluation results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from rift_badges.metrics import Metric, StatsSnapshot


class Operator(str, Enum):
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    EQ = "eq"

    @property
    def symbol(self) -> str:
        return _OPERATOR_SYMBOLS[self]

    @classmethod
    def parse(cls, raw: str | Operator) -> Operator:
        """Accept either the catalog name ('gte') or the symbol ('>=')."""
        if isinstance(raw, cls):
            return raw
        for op, symbol in _OPERATOR_SYMBOLS.items():
            if raw == symbol:
                return op
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Unknown operator: {raw!r}") from None


_OPERATOR_SYMBOLS: dict[Operator, str] = {
    Operator.GT: ">",
    Operator.LT: "<",
    Operator.GTE: ">=",
    Operator.LTE: "<=",
    Operator.EQ: "==",
}


class Period(str, Enum):
    GAME = "game"
    LAST_10_GAMES = "last_10_games"
    LAST_30_DAYS = "last_30_days"
    ALL_TIME = "all_time"


class BadgeCategory(str, Enum):
    STRATEGIC_MACRO = "Strategic & Macro Play"
    RESOURCE_MANAGEMENT = "Resource Management"
    TEAMPLAY_SUPPORT = "Teamplay & Support"
    ADAPTABILITY_RESILIENCE = "Adaptability & Resilience"
    EARLY_GAME_LANING = "Early Game & Laning"
    LATE_GAME_SCALING = "Late Game & Scaling"
    ANTI_CARRY_DISRUPTION = "Anti-Carry & Disruption"

    @classmethod
    def parse(cls, raw: str | BadgeCategory) -> BadgeCategory:
        """Resolve a category from its display name or enum name."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            pass
        try:
            return cls[str(raw).upper()]
        except KeyError:
            raise ValueError(f"Unknown badge category: {raw!r}") from None


class BadgeTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @property
    def rank(self) -> int:
        """0 for bronze up to 4 for diamond."""
        return list(BadgeTier).index(self)


@dataclass(frozen=True)
class BadgeRequirement:
    """One threshold comparison against a single metric.

    period, role and champion describe which snapshot the caller should
    supply; evaluation itself only looks at metric, operator and threshold.
    """

    metric: Metric
    threshold: float
    operator: Operator = Operator.GTE
    period: Period | None = None
    role: str | None = None
    champion: str | None = None

    def describe(self) -> str:
        return f"{self.metric.value} {self.operator.symbol} {self.threshold:g}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "metric": self.metric.value,
            "threshold": self.threshold,
            "operator": self.operator.value,
        }
        if self.period is not None:
            data["period"] = self.period.value
        if self.role is not None:
            data["role"] = self.role
        if self.champion is not None:
            data["champion"] = self.champion
        return data


@dataclass(frozen=True)
class BadgeDefinition:
    id: str
    name: str
    description: str
    category: BadgeCategory
    tier: BadgeTier
    requirements: tuple[BadgeRequirement, ...]
    icon_url: str | None = None

    def with_tier(self, tier: BadgeTier, multiplier: float) -> BadgeDefinition:
        """Return a copy with a tier-suffixed id and every threshold scaled."""
        return replace(
            self,
            id=f"{self.id}_{tier.value}",
            tier=tier,
            requirements=tuple(
                replace(req, threshold=req.threshold * multiplier) for req in self.requirements
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "tier": self.tier.value,
            "requirements": [req.to_dict() for req in self.requirements],
        }
        if self.icon_url is not None:
            data["iconUrl"] = self.icon_url
        return data


@dataclass(frozen=True)
class RequirementResult:
    is_met: bool
    progress: float  # 0.0 to 100.0


@dataclass(frozen=True)
class BadgeResult:
    is_earned: bool
    progress: float  # 0.0 to 100.0


@dataclass(frozen=True)
class EarnedBadge:
    definition: BadgeDefinition
    achieved_at: datetime
    progress: float = 100.0

    @property
    def id(self) -> str:
        return self.definition.id

    def to_dict(self) -> dict[str, Any]:
        data = self.definition.to_dict()
        data["achievedAt"] = self.achieved_at.isoformat()
        data["progress"] = self.progress
        return data


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one snapshot against the whole catalog.

    Every catalog badge is either in earned_badges or a key of
    badge_progress, never both.
    """

    earned_badges: tuple[EarnedBadge, ...]
    badge_progress: Mapping[str, float]
    source_stats: StatsSnapshot
    player_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "badge_progress", MappingProxyType(dict(self.badge_progress)))

    @property
    def earned_ids(self) -> list[str]:
        return [badge.id for badge in self.earned_badges]

    @property
    def catalog_size(self) -> int:
        return len(self.earned_badges) + len(self.badge_progress)

    def to_dict(self) -> dict[str, Any]:
        return {
            "playerId": self.player_id,
            "badges": [badge.to_dict() for badge in self.earned_badges],
            "badgeProgress": dict(self.badge_progress),
            "stats": self.source_stats.to_dict(),
        }


@dataclass(frozen=True)
class BadgeSuggestion:
    badge: BadgeDefinition
    missing_requirements: tuple[BadgeRequirement, ...] = field(default_factory=tuple)
    progress: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "badge": self.badge.to_dict(),
            "missingRequirements": [req.to_dict() for req in self.missing_requirements],
            "progress": self.progress,
        }
