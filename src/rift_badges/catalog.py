"""Badge definitions and the validated catalog the engine runs over."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from rift_badges.metrics import Metric
from rift_badges.models import (
    BadgeCategory,
    BadgeDefinition,
    BadgeRequirement,
    BadgeTier,
    Operator,
    Period,
)

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when badge definitions are malformed."""


def _req(metric: Metric, threshold: float, period: Period, role: str | None = None) -> BadgeRequirement:
    return BadgeRequirement(metric=metric, threshold=threshold, operator=Operator.GTE, period=period, role=role)


_GAME = Period.GAME
_LAST_10 = Period.LAST_10_GAMES
_LAST_30 = Period.LAST_30_DAYS


BADGE_DEFINITIONS: list[BadgeDefinition] = [
    # Strategic & Macro Play
    BadgeDefinition(
        id="objective_seizer",
        name="Objective Seizer",
        description="Recognizes players who consistently contribute significantly to securing major objectives.",
        category=BadgeCategory.STRATEGIC_MACRO,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.OBJECTIVE_DAMAGE_SHARE, 15, _LAST_10),
            _req(Metric.OBJECTIVE_KILL_PARTICIPATION, 70, _LAST_10),
            _req(Metric.OBJECTIVE_SECURE_RATE, 60, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="visionary_architect",
        name="Visionary Architect",
        description="Awards players for superior vision control that directly leads to advantages or prevents disadvantages.",
        category=BadgeCategory.STRATEGIC_MACRO,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.VISION_SCORE_PER_MINUTE, 2.5, _LAST_10),
            _req(Metric.CONTROL_WARD_EFFICIENCY, 80, _LAST_10),
            _req(Metric.VISION_DENIAL, 15, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="teleport_master",
        name="Teleport Master",
        description="Recognizes optimal and impactful teleport usage (Top Lane Specific).",
        category=BadgeCategory.STRATEGIC_MACRO,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.TELEPORT_EFFECTIVENESS_RATE, 70, _LAST_10, role="top"),
        ),
    ),
    # Resource Management
    BadgeDefinition(
        id="gold_efficiency_expert",
        name="Gold Efficiency Expert",
        description="Rewards players who maximize their gold income and convert it effectively into power.",
        category=BadgeCategory.RESOURCE_MANAGEMENT,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.GOLD_PER_MINUTE, 400, _LAST_10),
            _req(Metric.GOLD_TO_DAMAGE_CONVERSION, 1.2, _LAST_10),
            _req(Metric.ITEM_COMPLETION_SPEED, 85, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="cs_dominator",
        name="CS Dominator",
        description="Recognizes players with exceptional farming mechanics and lane pressure through minion control.",
        category=BadgeCategory.RESOURCE_MANAGEMENT,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.CS_PER_MINUTE, 7.5, _LAST_10),
            _req(Metric.CS_DIFFERENTIAL_AT_10, 10, _LAST_10),
            _req(Metric.CS_DIFFERENTIAL_AT_20, 15, _LAST_10),
        ),
    ),
    # Teamplay & Support
    BadgeDefinition(
        id="teamfight_initiator",
        name="Teamfight Initiator",
        description="Awards players who consistently make impactful engagements that lead to successful teamfights.",
        category=BadgeCategory.TEAMPLAY_SUPPORT,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.ENGAGEMENT_SUCCESS_RATE, 65, _LAST_10),
            _req(Metric.CC_SCORE_CONTRIBUTION, 80, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="peel_specialist",
        name="Peel Specialist",
        description="Recognizes players who effectively protect their carries from enemy threats (Support/Tank Specific).",
        category=BadgeCategory.TEAMPLAY_SUPPORT,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.DAMAGE_SHIELDED_HEALED, 5000, _GAME),
            _req(Metric.CC_ON_ENEMIES_ATTACKING_ALLIES, 10, _GAME),
            _req(Metric.NUMBER_OF_SAVES, 2, _GAME),
        ),
    ),
    BadgeDefinition(
        id="roam_impact",
        name="Roam Impact",
        description="Awards players whose map movements outside their lane/jungle consistently create advantages for other lanes.",
        category=BadgeCategory.TEAMPLAY_SUPPORT,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.ROAM_SUCCESS_RATE, 60, _LAST_10),
            _req(Metric.ROAM_GOLD_XP_SWING, 1500, _GAME),
        ),
    ),
    # Adaptability & Resilience
    BadgeDefinition(
        id="comeback_king_queen",
        name="Comeback King/Queen",
        description="Recognizes players who consistently perform well and contribute to victories in games where their team was significantly behind.",
        category=BadgeCategory.ADAPTABILITY_RESILIENCE,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.WIN_RATE_FROM_GOLD_DEFICIT, 40, _LAST_30),
            _req(Metric.KDA_WHEN_BEHIND, 1.5, _LAST_30),
            _req(Metric.OBJECTIVE_SECURES_WHEN_BEHIND, 30, _LAST_30),
        ),
    ),
    BadgeDefinition(
        id="meta_flexer",
        name="Meta Flexer",
        description="Awards players who demonstrate proficiency across a wide range of champions and roles, adapting to meta shifts.",
        category=BadgeCategory.ADAPTABILITY_RESILIENCE,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.CHAMPION_POOL_SIZE, 8, _LAST_30),
            _req(Metric.ROLE_FLEXIBILITY, 2, _LAST_30),
            _req(Metric.META_ADAPTATION_SCORE, 75, _LAST_30),
        ),
    ),
    # Early Game & Laning
    BadgeDefinition(
        id="lane_bully",
        name="Lane Bully",
        description="Recognizes players who consistently dominate their laning phase.",
        category=BadgeCategory.EARLY_GAME_LANING,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.GOLD_DIFFERENTIAL_AT_10, 300, _LAST_10),
            _req(Metric.KILL_PARTICIPATION_IN_LANE, 60, _LAST_10),
            _req(Metric.SOLO_KILL_RATE, 20, _LAST_10),
            _req(Metric.PRESSURE_SCORE, 75, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="first_blood_contributor",
        name="First Blood Contributor",
        description="Awards players who are consistently involved in securing the first kill of the game.",
        category=BadgeCategory.EARLY_GAME_LANING,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.FIRST_BLOOD_PARTICIPATION_RATE, 40, _LAST_10),
        ),
    ),
    # Late Game & Scaling
    BadgeDefinition(
        id="late_game_powerhouse",
        name="Late Game Powerhouse",
        description="Recognizes players who consistently scale effectively into the late game and have high impact in decisive late-game teamfights.",
        category=BadgeCategory.LATE_GAME_SCALING,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.LATE_GAME_DAMAGE_DEALT, 20000, _GAME),
            _req(Metric.LATE_GAME_OBJECTIVE_SECURE_RATE, 70, _LAST_10),
            _req(Metric.WIN_RATE_GAMES_30_PLUS, 65, _LAST_30),
            _req(Metric.LATE_GAME_GOLD_TO_DAMAGE_CONVERSION, 1.5, _LAST_10),
        ),
    ),
    # Anti-Carry & Disruption
    BadgeDefinition(
        id="threat_neutralizer",
        name="Threat Neutralizer",
        description="Awards players who consistently shut down high-priority enemy carries (Tank/Support/Assassin Specific).",
        category=BadgeCategory.ANTI_CARRY_DISRUPTION,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.DAMAGE_TO_ENEMY_CARRIES, 8000, _GAME),
            _req(Metric.CC_ON_ENEMY_CARRIES, 5, _GAME),
            _req(Metric.KILL_PARTICIPATION_ON_CARRIES, 70, _LAST_10),
        ),
    ),
    BadgeDefinition(
        id="cc_chain_master",
        name="CC Chain Master",
        description="Recognizes players who consistently land effective crowd control abilities, enabling team plays.",
        category=BadgeCategory.ANTI_CARRY_DISRUPTION,
        tier=BadgeTier.GOLD,
        requirements=(
            _req(Metric.TOTAL_CC_DURATION, 15, _GAME),
            _req(Metric.MULTI_TARGET_CC_HITS, 3, _GAME),
            _req(Metric.CC_FOLLOW_UP_RATE, 75, _LAST_10),
        ),
    ),
]


class BadgeCatalog:
    """Ordered, validated set of badge definitions keyed by id."""

    def __init__(self, definitions: Iterable[BadgeDefinition]) -> None:
        self._definitions: list[BadgeDefinition] = list(definitions)
        self._by_id: dict[str, BadgeDefinition] = {}
        for badge in self._definitions:
            _validate_definition(badge)
            if badge.id in self._by_id:
                raise CatalogError(f"Duplicate badge id: {badge.id!r}")
            self._by_id[badge.id] = badge

    def __iter__(self) -> Iterator[BadgeDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, badge_id: object) -> bool:
        return badge_id in self._by_id

    @property
    def ids(self) -> list[str]:
        return [badge.id for badge in self._definitions]

    def get(self, badge_id: str) -> BadgeDefinition | None:
        return self._by_id.get(badge_id)


def _validate_definition(badge: BadgeDefinition) -> None:
    if not badge.id:
        raise CatalogError("Badge id must not be empty")
    if not badge.requirements:
        raise CatalogError(f"Badge {badge.id!r} has no requirements")
    for req in badge.requirements:
        if not math.isfinite(req.threshold):
            raise CatalogError(f"Badge {badge.id!r} has a non-finite threshold for {req.metric.value}")
        if req.threshold == 0:
            logger.warning(
                "Badge %s: zero threshold on %s, progress will be all-or-nothing",
                badge.id, req.metric.value,
            )


def default_catalog() -> BadgeCatalog:
    return BadgeCatalog(BADGE_DEFINITIONS)


def _parse_requirement(raw: Mapping[str, Any]) -> BadgeRequirement:
    period = raw.get("period")
    threshold = raw["threshold"]
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"threshold must be a number, got {threshold!r}")
    return BadgeRequirement(
        metric=Metric.parse(raw["metric"]),
        threshold=float(threshold),
        operator=Operator.parse(raw.get("operator", "gte")),
        period=Period(period) if period is not None else None,
        role=raw.get("role"),
        champion=raw.get("champion"),
    )


def parse_definition(raw: Mapping[str, Any]) -> BadgeDefinition:
    """Build a BadgeDefinition from its JSON form. Raises CatalogError."""
    badge_id = raw.get("id", "<missing id>") if isinstance(raw, Mapping) else "<not an object>"
    try:
        return BadgeDefinition(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            category=BadgeCategory.parse(raw["category"]),
            tier=BadgeTier(raw.get("tier", BadgeTier.GOLD.value)),
            requirements=tuple(_parse_requirement(r) for r in raw["requirements"]),
            icon_url=raw.get("iconUrl"),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"Invalid badge definition {badge_id!r}: {exc}") from exc


def load_catalog(path: Path) -> BadgeCatalog:
    """Load a catalog from a JSON file holding a list of badge objects."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CatalogError(f"Catalog file {path} must contain a JSON list of badges")
    catalog = BadgeCatalog(parse_definition(raw) for raw in data)
    logger.debug("Loaded %d badges from %s", len(catalog), path)
    return catalog
