"""Metric vocabulary and the typed stats snapshot the engine evaluates against."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class Metric(str, Enum):
    # Strategic & Macro Play
    OBJECTIVE_DAMAGE_SHARE = "objectiveDamageShare"
    OBJECTIVE_KILL_PARTICIPATION = "objectiveKillParticipation"
    OBJECTIVE_SECURE_RATE = "objectiveSecureRate"
    VISION_SCORE_PER_MINUTE = "visionScorePerMinute"
    CONTROL_WARD_EFFICIENCY = "controlWardEfficiency"
    VISION_DENIAL = "visionDenial"
    TELEPORT_EFFECTIVENESS_RATE = "teleportEffectivenessRate"

    # Resource Management
    GOLD_PER_MINUTE = "goldPerMinute"
    GOLD_TO_DAMAGE_CONVERSION = "goldToDamageConversion"
    ITEM_COMPLETION_SPEED = "itemCompletionSpeed"
    CS_PER_MINUTE = "csPerMinute"
    CS_DIFFERENTIAL_AT_10 = "csDifferentialAt10"
    CS_DIFFERENTIAL_AT_20 = "csDifferentialAt20"

    # Teamplay & Support
    ENGAGEMENT_SUCCESS_RATE = "engagementSuccessRate"
    CC_SCORE_CONTRIBUTION = "ccScoreContribution"
    DAMAGE_SHIELDED_HEALED = "damageShieldedHealed"
    CC_ON_ENEMIES_ATTACKING_ALLIES = "ccOnEnemiesAttackingAllies"
    NUMBER_OF_SAVES = "numberOfSaves"
    ROAM_SUCCESS_RATE = "roamSuccessRate"
    ROAM_GOLD_XP_SWING = "roamGoldXpSwing"

    # Adaptability & Resilience
    WIN_RATE_FROM_GOLD_DEFICIT = "winRateFromGoldDeficit"
    KDA_WHEN_BEHIND = "kdaWhenBehind"
    OBJECTIVE_SECURES_WHEN_BEHIND = "objectiveSecuresWhenBehind"
    CHAMPION_POOL_SIZE = "championPoolSize"
    ROLE_FLEXIBILITY = "roleFlexibility"
    META_ADAPTATION_SCORE = "metaAdaptationScore"

    # Early Game & Laning
    GOLD_DIFFERENTIAL_AT_10 = "goldDifferentialAt10"
    KILL_PARTICIPATION_IN_LANE = "killParticipationInLane"
    SOLO_KILL_RATE = "soloKillRate"
    PRESSURE_SCORE = "pressureScore"
    FIRST_BLOOD_PARTICIPATION_RATE = "firstBloodParticipationRate"

    # Late Game & Scaling
    LATE_GAME_DAMAGE_DEALT = "lateGameDamageDealt"
    LATE_GAME_DAMAGE_TAKEN = "lateGameDamageTaken"
    LATE_GAME_OBJECTIVE_SECURE_RATE = "lateGameObjectiveSecureRate"
    WIN_RATE_GAMES_30_PLUS = "winRateGames30Plus"
    LATE_GAME_GOLD_TO_DAMAGE_CONVERSION = "lateGameGoldToDamageConversion"

    # Anti-Carry & Disruption
    DAMAGE_TO_ENEMY_CARRIES = "damageToEnemyCarries"
    CC_ON_ENEMY_CARRIES = "ccOnEnemyCarries"
    KILL_PARTICIPATION_ON_CARRIES = "killParticipationOnCarries"
    TOTAL_CC_DURATION = "totalCcDuration"
    MULTI_TARGET_CC_HITS = "multiTargetCcHits"
    CC_FOLLOW_UP_RATE = "ccFollowUpRate"

    # General
    KDA = "kda"
    WIN_RATE = "winRate"
    GAMES_PLAYED = "gamesPlayed"

    @classmethod
    def parse(cls, raw: str | Metric) -> Metric:
        """Resolve a metric from its camelCase key or enum name. Raises ValueError."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            pass
        try:
            return cls[str(raw).upper()]
        except KeyError:
            raise ValueError(f"Unknown metric: {raw!r}") from None


# Descriptive snapshot keys that are not evaluated.
_ROLE_KEY = "role"
_RANK_KEY = "currentRank"


def _coerce_value(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Metric {key!r} must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Metric {key!r} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class StatsSnapshot(Mapping[Metric, float]):
    """One player's pre-aggregated performance numbers.

    Missing metrics are simply absent: requirements on them evaluate as
    not met with zero progress.
    """

    values: Mapping[Metric, float] = field(default_factory=dict)
    role: str | None = None
    current_rank: str | None = None

    def __post_init__(self) -> None:
        checked = {}
        for key, value in self.values.items():
            metric = Metric.parse(key)
            checked[metric] = _coerce_value(metric.value, value)
        object.__setattr__(self, "values", MappingProxyType(checked))

    def __getitem__(self, metric: Metric) -> float:
        return self.values[metric]

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __hash__(self) -> int:
        return hash((frozenset(self.values.items()), self.role, self.current_rank))

    def get(self, metric: Metric, default: float | None = None) -> float | None:
        return self.values.get(metric, default)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatsSnapshot:
        """Build a snapshot from JSON-style data keyed by camelCase metric names.

        None values count as absent. Unknown keys raise ValueError.
        """
        values: dict[Metric, float] = {}
        role = None
        current_rank = None
        for key, value in data.items():
            if key == _ROLE_KEY:
                role = None if value is None else str(value)
                continue
            if key == _RANK_KEY:
                current_rank = None if value is None else str(value)
                continue
            metric = Metric.parse(key)
            if value is None:
                continue
            values[metric] = _coerce_value(metric.value, value)
        return cls(values=values, role=role, current_rank=current_rank)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {metric.value: value for metric, value in self.values.items()}
        if self.role is not None:
            data[_ROLE_KEY] = self.role
        if self.current_rank is not None:
            data[_RANK_KEY] = self.current_rank
        return data
