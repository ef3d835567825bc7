"""Randomized stats snapshots for demos and tests."""

from __future__ import annotations

import random

from rift_badges.metrics import Metric, StatsSnapshot

ROLES = ("top", "jungle", "mid", "adc", "support")

# metric -> (low, spread); values drawn as low + random() * spread
_RANGES: dict[Metric, tuple[float, float]] = {
    Metric.OBJECTIVE_DAMAGE_SHARE: (5, 25),
    Metric.OBJECTIVE_KILL_PARTICIPATION: (40, 40),
    Metric.OBJECTIVE_SECURE_RATE: (40, 40),
    Metric.VISION_SCORE_PER_MINUTE: (1, 2),
    Metric.CONTROL_WARD_EFFICIENCY: (40, 40),
    Metric.VISION_DENIAL: (5, 20),
    Metric.GOLD_PER_MINUTE: (300, 200),
    Metric.GOLD_TO_DAMAGE_CONVERSION: (0.8, 0.8),
    Metric.ITEM_COMPLETION_SPEED: (70, 30),
    Metric.CS_PER_MINUTE: (5, 3),
    Metric.CS_DIFFERENTIAL_AT_10: (-10, 20),
    Metric.CS_DIFFERENTIAL_AT_20: (-15, 30),
    Metric.ENGAGEMENT_SUCCESS_RATE: (40, 40),
    Metric.CC_SCORE_CONTRIBUTION: (40, 40),
    Metric.DAMAGE_SHIELDED_HEALED: (2000, 8000),
    Metric.CC_ON_ENEMIES_ATTACKING_ALLIES: (5, 15),
    Metric.NUMBER_OF_SAVES: (1, 4),
    Metric.ROAM_SUCCESS_RATE: (40, 40),
    Metric.ROAM_GOLD_XP_SWING: (1000, 2000),
    Metric.WIN_RATE_FROM_GOLD_DEFICIT: (20, 30),
    Metric.KDA_WHEN_BEHIND: (1, 1),
    Metric.OBJECTIVE_SECURES_WHEN_BEHIND: (20, 40),
    Metric.META_ADAPTATION_SCORE: (50, 40),
    Metric.GOLD_DIFFERENTIAL_AT_10: (-300, 600),
    Metric.KILL_PARTICIPATION_IN_LANE: (40, 40),
    Metric.SOLO_KILL_RATE: (10, 30),
    Metric.PRESSURE_SCORE: (40, 40),
    Metric.FIRST_BLOOD_PARTICIPATION_RATE: (20, 40),
    Metric.LATE_GAME_DAMAGE_DEALT: (15000, 15000),
    Metric.LATE_GAME_DAMAGE_TAKEN: (10000, 15000),
    Metric.LATE_GAME_OBJECTIVE_SECURE_RATE: (40, 40),
    Metric.WIN_RATE_GAMES_30_PLUS: (40, 40),
    Metric.LATE_GAME_GOLD_TO_DAMAGE_CONVERSION: (1, 0.8),
    Metric.DAMAGE_TO_ENEMY_CARRIES: (5000, 10000),
    Metric.CC_ON_ENEMY_CARRIES: (2, 8),
    Metric.KILL_PARTICIPATION_ON_CARRIES: (40, 40),
    Metric.TOTAL_CC_DURATION: (5, 20),
    Metric.MULTI_TARGET_CC_HITS: (1, 5),
    Metric.CC_FOLLOW_UP_RATE: (50, 40),
    Metric.KDA: (1, 2),
    Metric.WIN_RATE: (40, 40),
}

# Whole-number metrics: metric -> (low, spread), floored
_COUNTS: dict[Metric, tuple[int, int]] = {
    Metric.CHAMPION_POOL_SIZE: (3, 10),
    Metric.ROLE_FLEXIBILITY: (1, 3),
    Metric.GAMES_PLAYED: (50, 200),
}

_ROLE_ADJUSTMENTS: dict[str, dict[Metric, float]] = {
    "support": {
        Metric.VISION_SCORE_PER_MINUTE: 1.5,
        Metric.DAMAGE_SHIELDED_HEALED: 1.5,
        Metric.CC_SCORE_CONTRIBUTION: 1.2,
        Metric.GOLD_PER_MINUTE: 0.7,
        Metric.CS_PER_MINUTE: 0.3,
    },
    "jungle": {
        Metric.OBJECTIVE_DAMAGE_SHARE: 1.3,
        Metric.ROAM_SUCCESS_RATE: 1.2,
        Metric.FIRST_BLOOD_PARTICIPATION_RATE: 1.2,
        Metric.CS_PER_MINUTE: 0.8,
    },
    "adc": {
        Metric.LATE_GAME_DAMAGE_DEALT: 1.4,
        Metric.GOLD_TO_DAMAGE_CONVERSION: 1.2,
        Metric.CS_PER_MINUTE: 1.2,
    },
    "top": {
        Metric.SOLO_KILL_RATE: 1.3,
        Metric.PRESSURE_SCORE: 1.1,
    },
}


def generate_mock_stats(role: str = "mid", rng: random.Random | None = None) -> StatsSnapshot:
    """Generate a plausible random snapshot for `role`.

    Only top laners get teleportEffectivenessRate, so teleport_master stays
    unearned for every other role.
    """
    rng = rng or random.Random()
    values: dict[Metric, float] = {
        metric: low + rng.random() * spread for metric, (low, spread) in _RANGES.items()
    }
    for metric, (low, spread) in _COUNTS.items():
        values[metric] = float(int(rng.random() * spread + low))

    for metric, factor in _ROLE_ADJUSTMENTS.get(role, {}).items():
        values[metric] *= factor
    if role == "top":
        values[Metric.TELEPORT_EFFECTIVENESS_RATE] = 40 + rng.random() * 40

    return StatsSnapshot(values=values, role=role, current_rank="Gold II")
