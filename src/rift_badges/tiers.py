"""Tier projection: scaled-threshold variants of a badge. Pure functions, no side effects."""

from __future__ import annotations

from rift_badges.engine import evaluate_badge
from rift_badges.metrics import StatsSnapshot
from rift_badges.models import BadgeDefinition, BadgeTier

TIER_MULTIPLIERS: dict[BadgeTier, float] = {
    BadgeTier.BRONZE: 0.6,
    BadgeTier.SILVER: 0.8,
    BadgeTier.GOLD: 1.0,
    BadgeTier.PLATINUM: 1.2,
    BadgeTier.DIAMOND: 1.5,
}


def project_tiers(badge: BadgeDefinition) -> list[BadgeDefinition]:
    """Return one variant per tier, bronze first, ids suffixed with the tier name.

    Every threshold is multiplied by the tier multiplier regardless of the
    requirement's operator, so for lte/lt requirements a higher tier is
    easier to reach, not harder.
    """
    # TODO: invert the multiplier for lte/lt once the catalog ships "lower is better" badges
    return [badge.with_tier(tier, multiplier) for tier, multiplier in TIER_MULTIPLIERS.items()]


def highest_earned_tier(badge: BadgeDefinition, stats: StatsSnapshot) -> BadgeTier | None:
    """Return the highest tier whose scaled requirements are all met, or None."""
    variants = {variant.tier: variant for variant in project_tiers(badge)}
    for tier in sorted(variants, key=lambda t: t.rank, reverse=True):
        if evaluate_badge(variants[tier], stats).is_earned:
            return tier
    return None
