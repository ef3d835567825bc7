"""Badge evaluation: requirement checks, per-badge aggregation, and player runs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from rift_badges.catalog import BadgeCatalog
from rift_badges.metrics import StatsSnapshot
from rift_badges.models import (
    BadgeDefinition,
    BadgeRequirement,
    BadgeResult,
    BadgeSuggestion,
    BadgeTier,
    EarnedBadge,
    EvaluationResult,
    Operator,
    RequirementResult,
)

logger = logging.getLogger(__name__)

SUGGESTION_MIN_PROGRESS = 50.0
DEFAULT_SUGGESTION_LIMIT = 3


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def evaluate_requirement(requirement: BadgeRequirement, stats: StatsSnapshot) -> RequirementResult:
    """Check one requirement and estimate progress toward it (0-100).

    A metric missing from the snapshot is never an error: not met, zero progress.
    A zero or negative threshold gives all-or-nothing progress, since a ratio
    against it has no meaning.
    """
    value = stats.get(requirement.metric)
    if value is None:
        return RequirementResult(is_met=False, progress=0.0)

    threshold = requirement.threshold
    op = requirement.operator

    if op is Operator.GTE:
        is_met = value >= threshold
    elif op is Operator.GT:
        is_met = value > threshold
    elif op is Operator.LTE:
        is_met = value <= threshold
    elif op is Operator.LT:
        is_met = value < threshold
    else:
        is_met = value == threshold

    if threshold <= 0:
        return RequirementResult(is_met=is_met, progress=100.0 if is_met else 0.0)

    if is_met:
        progress = 100.0
    elif op in (Operator.GTE, Operator.GT):
        progress = min(100.0, (value / threshold) * 100)
    elif op is Operator.EQ:
        progress = 100 - abs(value - threshold) / threshold * 100
    else:
        progress = 100 - ((value - threshold) / threshold) * 100

    return RequirementResult(is_met=is_met, progress=min(100.0, max(0.0, progress)))


def evaluate_badge(badge: BadgeDefinition, stats: StatsSnapshot) -> BadgeResult:
    """Earned only if every requirement is met; progress is the mean requirement progress."""
    results = [evaluate_requirement(req, stats) for req in badge.requirements]
    met = sum(1 for r in results if r.is_met)
    progress = min(100.0, sum(r.progress for r in results) / len(results))
    return BadgeResult(is_earned=met == len(results), progress=progress)


class BadgeEngine:
    """Runs badge evaluation over one catalog.

    clock supplies the achieved_at timestamp; it defaults to the UTC wall clock.
    """

    def __init__(self, catalog: BadgeCatalog, clock: Callable[[], datetime] | None = None) -> None:
        self.catalog = catalog
        self._clock = clock or _utc_now

    def get_badge(self, badge_id: str) -> BadgeDefinition | None:
        return self.catalog.get(badge_id)

    def evaluate_player(self, stats: StatsSnapshot, player_id: str = "") -> EvaluationResult:
        """Evaluate every catalog badge. Earned badges are stamped with the current time."""
        achieved_at = self._clock()
        earned: list[EarnedBadge] = []
        progress: dict[str, float] = {}
        for badge in self.catalog:
            result = evaluate_badge(badge, stats)
            if result.is_earned:
                earned.append(EarnedBadge(definition=badge, achieved_at=achieved_at))
            else:
                progress[badge.id] = result.progress
        logger.debug(
            "Evaluated %d badges for %r: %d earned",
            len(self.catalog), player_id, len(earned),
        )
        return EvaluationResult(
            earned_badges=tuple(earned),
            badge_progress=progress,
            source_stats=stats,
            player_id=player_id,
        )

    def suggest_badges(
        self, stats: StatsSnapshot, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> list[BadgeSuggestion]:
        """Return up to `limit` unearned badges above 50% progress, closest first."""
        if limit <= 0:
            return []
        suggestions: list[BadgeSuggestion] = []
        for badge in self.catalog:
            result = evaluate_badge(badge, stats)
            if result.is_earned or result.progress <= SUGGESTION_MIN_PROGRESS:
                continue
            missing = tuple(
                req for req in badge.requirements if not evaluate_requirement(req, stats).is_met
            )
            suggestions.append(
                BadgeSuggestion(badge=badge, missing_requirements=missing, progress=result.progress)
            )
        suggestions.sort(key=lambda s: s.progress, reverse=True)
        return suggestions[:limit]

    def highest_earned_tier(self, base_badge_id: str, stats: StatsSnapshot) -> BadgeTier | None:
        """Highest tier earned for a catalog badge, or None (also for unknown ids)."""
        from rift_badges.tiers import highest_earned_tier

        badge = self.catalog.get(base_badge_id)
        if badge is None:
            logger.debug("No badge %r in catalog", base_badge_id)
            return None
        return highest_earned_tier(badge, stats)
