"""Aggregations over evaluation results.

Pure functions that summarize an EvaluationResult for dashboards.
No side effects, no catalog access - the result carries everything needed.
"""

from __future__ import annotations

import math

from rift_badges.models import BadgeCategory, BadgeDefinition, EvaluationResult


def distribution_by_category(result: EvaluationResult) -> dict[BadgeCategory, int]:
    """Count earned badges per category. Categories with none earned are omitted."""
    distribution: dict[BadgeCategory, int] = {}
    for earned in result.earned_badges:
        category = earned.definition.category
        distribution[category] = distribution.get(category, 0) + 1
    return distribution


def completion_percentage(result: EvaluationResult) -> int:
    """Earned share of the catalog as a whole percentage, rounded half up."""
    total = result.catalog_size
    if total == 0:
        return 0
    return math.floor(len(result.earned_badges) / total * 100 + 0.5)


def newly_earned(previous: EvaluationResult, current: EvaluationResult) -> list[BadgeDefinition]:
    """Compare two runs, return badges earned in current but not in previous."""
    prev_earned = set(previous.earned_ids)
    return [b.definition for b in current.earned_badges if b.id not in prev_earned]


def closest_badges(result: EvaluationResult, n: int = 6, minimum: float = 25.0) -> list[tuple[str, float]]:
    """Return the N unearned badge ids with the most progress above `minimum`."""
    in_progress = [(badge_id, p) for badge_id, p in result.badge_progress.items() if p > minimum]
    in_progress.sort(key=lambda item: item[1], reverse=True)
    return in_progress[:n]
