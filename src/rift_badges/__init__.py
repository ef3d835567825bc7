"""Badge evaluation engine for League of Legends player stats."""

from rift_badges.catalog import BADGE_DEFINITIONS, BadgeCatalog, CatalogError, default_catalog, load_catalog
from rift_badges.engine import BadgeEngine, evaluate_badge, evaluate_requirement
from rift_badges.metrics import Metric, StatsSnapshot
from rift_badges.models import (
    BadgeCategory,
    BadgeDefinition,
    BadgeRequirement,
    BadgeTier,
    EvaluationResult,
    Operator,
    Period,
)

__version__ = "0.1.0"

__all__ = [
    "BADGE_DEFINITIONS",
    "BadgeCatalog",
    "BadgeCategory",
    "BadgeDefinition",
    "BadgeEngine",
    "BadgeRequirement",
    "BadgeTier",
    "CatalogError",
    "EvaluationResult",
    "Metric",
    "Operator",
    "Period",
    "StatsSnapshot",
    "default_catalog",
    "evaluate_badge",
    "evaluate_requirement",
    "load_catalog",
]
