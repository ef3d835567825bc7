"""CLI commands for rift-badges."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from rift_badges.analytics import completion_percentage, distribution_by_category
from rift_badges.catalog import CatalogError
from rift_badges.config import (
    build_engine,
    get_catalog_path,
    get_suggestion_limit,
    load_config,
    set_catalog_path,
    set_suggestion_limit,
)
from rift_badges.display import (
    console,
    print_catalog,
    print_distribution,
    print_error,
    print_evaluation,
    print_suggestions,
    print_tiers,
)
from rift_badges.engine import BadgeEngine, evaluate_badge
from rift_badges.log import setup_logging
from rift_badges.metrics import StatsSnapshot
from rift_badges.mock import ROLES, generate_mock_stats
from rift_badges.models import BadgeCategory, BadgeSuggestion, EvaluationResult
from rift_badges.tiers import project_tiers


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rift-badges",
        description="Evaluate League of Legends performance badges",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    eval_p = subparsers.add_parser("evaluate", help="Evaluate every badge for a stats snapshot")
    eval_p.add_argument("stats", type=Path, help="Path to stats snapshot JSON")
    eval_p.add_argument("--player", "-p", default="", help="Player id to attach to the result")
    eval_p.add_argument("--json", action="store_true", help="Print the result as JSON")

    suggest_p = subparsers.add_parser("suggest", help="Show badges you are close to earning")
    suggest_p.add_argument("stats", type=Path, help="Path to stats snapshot JSON")
    suggest_p.add_argument("--limit", "-n", type=int, default=None, help="Number of suggestions")
    suggest_p.add_argument("--json", action="store_true", help="Print suggestions as JSON")

    tiers_p = subparsers.add_parser("tiers", help="Show the tier ladder for one badge")
    tiers_p.add_argument("badge_id", help="Catalog badge id, e.g. cs_dominator")
    tiers_p.add_argument("stats", type=Path, help="Path to stats snapshot JSON")
    tiers_p.add_argument("--json", action="store_true", help="Print the highest tier as JSON")

    catalog_p = subparsers.add_parser("catalog", help="List all badges")
    catalog_p.add_argument(
        "--category", "-c", default=None, help="Only badges in this category (name or display name)"
    )

    demo_p = subparsers.add_parser("demo", help="Evaluate a randomly generated snapshot")
    demo_p.add_argument("--role", choices=ROLES, default="mid")
    demo_p.add_argument("--seed", type=int, default=None, help="Seed for reproducible stats")

    config_p = subparsers.add_parser("config", help="Show or update settings")
    config_p.add_argument("--catalog", type=Path, default=None, help="Custom catalog JSON path")
    config_p.add_argument("--suggestion-limit", type=int, default=None, help="Default suggestion count")
    return parser


def load_stats(path: Path) -> StatsSnapshot:
    """Read a stats snapshot JSON file. Raises ValueError or OSError."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of metric values")
    return StatsSnapshot.from_dict(data)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or "catalog"
    setup_logging(args.verbose)

    try:
        if command == "config":
            do_config(catalog=args.catalog, suggestion_limit=args.suggestion_limit)
            return
        engine = build_engine()
        if command == "evaluate":
            do_evaluate(engine, load_stats(args.stats), player_id=args.player, as_json=args.json)
        elif command == "suggest":
            limit = args.limit if args.limit is not None else get_suggestion_limit()
            do_suggest(engine, load_stats(args.stats), limit=limit, as_json=args.json)
        elif command == "tiers":
            do_tiers(engine, args.badge_id, load_stats(args.stats), as_json=args.json)
        elif command == "demo":
            do_demo(engine, role=args.role, seed=args.seed)
        else:
            do_catalog(engine, category=getattr(args, "category", None))
    except (CatalogError, ValueError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)


def do_evaluate(
    engine: BadgeEngine, stats: StatsSnapshot, player_id: str = "", as_json: bool = False
) -> EvaluationResult:
    """Evaluate all badges and print the dashboard (or JSON)."""
    result = engine.evaluate_player(stats, player_id=player_id)
    if as_json:
        payload = result.to_dict()
        payload["completionPercentage"] = completion_percentage(result)
        payload["distribution"] = {
            category.value: count for category, count in distribution_by_category(result).items()
        }
        console.print_json(json.dumps(payload))
    else:
        print_evaluation(result, engine.catalog)
        if result.earned_badges:
            print_distribution(result)
    return result


def do_suggest(
    engine: BadgeEngine, stats: StatsSnapshot, limit: int = 3, as_json: bool = False
) -> list[BadgeSuggestion]:
    suggestions = engine.suggest_badges(stats, limit=limit)
    if as_json:
        console.print_json(json.dumps([s.to_dict() for s in suggestions]))
    else:
        print_suggestions(suggestions)
    return suggestions


def do_tiers(engine: BadgeEngine, badge_id: str, stats: StatsSnapshot, as_json: bool = False) -> dict:
    """Show every projected tier of one badge and the highest one earned."""
    badge = engine.get_badge(badge_id)
    if badge is None:
        raise ValueError(f"Unknown badge id: {badge_id!r}. Run: rift-badges catalog")
    highest = engine.highest_earned_tier(badge_id, stats)
    variants = [(variant, evaluate_badge(variant, stats)) for variant in project_tiers(badge)]
    result = {
        "badge_id": badge_id,
        "highest_tier": highest.value if highest else None,
        "tiers": {variant.tier.value: res.is_earned for variant, res in variants},
    }
    if as_json:
        console.print_json(json.dumps(result))
    else:
        print_tiers(badge, variants, highest)
    return result


def do_catalog(engine: BadgeEngine, category: str | None = None) -> list:
    badges = list(engine.catalog)
    if category:
        wanted = BadgeCategory.parse(category)
        badges = [b for b in badges if b.category is wanted]
    print_catalog(badges)
    return badges


def do_demo(engine: BadgeEngine, role: str = "mid", seed: int | None = None) -> EvaluationResult:
    """Evaluate a mock snapshot, then show suggestions for it."""
    stats = generate_mock_stats(role, rng=random.Random(seed))
    result = do_evaluate(engine, stats, player_id=f"demo-{role}")
    do_suggest(engine, stats, limit=get_suggestion_limit())
    return result


def do_config(
    catalog: Path | None = None,
    suggestion_limit: int | None = None,
    config_path: Path | None = None,
) -> dict:
    """Update any provided settings, then print the effective config."""
    if catalog is not None:
        set_catalog_path(catalog.expanduser().resolve(), config_path)
    if suggestion_limit is not None:
        set_suggestion_limit(suggestion_limit, config_path)
    config = load_config(config_path)
    catalog_path = get_catalog_path(config_path)
    console.print(f"  Catalog:          {catalog_path or 'built-in'}")
    console.print(f"  Suggestion limit: {get_suggestion_limit(config_path)}")
    return config


if __name__ == "__main__":
    main()
