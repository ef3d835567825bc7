"""MCP server for rift-badges.

Exposes badge evaluation as MCP tools so an assistant can check a player's
badges mid-conversation.
Run via: python3 -m rift_badges.mcp_server
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from rift_badges.analytics import completion_percentage, distribution_by_category
from rift_badges.catalog import CatalogError
from rift_badges.metrics import StatsSnapshot

mcp = FastMCP(name="rift-badges")


def _get_engine():
    from rift_badges.config import build_engine
    return build_engine()


@mcp.tool()
def list_badges() -> dict[str, Any]:
    """List every badge in the catalog with its requirements."""
    try:
        engine = _get_engine()
    except (CatalogError, OSError) as exc:
        return {"error": f"Could not load badge catalog: {exc}"}
    badges = [badge.to_dict() for badge in engine.catalog]
    return {"badges": badges, "total_count": len(badges)}


@mcp.tool()
def evaluate_badges(stats: dict[str, Any], player_id: str = "") -> dict[str, Any]:
    """Evaluate all badges for a stats snapshot keyed by camelCase metric names."""
    try:
        snapshot = StatsSnapshot.from_dict(stats)
    except ValueError as exc:
        return {"error": str(exc)}
    try:
        engine = _get_engine()
    except (CatalogError, OSError) as exc:
        return {"error": f"Could not load badge catalog: {exc}"}
    result = engine.evaluate_player(snapshot, player_id=player_id)
    payload = result.to_dict()
    payload["earned_count"] = len(result.earned_badges)
    payload["total_count"] = result.catalog_size
    payload["completion_pct"] = completion_percentage(result)
    return payload


@mcp.tool()
def suggest_badges(stats: dict[str, Any], limit: int = 0) -> dict[str, Any]:
    """Suggest unearned badges above 50% progress, closest first.

    limit: maximum suggestions; 0 uses the configured default.
    """
    try:
        snapshot = StatsSnapshot.from_dict(stats)
    except ValueError as exc:
        return {"error": str(exc)}
    if limit <= 0:
        from rift_badges.config import get_suggestion_limit
        limit = get_suggestion_limit()
    try:
        engine = _get_engine()
    except (CatalogError, OSError) as exc:
        return {"error": f"Could not load badge catalog: {exc}"}
    suggestions = engine.suggest_badges(snapshot, limit=limit)
    return {"suggestions": [s.to_dict() for s in suggestions], "count": len(suggestions)}


@mcp.tool()
def get_highest_tier(badge_id: str, stats: dict[str, Any]) -> dict[str, Any]:
    """Get the highest tier (bronze to diamond) earned for one catalog badge."""
    try:
        snapshot = StatsSnapshot.from_dict(stats)
    except ValueError as exc:
        return {"error": str(exc)}
    try:
        engine = _get_engine()
    except (CatalogError, OSError) as exc:
        return {"error": f"Could not load badge catalog: {exc}"}
    if engine.get_badge(badge_id) is None:
        return {"error": f"Unknown badge id: {badge_id}"}
    tier = engine.highest_earned_tier(badge_id, snapshot)
    return {"badge_id": badge_id, "highest_tier": tier.value if tier else None}


@mcp.tool()
def get_badge_distribution(stats: dict[str, Any]) -> dict[str, Any]:
    """Count earned badges per category and overall completion."""
    try:
        snapshot = StatsSnapshot.from_dict(stats)
    except ValueError as exc:
        return {"error": str(exc)}
    try:
        engine = _get_engine()
    except (CatalogError, OSError) as exc:
        return {"error": f"Could not load badge catalog: {exc}"}
    result = engine.evaluate_player(snapshot)
    return {
        "distribution": {c.value: n for c, n in distribution_by_category(result).items()},
        "completion_pct": completion_percentage(result),
    }


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
