"""Rich terminal display for rift-badges."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rift_badges.analytics import closest_badges, completion_percentage, distribution_by_category
from rift_badges.catalog import BadgeCatalog
from rift_badges.models import (
    BadgeCategory,
    BadgeDefinition,
    BadgeResult,
    BadgeSuggestion,
    BadgeTier,
    EvaluationResult,
)

console = Console()

# Badge tier -> Rich color name
_TIER_COLORS: dict[BadgeTier, str] = {
    BadgeTier.BRONZE: "dark_orange3",
    BadgeTier.SILVER: "grey70",
    BadgeTier.GOLD: "gold1",
    BadgeTier.PLATINUM: "cyan",
    BadgeTier.DIAMOND: "deep_sky_blue1",
}


def tier_color(tier: BadgeTier | None) -> str:
    if tier is None:
        return "grey50"
    return _TIER_COLORS.get(tier, "white")


def progress_bar(progress: float, width: int = 20) -> str:
    """Render a 0-100 progress value as text: [████████░░░░░░░░░░░░]."""
    ratio = max(0.0, min(progress / 100, 1.0))
    filled = int(ratio * width)
    empty = width - filled
    return "[" + "█" * filled + "░" * empty + "]"


def print_evaluation(result: EvaluationResult, catalog: BadgeCatalog) -> None:
    """Print the badge dashboard: completion, earned badges, and closest badges."""
    pct = completion_percentage(result)
    earned_count = len(result.earned_badges)

    lines: list[str] = []
    lines.append("")
    if result.player_id:
        lines.append(f"  [bold]{result.player_id}[/]")
    role = result.source_stats.role
    if role:
        lines.append(f"  Role: {role}")
    lines.append(f"  {progress_bar(pct)} {earned_count}/{result.catalog_size} badges ({pct}%)")

    if result.earned_badges:
        lines.append("")
        lines.append("  [bold]Earned:[/]")
        for earned in result.earned_badges:
            color = tier_color(earned.definition.tier)
            lines.append(
                f"  \U0001f3c6 [{color}]{earned.definition.name}[/{color}] "
                f"({earned.definition.category.value})"
            )

    closest = closest_badges(result)
    if closest:
        lines.append("")
        lines.append("  [bold]Badge Progress:[/]")
        for badge_id, progress in closest:
            badge = catalog.get(badge_id)
            name = badge.name if badge else badge_id
            lines.append(f"  ⏳ {name}: {progress_bar(progress, width=10)} {round(progress)}%")

    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]PLAYER BADGES[/]",
        box=box.ROUNDED,
        border_style="gold1" if earned_count else "grey50",
        width=64,
    )
    console.print(panel)


def print_suggestions(suggestions: list[BadgeSuggestion]) -> None:
    """Print near-miss badges with the requirements still missing."""
    if not suggestions:
        console.print("[grey50]No badges above 50% progress yet. Keep playing![/]")
        return

    table = Table(
        title="Almost There",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Badge", min_width=20)
    table.add_column("Progress", min_width=18)
    table.add_column("Missing")

    for suggestion in suggestions:
        badge = suggestion.badge
        name_text = f"[bold]{badge.name}[/]\n{badge.category.value}"
        progress_text = f"{progress_bar(suggestion.progress, width=10)} {round(suggestion.progress)}%"
        missing_text = "\n".join(req.describe() for req in suggestion.missing_requirements)
        table.add_row(name_text, progress_text, missing_text)

    console.print(table)


def print_tiers(
    badge: BadgeDefinition,
    variants: list[tuple[BadgeDefinition, BadgeResult]],
    highest: BadgeTier | None,
) -> None:
    """Print the tier ladder for one badge, highest tier first.

    variants holds each projected tier with its evaluation result.
    """
    title = f"{badge.name} Tiers"
    if highest is not None:
        title += f" (highest: {highest.value})"
    table = Table(
        title=title,
        box=box.ROUNDED,
        border_style=tier_color(highest),
        show_header=True,
        header_style="bold",
    )
    table.add_column("", width=2)
    table.add_column("Tier", width=10)
    table.add_column("Progress", min_width=18)
    table.add_column("Requirements")

    for variant, result in sorted(variants, key=lambda v: v[0].tier.rank, reverse=True):
        icon = "✅" if result.is_earned else "⏳"
        color = tier_color(variant.tier)
        reqs = "\n".join(req.describe() for req in variant.requirements)
        table.add_row(
            icon,
            f"[{color}]{variant.tier.value.upper()}[/{color}]",
            f"{progress_bar(result.progress, width=10)} {round(result.progress)}%",
            reqs,
        )

    console.print(table)


def print_catalog(badges: list[BadgeDefinition]) -> None:
    """Print catalog badges with their requirements."""
    table = Table(
        title="Badge Catalog",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Badge", min_width=20)
    table.add_column("Category", width=24)
    table.add_column("Requirements")

    for badge in badges:
        color = tier_color(badge.tier)
        name_text = f"[bold {color}]{badge.name}[/]\n[grey50]{badge.id}[/]"
        reqs = "\n".join(req.describe() for req in badge.requirements)
        table.add_row(name_text, badge.category.value, reqs)

    console.print(table)


def print_distribution(result: EvaluationResult) -> None:
    """Print earned badges per category."""
    distribution = distribution_by_category(result)
    table = Table(
        title="Badges by Category",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Category", style="bold")
    table.add_column("Earned", justify="right")

    for category in BadgeCategory:
        if category in distribution:
            table.add_row(category.value, str(distribution[category]))

    console.print(table)


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/] {message}")
