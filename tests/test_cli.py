"""Tests for CLI commands and display helpers."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from rift_badges.catalog import default_catalog
from rift_badges.cli import (
    build_parser,
    do_catalog,
    do_config,
    do_demo,
    do_evaluate,
    do_suggest,
    do_tiers,
    load_stats,
    main,
)
from rift_badges.display import progress_bar, tier_color
from rift_badges.engine import BadgeEngine
from rift_badges.metrics import StatsSnapshot
from rift_badges.models import BadgeCategory, BadgeTier


@pytest.fixture
def engine():
    return BadgeEngine(default_catalog())


@pytest.fixture
def stats_file(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({"role": "mid", "firstBloodParticipationRate": 50}), encoding="utf-8")
    return path


# ── Argument Parsing ──────────────────────────────────────────────────────────


class TestArgumentParsing:
    def test_no_args_defaults_to_none_command(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.verbose is False

    def test_evaluate_command(self):
        args = build_parser().parse_args(["evaluate", "stats.json", "--player", "p1", "--json"])
        assert args.command == "evaluate"
        assert str(args.stats) == "stats.json"
        assert args.player == "p1"
        assert args.json is True

    def test_suggest_limit(self):
        args = build_parser().parse_args(["suggest", "stats.json", "-n", "5"])
        assert args.limit == 5

    def test_suggest_limit_defaults_to_none(self):
        args = build_parser().parse_args(["suggest", "stats.json"])
        assert args.limit is None

    def test_tiers_command(self):
        args = build_parser().parse_args(["tiers", "cs_dominator", "stats.json"])
        assert args.badge_id == "cs_dominator"

    def test_demo_role_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["demo", "--role", "carry"])

    def test_verbose_flag(self):
        args = build_parser().parse_args(["-v", "catalog"])
        assert args.verbose is True

    def test_invalid_command_raises(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["nonexistent"])


# ── load_stats ────────────────────────────────────────────────────────────────


class TestLoadStats:
    def test_reads_snapshot(self, stats_file):
        stats = load_stats(stats_file)
        assert stats.role == "mid"
        assert len(stats) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_stats(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_stats(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_stats(tmp_path / "missing.json")


# ── Commands ──────────────────────────────────────────────────────────────────


class TestDoEvaluate:
    def test_returns_result(self, engine, stats_file):
        result = do_evaluate(engine, load_stats(stats_file), player_id="p1")
        assert result.player_id == "p1"
        assert result.earned_ids == ["first_blood_contributor"]

    def test_json_output(self, engine, stats_file, capsys):
        do_evaluate(engine, load_stats(stats_file), as_json=True)
        out = capsys.readouterr().out
        assert "completionPercentage" in out
        assert "first_blood_contributor" in out

    def test_empty_stats(self, engine):
        result = do_evaluate(engine, StatsSnapshot())
        assert result.earned_badges == ()
        assert len(result.badge_progress) == len(engine.catalog)


class TestDoSuggest:
    def test_close_badge_suggested(self, engine):
        stats = StatsSnapshot.from_dict({
            "csPerMinute": 7.5, "csDifferentialAt10": 10, "csDifferentialAt20": 10,
        })
        suggestions = do_suggest(engine, stats, limit=3)
        assert [s.badge.id for s in suggestions] == ["cs_dominator"]

    def test_nothing_to_suggest(self, engine, capsys):
        assert do_suggest(engine, StatsSnapshot()) == []
        assert capsys.readouterr().out

    def test_json_output(self, engine, capsys):
        stats = StatsSnapshot.from_dict({"firstBloodParticipationRate": 30})
        do_suggest(engine, stats, as_json=True)
        assert "missingRequirements" in capsys.readouterr().out


class TestDoTiers:
    def test_tier_ladder(self, engine, stats_file):
        result = do_tiers(engine, "first_blood_contributor", load_stats(stats_file))
        assert result["highest_tier"] == "platinum"
        assert result["tiers"] == {
            "bronze": True, "silver": True, "gold": True, "platinum": True, "diamond": False,
        }

    def test_nothing_earned(self, engine):
        result = do_tiers(engine, "cs_dominator", StatsSnapshot())
        assert result["highest_tier"] is None
        assert not any(result["tiers"].values())

    def test_unknown_badge(self, engine):
        with pytest.raises(ValueError, match="Unknown badge id"):
            do_tiers(engine, "pentakill_master", StatsSnapshot())


class TestDoCatalog:
    def test_lists_all(self, engine):
        assert len(do_catalog(engine)) == 15

    def test_filter_by_category(self, engine):
        badges = do_catalog(engine, category="Teamplay & Support")
        assert {b.id for b in badges} == {"teamfight_initiator", "peel_specialist", "roam_impact"}
        assert all(b.category is BadgeCategory.TEAMPLAY_SUPPORT for b in badges)

    def test_unknown_category(self, engine):
        with pytest.raises(ValueError):
            do_catalog(engine, category="Jungle Diff")


class TestDoDemo:
    @patch("rift_badges.cli.get_suggestion_limit", return_value=3)
    def test_seeded_demo_is_reproducible(self, _limit, engine):
        first = do_demo(engine, role="support", seed=42)
        second = do_demo(engine, role="support", seed=42)
        assert first.earned_ids == second.earned_ids
        assert first.source_stats == second.source_stats
        assert first.player_id == "demo-support"


class TestDoConfig:
    def test_sets_values(self, tmp_path):
        config_path = tmp_path / "config.json"
        catalog = tmp_path / "badges.json"
        config = do_config(catalog=catalog, suggestion_limit=4, config_path=config_path)
        assert config["catalog_path"] == str(catalog.resolve())
        assert config["suggestion_limit"] == 4

    def test_show_only(self, tmp_path):
        assert do_config(config_path=tmp_path / "config.json") == {}


# ── main ──────────────────────────────────────────────────────────────────────


@patch("rift_badges.cli.setup_logging")
class TestMain:
    @patch("rift_badges.cli.build_engine")
    def test_evaluate(self, mock_build, _logging, engine, stats_file, capsys):
        mock_build.return_value = engine
        main(["evaluate", str(stats_file), "--json"])
        assert "first_blood_contributor" in capsys.readouterr().out

    @patch("rift_badges.cli.get_suggestion_limit", return_value=2)
    @patch("rift_badges.cli.do_suggest")
    @patch("rift_badges.cli.build_engine")
    def test_suggest_uses_configured_limit(self, mock_build, mock_suggest, _limit, _logging, engine, stats_file):
        mock_build.return_value = engine
        main(["suggest", str(stats_file)])
        assert mock_suggest.call_args.kwargs["limit"] == 2

    @patch("rift_badges.cli.build_engine")
    def test_invalid_stats_exits(self, mock_build, _logging, engine, tmp_path):
        mock_build.return_value = engine
        path = tmp_path / "stats.json"
        path.write_text('{"pentakills": 5}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["evaluate", str(path)])
        assert exc_info.value.code == 1

    @patch("rift_badges.cli.build_engine")
    def test_defaults_to_catalog(self, mock_build, _logging, engine):
        mock_build.return_value = engine
        with patch("rift_badges.cli.do_catalog") as mock_catalog:
            main([])
        mock_catalog.assert_called_once_with(engine, category=None)

    @patch("rift_badges.cli.do_config")
    def test_config_skips_engine(self, mock_config, _logging):
        with patch("rift_badges.cli.build_engine") as mock_build:
            main(["config", "--suggestion-limit", "5"])
        mock_build.assert_not_called()
        mock_config.assert_called_once_with(catalog=None, suggestion_limit=5)


# ── Display helpers ───────────────────────────────────────────────────────────


class TestDisplayHelpers:
    def test_progress_bar_empty(self):
        assert progress_bar(0, width=10) == "[" + "░" * 10 + "]"

    def test_progress_bar_full(self):
        assert "░" not in progress_bar(100, width=10)

    def test_tier_color_known(self):
        assert tier_color(BadgeTier.GOLD) != tier_color(BadgeTier.BRONZE)
