"""
Tests for roster matching and saved ranking display.
"""

import logging

from dps_parser.analyzer.roster import (
    UNKNOWN_PLAYER,
    build_performance_rows,
    rank_saved_performances,
)
from dps_parser.models.player import RankedEntry


def entries():
    return [
        RankedEntry(rank=1, player_name="PlayerB", dps=50, total_damage=50, duration=0),
        RankedEntry(rank=2, player_name="PlayerA", dps=20, total_damage=200, duration=10),
        RankedEntry(rank=3, player_name="Stranger", dps=5, total_damage=40, duration=8),
    ]


class TestBuildPerformanceRows:
    """Test build_performance_rows."""

    def test_matches_case_insensitively(self):
        result = build_performance_rows(entries(), {"playera": "u-1", "PLAYERB": "u-2"})

        assert result.imported == 2
        assert [row["user_id"] for row in result.rows] == ["u-2", "u-1"]
        assert result.rows[0] == {
            "user_id": "u-2",
            "class_played": None,
            "dps": 50,
            "total_damage": 50,
            "duration_seconds": 0,
        }

    def test_unmatched_players_are_counted(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = build_performance_rows(entries(), {"PlayerA": "u-1"})

        assert result.skipped == 2
        assert result.skipped_players == ["PlayerB", "Stranger"]
        assert "2 player(s) not found" in caplog.text

    def test_context_columns(self):
        result = build_performance_rows(
            entries()[:1],
            {"PlayerB": "u-2"},
            guild_id="g-1",
            event_id="e-9",
            target="Vulkan",
        )
        row = result.rows[0]

        assert row["guild_id"] == "g-1"
        assert row["event_id"] == "e-9"
        assert row["target_category"] == "Vulkan"

    def test_empty_roster(self):
        result = build_performance_rows(entries(), {})
        assert result.rows == []
        assert result.skipped == 3


class TestRankSavedPerformances:
    """Test rank_saved_performances."""

    def test_reranks_by_dps(self):
        rows = [
            {"player_name": "Low", "dps": 10, "total_damage": 100, "duration_seconds": 10},
            {"player_name": "High", "dps": 90, "total_damage": 900, "duration_seconds": 10},
            {"dps": 40, "total_damage": 400, "duration_seconds": 10},
        ]
        ranked = rank_saved_performances(rows)

        assert [(e.rank, e.player_name, e.dps) for e in ranked] == [
            (1, "High", 90),
            (2, UNKNOWN_PLAYER, 40),
            (3, "Low", 10),
        ]

    def test_empty(self):
        assert rank_saved_performances([]) == []
