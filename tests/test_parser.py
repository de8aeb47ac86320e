"""
Tests for the combat log DPS parser end to end.
"""

import random

import pytest

from dps_parser import parse_dps_log
from dps_parser.models.player import RankedEntry
from dps_parser.parser.parser import DPSLogParser
from tests.conftest import build_line


class TestParseDPSLog:
    """Scenario tests for parse_dps_log."""

    def test_basic_scenario_single_hit_outranks(self, basic_log):
        entries = parse_dps_log(basic_log)

        assert entries == [
            RankedEntry(rank=1, player_name="PlayerB", dps=50, total_damage=50, duration=0),
            RankedEntry(rank=2, player_name="PlayerA", dps=20, total_damage=200, duration=10),
        ]

    def test_malformed_lines_are_skipped(self, make_line):
        content = "\n".join(
            [
                "CombatLogVersion,4,ADVANCED_LOG_ENABLED,1,BUILD_VERSION,1.0,PROJECT_ID,1,X",
                "20250101-10:00:00:000,DamageDone,Skill,1,100",
                make_line("20250101-10:00:01:000", "lots", "PlayerA"),
                make_line("20250101-10:00:00:000", 300, "PlayerA"),
                make_line("20250101-10:00:03:000", 300, "PlayerA"),
            ]
        )
        entries = parse_dps_log(content)

        assert entries == [
            RankedEntry(rank=1, player_name="PlayerA", dps=200, total_damage=600, duration=3),
        ]

    def test_healing_lines_are_excluded(self, make_line):
        content = "\n".join(
            [
                make_line("20250101-10:00:00:000", 100, "PlayerA"),
                make_line("20250101-10:00:05:000", 100, "PlayerA", event_type="HealingDone"),
                make_line("20250101-10:00:02:000", 100, "PlayerA"),
            ]
        )
        entries = parse_dps_log(content)

        assert len(entries) == 1
        assert entries[0].total_damage == 200
        assert entries[0].duration == 2
        assert entries[0].dps == 100

    def test_empty_and_garbage_input(self):
        assert parse_dps_log("") == []
        assert parse_dps_log("CombatLogVersion,4\n\n\r\n") == []
        assert parse_dps_log("not,a,combat,log") == []

    def test_raid_log(self, raid_log):
        entries = parse_dps_log(raid_log)

        assert [(e.rank, e.player_name, e.dps, e.total_damage, e.duration) for e in entries] == [
            (1, "Brienne", 350, 2800, 8),
            (2, "Aldric", 300, 3000, 10),
            (3, "Cassia", 213, 1600, 8),
        ]

    def test_ties_keep_first_appearance_order(self, make_line):
        content = "\n".join(
            [
                make_line("20250101-10:00:00:000", 100, "Zed"),
                make_line("20250101-10:00:00:000", 100, "Amy"),
            ]
        )
        assert [e.player_name for e in parse_dps_log(content)] == ["Zed", "Amy"]

    def test_byte_order_mark_does_not_drop_first_line(self, make_line):
        content = "\ufeff" + "\n".join(
            [
                make_line("20250101-10:00:00:000", 100, "PlayerA"),
                make_line("20250101-10:00:10:000", 100, "PlayerA"),
            ]
        )
        assert parse_dps_log(content) == [
            RankedEntry(rank=1, player_name="PlayerA", dps=20, total_damage=200, duration=10),
        ]

    def test_huge_damage_values(self, make_line):
        total = int("9" * 400)
        content = "\n".join(
            [
                make_line("20250101-10:00:00:000", "9" * 400, "Whale"),
                make_line("20250101-10:00:00:000", "9" * 5000, "Overflow"),
                make_line("20250101-10:00:00:000", 10, "Minnow"),
            ]
        )
        entries = parse_dps_log(content)

        assert [(e.player_name, e.dps, e.total_damage) for e in entries] == [
            ("Whale", total, total),
            ("Minnow", 10, 10),
        ]

    def test_two_digit_year_lines_are_kept(self, make_line):
        content = "\n".join(
            [
                make_line("00000101-10:00:00:000", 100, "PlayerA"),
                make_line("00000101-10:00:04:000", 100, "PlayerA"),
            ]
        )
        assert parse_dps_log(content) == [
            RankedEntry(rank=1, player_name="PlayerA", dps=50, total_damage=200, duration=4),
        ]


class TestParserProperties:
    """Invariants that hold for any log."""

    @pytest.fixture
    def generated_log(self):
        rng = random.Random(1234)
        players = [f"Player{i}" for i in range(12)]
        lines = ["CombatLogVersion,4"]
        for _ in range(400):
            second = rng.randint(0, 59)
            millis = rng.randint(0, 999)
            lines.append(
                build_line(
                    f"20250101-10:{rng.randint(0, 9):02d}:{second:02d}:{millis:03d}",
                    rng.randint(1, 5000),
                    rng.choice(players),
                )
            )
        return lines

    def test_ranks_are_contiguous(self, generated_log):
        entries = parse_dps_log("\n".join(generated_log))
        assert [e.rank for e in entries] == list(range(1, len(entries) + 1))
        assert len(entries) == len({e.player_name for e in entries})

    def test_dps_is_non_increasing(self, generated_log):
        entries = parse_dps_log("\n".join(generated_log))
        assert all(a.dps >= b.dps for a, b in zip(entries, entries[1:]))

    def test_idempotent(self, generated_log):
        content = "\n".join(generated_log)
        assert parse_dps_log(content) == parse_dps_log(content)

    def test_shuffled_lines_give_same_aggregates(self, generated_log):
        header, body = generated_log[0], generated_log[1:]
        shuffled = body[:]
        random.Random(99).shuffle(shuffled)

        def unordered(lines):
            return {
                (e.player_name, e.dps, e.total_damage, e.duration)
                for e in parse_dps_log("\n".join([header] + lines))
            }

        assert unordered(body) == unordered(shuffled)


class TestDPSLogParser:
    """Test the DPSLogParser object."""

    def test_stats(self, raid_log):
        parser = DPSLogParser()
        parser.parse_text(raid_log)
        stats = parser.get_stats()

        assert stats["lines_processed"] == 13
        assert stats["damage_lines"] == 7
        assert stats["players"] == 3
        assert stats["skipped"] == {
            "header": 1,
            "event_type": 1,
            "short": 1,
            "damage": 1,
            "timestamp": 1,
            "empty": 1,
        }

    def test_each_call_starts_fresh(self, basic_log, make_line):
        parser = DPSLogParser()
        parser.parse_text(basic_log)
        entries = parser.parse_text(make_line("20250101-10:00:00:000", 10, "Solo"))

        assert [e.player_name for e in entries] == ["Solo"]
        assert parser.get_stats()["lines_processed"] == 1

    def test_parse_file(self, log_file):
        parser = DPSLogParser()
        entries = parser.parse_file(str(log_file))

        assert [e.player_name for e in entries] == ["PlayerB", "PlayerA"]
        assert parser.get_stats()["file"] == str(log_file)

    def test_parse_file_with_byte_order_mark(self, tmp_path, basic_log):
        path = tmp_path / "bom.txt"
        path.write_text(basic_log, encoding="utf-8-sig")

        entries = DPSLogParser().parse_file(str(path))
        assert [(e.player_name, e.total_damage) for e in entries] == [("PlayerB", 50), ("PlayerA", 200)]

    def test_parse_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DPSLogParser().parse_file(str(tmp_path / "missing.txt"))
