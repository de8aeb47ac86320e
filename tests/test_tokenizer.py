"""
Unit tests for line tokenization and field extraction.
"""

import pytest

from dps_parser.parser.timestamps import parse_log_timestamp
from dps_parser.parser.tokenizer import LineTokenizer, parse_int_prefix, split_lines


class TestParseIntPrefix:
    """Test leading-integer parsing of the damage column."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1500", 1500),
            (" 42 ", 42),
            ("-15", -15),
            ("+7", 7),
            ("12abc", 12),
            ("1.5", 1),
            ("007", 7),
        ],
    )
    def test_parses_leading_integer(self, value, expected):
        assert parse_int_prefix(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "n/a", "-", ".5", "x10"])
    def test_rejects_non_numeric(self, value):
        assert parse_int_prefix(value) is None

    def test_oversized_field_is_rejected(self):
        assert parse_int_prefix("9" * 5000) is None
        assert parse_int_prefix("9" * 400) == int("9" * 400)


class TestSplitLines:
    def test_handles_both_line_endings(self):
        assert split_lines("a\r\nb\nc\r\n") == ["a", "b", "c", ""]

    def test_strips_byte_order_mark(self):
        assert split_lines("\ufeffCombatLogVersion,4\r\n x \ufeff") == ["CombatLogVersion,4", "x"]


class TestLineTokenizer:
    """Test LineTokenizer.parse_line."""

    def test_valid_damage_line(self, make_line):
        tokenizer = LineTokenizer()
        record = tokenizer.parse_line(make_line("20250101-10:00:00:000", 1500, "PlayerA"))

        assert record is not None
        assert record.timestamp == parse_log_timestamp("20250101-10:00:00:000")
        assert record.amount == 1500
        assert record.player_name == "PlayerA"
        assert record.target_name == "Mannequin d'entrainement"

    def test_fields_are_trimmed(self):
        tokenizer = LineTokenizer()
        line = " 20250101-10:00:00:000 , DamageDone ,Skill,1, 250 ,0,0,0,  PlayerA  \r"
        record = tokenizer.parse_line(line)

        assert record is not None
        assert record.amount == 250
        assert record.player_name == "PlayerA"
        assert record.target_name == ""

    def test_exactly_nine_fields_is_enough(self):
        tokenizer = LineTokenizer()
        line = "20250101-10:00:00:000,DamageDone,Skill,1,250,0,0,0,PlayerA"
        assert tokenizer.parse_line(line) is not None

    @pytest.mark.parametrize(
        "line,reason",
        [
            ("", "empty"),
            ("   ", "empty"),
            ("CombatLogVersion,4,ADVANCED_LOG_ENABLED,1,BUILD,1,2,3,4,5", "header"),
            ("20250101-10:00:00:000,DamageDone,Skill,1,250,0,0,0", "short"),
            ("20250101-10:00:00:000,HealingDone,Skill,1,250,0,0,0,PlayerA", "event_type"),
            ("20250101-10:00:00:000,damagedone,Skill,1,250,0,0,0,PlayerA", "event_type"),
            ("20250101-10:00:00:000,DamageDone,Skill,1,250,0,0,0,   ", "actor"),
            ("20250101-10:00:00:000,DamageDone,Skill,1,abc,0,0,0,PlayerA", "damage"),
            ("20250101-10:00:00,DamageDone,Skill,1,250,0,0,0,PlayerA", "timestamp"),
        ],
    )
    def test_skipped_lines(self, line, reason):
        tokenizer = LineTokenizer()
        assert tokenizer.parse_line(line) is None
        assert tokenizer.get_stats()["skipped"] == {reason: 1}

    def test_stats(self, make_line):
        tokenizer = LineTokenizer()
        tokenizer.parse_line(make_line("20250101-10:00:00:000"))
        tokenizer.parse_line(make_line("20250101-10:00:01:000"))
        tokenizer.parse_line("")

        stats = tokenizer.get_stats()
        assert stats["lines_processed"] == 3
        assert stats["damage_lines"] == 2
        assert stats["skipped"] == {"empty": 1}

    def test_byte_order_mark_before_header(self):
        tokenizer = LineTokenizer()
        assert tokenizer.parse_line("\ufeffCombatLogVersion,4,ADVANCED_LOG_ENABLED,1") is None
        assert tokenizer.get_stats()["skipped"] == {"header": 1}

    def test_byte_order_mark_before_damage_line(self, make_line):
        tokenizer = LineTokenizer()
        record = tokenizer.parse_line("\ufeff" + make_line("20250101-10:00:00:000", 100, "PlayerA"))

        assert record is not None
        assert record.timestamp == parse_log_timestamp("20250101-10:00:00:000")

    def test_oversized_damage_is_skipped(self, make_line):
        tokenizer = LineTokenizer()
        assert tokenizer.parse_line(make_line("20250101-10:00:00:000", "9" * 5000)) is None
        assert tokenizer.get_stats()["skipped"] == {"damage": 1}
