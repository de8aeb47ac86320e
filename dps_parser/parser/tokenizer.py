"""
Line tokenizer for parsing combat log lines.
"""

import re
from collections import Counter
from typing import Dict, Any, List, Optional

from .events import (
    ACTOR_FIELD,
    DAMAGE_FIELD,
    EVENT_TYPE_FIELD,
    HEADER_TOKEN,
    MIN_FIELD_COUNT,
    TARGET_FIELD,
    TIMESTAMP_FIELD,
    DamageLine,
    EventType,
    SkipReason,
)
from .timestamps import parse_log_timestamp

# Leading base-10 integer; anything after the digits is ignored
INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")

# Longest damage value accepted, in digits (CPython's default int conversion limit)
MAX_DAMAGE_DIGITS = 4300

# Whitespace and byte order marks around a line
LINE_EDGES = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and any UTF-8 byte order mark."""
    return LINE_EDGES.sub("", line)


def split_lines(content: str) -> List[str]:
    """Split raw log text into trimmed lines (handles \\r\\n and \\n endings)."""
    return [trim_line(line) for line in content.split("\n")]


def parse_int_prefix(value: str) -> Optional[int]:
    """
    Parse the leading integer of a field.

    Args:
        value: Field value, e.g. "1250" or "1250abc"

    Returns:
        The integer, or None when the field does not start with digits or has
        more than MAX_DAMAGE_DIGITS of them
    """
    match = INTEGER_PREFIX.match(value.strip())
    if not match or len(match.group(0).lstrip("+-")) > MAX_DAMAGE_DIGITS:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Lowered sys.set_int_max_str_digits limit
        return None


class LineTokenizer:
    """
    Tokenizes individual lines from combat logs.

    Lines are comma-separated with a fixed column layout. Anything that is
    not a well-formed DamageDone row is counted and dropped.
    """

    def __init__(self):
        self.line_count = 0
        self.damage_count = 0
        self.skipped: Counter = Counter()

    def parse_line(self, line: str) -> Optional[DamageLine]:
        """
        Parse a single combat log line into a damage record.

        Args:
            line: Raw line from combat log file

        Returns:
            DamageLine or None if the line is not a usable damage event
        """
        self.line_count += 1

        line = trim_line(line)
        if not line:
            return self._skip(SkipReason.EMPTY)

        if line.startswith(HEADER_TOKEN):
            return self._skip(SkipReason.HEADER)

        fields = line.split(",")
        if len(fields) < MIN_FIELD_COUNT:
            return self._skip(SkipReason.SHORT)

        if fields[EVENT_TYPE_FIELD].strip() != EventType.DAMAGE_DONE.value:
            return self._skip(SkipReason.EVENT_TYPE)

        player_name = fields[ACTOR_FIELD].strip()
        if not player_name:
            return self._skip(SkipReason.ACTOR)

        amount = parse_int_prefix(fields[DAMAGE_FIELD])
        if amount is None:
            return self._skip(SkipReason.DAMAGE)

        timestamp = parse_log_timestamp(fields[TIMESTAMP_FIELD])
        if timestamp is None:
            return self._skip(SkipReason.TIMESTAMP)

        target_name = fields[TARGET_FIELD].strip() if len(fields) > TARGET_FIELD else ""

        self.damage_count += 1
        return DamageLine(
            timestamp=timestamp,
            amount=amount,
            player_name=player_name,
            target_name=target_name,
        )

    def _skip(self, reason: SkipReason) -> None:
        self.skipped[reason.value] += 1
        return None

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with line counts and per-reason skip counts
        """
        return {
            "lines_processed": self.line_count,
            "damage_lines": self.damage_count,
            "skipped": dict(self.skipped),
        }
