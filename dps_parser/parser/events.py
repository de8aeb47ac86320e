"""
Event types and line records for combat log parsing.
"""

from dataclasses import dataclass
from enum import Enum


class EventType(str, Enum):
    """Event type tags found in the second column of a log line."""

    DAMAGE_DONE = "DamageDone"
    HEALING_DONE = "HealingDone"


class SkipReason(str, Enum):
    """Why a log line did not produce a damage record."""

    EMPTY = "empty"
    HEADER = "header"
    SHORT = "short"
    EVENT_TYPE = "event_type"
    ACTOR = "actor"
    DAMAGE = "damage"
    TIMESTAMP = "timestamp"


# Header line written by the game client at the top of each export
HEADER_TOKEN = "CombatLogVersion"

# Column positions (0-indexed)
TIMESTAMP_FIELD = 0
EVENT_TYPE_FIELD = 1
DAMAGE_FIELD = 4
ACTOR_FIELD = 8
TARGET_FIELD = 9

MIN_FIELD_COUNT = ACTOR_FIELD + 1


@dataclass(frozen=True)
class DamageLine:
    """A validated DamageDone record."""

    timestamp: int  # epoch milliseconds, UTC
    amount: int
    player_name: str
    target_name: str = ""
