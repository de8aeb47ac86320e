"""
Per-player damage aggregates and leaderboard entries.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class PlayerAggregate:
    """Running damage totals for one player within a single parse."""

    player_name: str
    total_damage: int
    first_timestamp: int
    last_timestamp: int

    @classmethod
    def start(cls, player_name: str, timestamp: int, amount: int = 0) -> "PlayerAggregate":
        """Create an aggregate from a player's first damage record."""
        return cls(
            player_name=player_name,
            total_damage=amount,
            first_timestamp=timestamp,
            last_timestamp=timestamp,
        )

    def add(self, timestamp: int, amount: int) -> None:
        """Fold one damage record into the aggregate."""
        self.total_damage += amount
        self.first_timestamp = min(self.first_timestamp, timestamp)
        self.last_timestamp = max(self.last_timestamp, timestamp)

    def merge(self, other: "PlayerAggregate") -> None:
        """Combine a partial aggregate for the same player."""
        self.total_damage += other.total_damage
        self.first_timestamp = min(self.first_timestamp, other.first_timestamp)
        self.last_timestamp = max(self.last_timestamp, other.last_timestamp)

    @property
    def duration_ms(self) -> int:
        """Observed damage window in milliseconds, never negative."""
        return max(0, self.last_timestamp - self.first_timestamp)


@dataclass(frozen=True)
class RankedEntry:
    """One row of the DPS leaderboard."""

    rank: int
    player_name: str
    dps: int
    total_damage: int
    duration: int  # seconds

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
