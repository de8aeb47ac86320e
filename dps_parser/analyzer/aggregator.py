"""
Damage aggregator for folding damage records into per-player totals.
"""

from typing import Dict, Iterable

from ..models.player import PlayerAggregate
from ..parser.events import DamageLine


class DamageAggregator:
    """
    Aggregates damage records per player name.

    Players are kept in the order they first appear. The fold only uses
    sum/min/max, so the totals do not depend on record order and partial
    aggregators can be merged.
    """

    def __init__(self):
        self.players: Dict[str, PlayerAggregate] = {}

    def process_lines(self, lines: Iterable[DamageLine]):
        """
        Fold a batch of damage records.

        Args:
            lines: Validated damage records
        """
        for line in lines:
            self.add(line)

    def add(self, line: DamageLine):
        """Fold a single damage record."""
        current = self.players.get(line.player_name)
        if current is None:
            self.players[line.player_name] = PlayerAggregate.start(
                line.player_name, line.timestamp, line.amount
            )
        else:
            current.add(line.timestamp, line.amount)

    def merge(self, other: "DamageAggregator"):
        """Merge another aggregator's partial totals into this one."""
        for name, partial in other.players.items():
            current = self.players.get(name)
            if current is None:
                self.players[name] = PlayerAggregate(
                    player_name=partial.player_name,
                    total_damage=partial.total_damage,
                    first_timestamp=partial.first_timestamp,
                    last_timestamp=partial.last_timestamp,
                )
            else:
                current.merge(partial)

    def get_aggregates(self) -> Dict[str, PlayerAggregate]:
        return self.players

    def __len__(self) -> int:
        return len(self.players)
