"""
DPS calculation and leaderboard ranking.
"""

from typing import Dict, List

from ..models.player import PlayerAggregate, RankedEntry

# Divisor used when a player's damage window is zero (single hit, or all hits
# on the same millisecond)
MIN_DURATION_MS = 1000


def divide_half_up(numerator: int, denominator: int) -> int:
    """
    Divide two integers, rounding halves up (5 / 2 -> 3, -5 / 2 -> -2).

    Exact for any size of numerator; denominator must be positive.
    """
    return (2 * numerator + denominator) // (2 * denominator)


class MetricsCalculator:
    """Calculates DPS figures and rankings from player aggregates."""

    @staticmethod
    def calculate_dps(aggregate: PlayerAggregate) -> int:
        """DPS over the player's own damage window, rounded."""
        duration_ms = aggregate.duration_ms or MIN_DURATION_MS
        return divide_half_up(aggregate.total_damage * 1000, duration_ms)

    @staticmethod
    def calculate_duration(aggregate: PlayerAggregate) -> int:
        """Reported duration in whole seconds (0 for single-hit players)."""
        return divide_half_up(aggregate.duration_ms, 1000)

    @staticmethod
    def get_dps_rankings(players: Dict[str, PlayerAggregate]) -> List[RankedEntry]:
        """
        Build the ranked leaderboard.

        Sorting is stable, so players with equal DPS keep the order in which
        they first appeared in the log.

        Args:
            players: Aggregates keyed by player name, in first-seen order

        Returns:
            Entries sorted by DPS descending with ranks 1..N
        """
        scored = [
            (
                aggregate,
                MetricsCalculator.calculate_dps(aggregate),
                MetricsCalculator.calculate_duration(aggregate),
            )
            for aggregate in players.values()
        ]
        scored.sort(key=lambda item: item[1], reverse=True)

        return [
            RankedEntry(
                rank=index,
                player_name=aggregate.player_name,
                dps=dps,
                total_damage=aggregate.total_damage,
                duration=duration,
            )
            for index, (aggregate, dps, duration) in enumerate(scored, 1)
        ]
