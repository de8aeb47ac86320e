"""
Roster matching for imported DPS rankings.

Turns ranked entries into performance rows for known guild members. The
caller owns persistence; entries whose player is not on the roster are
dropped and counted.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..models.player import RankedEntry

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER = "Unknown"


@dataclass
class ImportResult:
    """Rows ready for storage plus the players that could not be matched."""

    rows: List[Dict[str, Any]] = field(default_factory=list)
    skipped_players: List[str] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return len(self.rows)

    @property
    def skipped(self) -> int:
        return len(self.skipped_players)


def build_performance_rows(
    entries: Iterable[RankedEntry],
    profiles: Mapping[str, str],
    guild_id: Optional[str] = None,
    event_id: Optional[str] = None,
    target: Optional[str] = None,
) -> ImportResult:
    """
    Match ranked entries against a roster.

    Args:
        entries: Ranked DPS entries
        profiles: In-game name -> user id; names match case-insensitively
        guild_id: Guild the rows belong to
        event_id: Raid event the rows belong to
        target: Target category (boss or dummy) of the log

    Returns:
        ImportResult with one row per matched entry
    """
    user_by_name = {name.lower(): user_id for name, user_id in profiles.items()}
    context = {
        key: value
        for key, value in (
            ("guild_id", guild_id),
            ("event_id", event_id),
            ("target_category", target),
        )
        if value is not None
    }

    result = ImportResult()
    for entry in entries:
        user_id = user_by_name.get(entry.player_name.lower())
        if not user_id:
            result.skipped_players.append(entry.player_name)
            continue

        result.rows.append(
            {
                **context,
                "user_id": user_id,
                "class_played": None,
                "dps": entry.dps,
                "total_damage": entry.total_damage,
                "duration_seconds": entry.duration,
            }
        )

    if result.skipped:
        logger.warning(f"{result.skipped} player(s) not found in roster, scores ignored")
    logger.info(f"Prepared {result.imported} performance rows")
    return result


def rank_saved_performances(rows: Iterable[Mapping[str, Any]]) -> List[RankedEntry]:
    """
    Re-rank stored performance rows for display.

    Args:
        rows: Stored rows with dps, total_damage, duration_seconds and an
            optional player_name

    Returns:
        Entries sorted by DPS descending with ranks 1..N
    """
    ordered = sorted(rows, key=lambda row: row["dps"], reverse=True)
    return [
        RankedEntry(
            rank=index,
            player_name=row.get("player_name") or UNKNOWN_PLAYER,
            dps=row["dps"],
            total_damage=row["total_damage"],
            duration=row["duration_seconds"],
        )
        for index, row in enumerate(ordered, 1)
    ]
