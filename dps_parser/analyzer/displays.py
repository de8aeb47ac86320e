"""
Display component builders for DPS leaderboards.
"""

from typing import List, Dict, Any, Optional
from rich.table import Table

from ..models.player import RankedEntry

# Podium styles by rank
RANK_STYLES = {
    1: "bold red",
    2: "bold dark_orange",
    3: "bold yellow",
}
DEFAULT_RANK_STYLE = "grey62"

NUMBER_UNITS = [(1_000_000_000, "B"), (1_000_000, "M"), (1_000, "k")]


def format_number(value: int) -> str:
    """Compact a large number: 1500 -> "1.5k", 2300000 -> "2.3M"."""
    for unit, suffix in NUMBER_UNITS:
        if value >= unit:
            # One decimal, rounded half up
            tenths = (value * 10 + unit // 2) // unit
            return f"{tenths // 10}.{tenths % 10}{suffix}"
    return str(value)


def format_dps(value: int) -> str:
    """Format DPS as thousands plus two digits: 12345 -> "12k34", 12000 -> "12k"."""
    if value < 1000:
        return str(value)
    thousands = value // 1000
    remainder = (value % 1000) // 10
    return f"{thousands}k{remainder}" if remainder > 0 else f"{thousands}k"


def rank_style(rank: int) -> str:
    return RANK_STYLES.get(rank, DEFAULT_RANK_STYLE)


class DisplayBuilder:
    """Builds rich display components for parse results."""

    @staticmethod
    def create_rankings_table(entries: List[RankedEntry], target: Optional[str] = None) -> Table:
        """Create the DPS leaderboard table."""
        title = f"DPS Rankings - {target}" if target else "DPS Rankings"
        table = Table(title=f"[bold]{title} ({len(entries)})[/bold]")
        table.add_column("#", width=4)
        table.add_column("Player", style="white", width=24)
        table.add_column("DPS", justify="right", style="green")
        table.add_column("Total Damage", justify="right", style="cyan")
        table.add_column("Duration", justify="right", style="dim")

        for entry in entries:
            table.add_row(
                f"[{rank_style(entry.rank)}]{entry.rank}[/]",
                entry.player_name,
                format_dps(entry.dps),
                format_number(entry.total_damage),
                f"{entry.duration}s",
            )

        return table

    @staticmethod
    def create_stats_table(stats: Dict[str, Any], processing_time: float) -> Table:
        """Create the parsing statistics table."""
        table = Table(title="Parsing Statistics", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Lines", f"{stats.get('lines_processed', 0):,}")
        table.add_row("Damage Lines", f"{stats.get('damage_lines', 0):,}")
        table.add_row("Players", str(stats.get("players", 0)))
        table.add_row("Processing Time", f"{processing_time:.2f}s")

        for reason, count in sorted(stats.get("skipped", {}).items()):
            table.add_row(f"Skipped ({reason})", f"{count:,}")

        return table
