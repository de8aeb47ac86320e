"""
Main combat log parser that coordinates tokenization, aggregation and ranking.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Dict, Any, Optional
import logging

from .tokenizer import LineTokenizer, split_lines
from .events import DamageLine
from ..analyzer.aggregator import DamageAggregator
from ..analyzer.metrics import MetricsCalculator
from ..models.player import RankedEntry


logger = logging.getLogger(__name__)


class DPSLogParser:
    """
    Parser for combat log exports.

    Every call starts from fresh aggregation state; only the statistics of
    the last run are kept on the instance.
    """

    def __init__(self):
        self.tokenizer = LineTokenizer()
        self.current_file: Optional[Path] = None
        self.player_count = 0

    def parse_text(self, content: str) -> List[RankedEntry]:
        """
        Parse raw log text into a ranked DPS leaderboard.

        Malformed lines are skipped; a log with no usable DamageDone lines
        gives an empty list.

        Args:
            content: Full text of a combat log export

        Returns:
            Ranked entries, highest DPS first
        """
        self.reset()
        return self._rank(self.iter_damage_lines(split_lines(content)))

    def parse_file(self, file_path: str) -> List[RankedEntry]:
        """
        Parse a combat log file.

        Args:
            file_path: Path to the combat log file

        Returns:
            Ranked entries, highest DPS first
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        logger.info(f"Starting parse of {file_path.name} ({file_path.stat().st_size / 1024:.1f} KB)")

        content = file_path.read_text(encoding="utf-8", errors="ignore")
        entries = self.parse_text(content)
        self.current_file = file_path
        return entries

    def iter_damage_lines(self, lines: Iterable[str]) -> Iterator[DamageLine]:
        """
        Yield the damage records found in a sequence of raw lines.

        Args:
            lines: Raw combat log lines

        Yields:
            DamageLine for each usable line
        """
        for line in lines:
            record = self.tokenizer.parse_line(line)
            if record is not None:
                yield record

    def aggregate_lines(self, lines: Iterable[str]) -> DamageAggregator:
        """Fold raw lines into a per-player aggregator."""
        aggregator = DamageAggregator()
        aggregator.process_lines(self.iter_damage_lines(lines))
        return aggregator

    def _rank(self, records: Iterable[DamageLine]) -> List[RankedEntry]:
        aggregator = DamageAggregator()
        aggregator.process_lines(records)
        entries = MetricsCalculator.get_dps_rankings(aggregator.get_aggregates())
        self.player_count = len(entries)

        stats = self.tokenizer.get_stats()
        logger.info(
            f"Parsed {stats['lines_processed']} lines: "
            f"{stats['damage_lines']} damage lines, {self.player_count} players"
        )
        for reason, count in stats["skipped"].items():
            logger.debug(f"Skipped {count} lines ({reason})")

        return entries

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "players": self.player_count,
            **self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for new content."""
        self.tokenizer = LineTokenizer()
        self.current_file = None
        self.player_count = 0


def parse_dps_log(content: str) -> List[RankedEntry]:
    """
    Parse combat log text into ranked DPS entries.

    Args:
        content: Full text of a combat log export

    Returns:
        Ranked entries, highest DPS first (empty if nothing parsed)
    """
    return DPSLogParser().parse_text(content)
