"""
Parallel combat log processor for large log exports.
"""

import os
from collections import Counter
from pathlib import Path
from typing import List, Optional, Dict, Any
from concurrent.futures import ThreadPoolExecutor, as_completed
import logging

from ..parser.parser import DPSLogParser
from ..parser.tokenizer import split_lines
from ..analyzer.aggregator import DamageAggregator
from ..analyzer.metrics import MetricsCalculator
from ..models.player import RankedEntry

logger = logging.getLogger(__name__)


class ParallelLogProcessor:
    """
    Processes combat logs by folding line chunks on a thread pool.

    Lines are split into contiguous chunks, each chunk is aggregated by its
    own parser, and the partial aggregates are merged back in chunk order.
    Merging in order keeps first-seen player order, so the ranking matches
    the sequential parser exactly.
    """

    def __init__(self, max_workers: Optional[int] = None, chunk_size: int = 20000):
        """
        Initialize the parallel processor.

        Args:
            max_workers: Maximum number of worker threads (defaults to CPU count)
            chunk_size: Number of lines per chunk
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.max_workers = max_workers or os.cpu_count() or 1
        self.chunk_size = chunk_size
        self.stats: Dict[str, Any] = {}

    def process_text(self, content: str) -> List[RankedEntry]:
        """
        Parse raw log text using parallel aggregation.

        Args:
            content: Full text of a combat log export

        Returns:
            Ranked entries, highest DPS first
        """
        lines = split_lines(content)
        chunks = [lines[i : i + self.chunk_size] for i in range(0, len(lines), self.chunk_size)]
        logger.info(
            f"Starting parallel processing: {len(lines)} lines in {len(chunks)} chunks "
            f"({self.max_workers} threads)"
        )

        partials: List[Optional[DamageAggregator]] = [None] * len(chunks)
        parsers: List[Optional[DPSLogParser]] = [None] * len(chunks)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(self._process_chunk, chunk): index
                for index, chunk in enumerate(chunks)
            }

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                parsers[index], partials[index] = future.result()
                logger.debug(f"Chunk {index + 1}/{len(chunks)} aggregated")

        merged = DamageAggregator()
        for partial in partials:
            merged.merge(partial)

        entries = MetricsCalculator.get_dps_rankings(merged.get_aggregates())
        self.stats = self._combine_stats(parsers, len(entries))

        logger.info(
            f"Parallel processing completed: {self.stats['damage_lines']} damage lines, "
            f"{len(entries)} players"
        )
        return entries

    def process_file(self, log_path: Path) -> List[RankedEntry]:
        """
        Process a combat log file using parallel aggregation.

        Args:
            log_path: Path to the combat log file

        Returns:
            Ranked entries, highest DPS first
        """
        log_path = Path(log_path)
        if not log_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {log_path}")

        content = log_path.read_text(encoding="utf-8", errors="ignore")
        entries = self.process_text(content)
        self.stats["file"] = str(log_path)
        return entries

    @staticmethod
    def _process_chunk(lines: List[str]):
        parser = DPSLogParser()
        return parser, parser.aggregate_lines(lines)

    @staticmethod
    def _combine_stats(parsers: List[DPSLogParser], player_count: int) -> Dict[str, Any]:
        skipped: Counter = Counter()
        lines_processed = 0
        damage_lines = 0
        for parser in parsers:
            lines_processed += parser.tokenizer.line_count
            damage_lines += parser.tokenizer.damage_count
            skipped.update(parser.tokenizer.skipped)

        return {
            "file": None,
            "players": player_count,
            "lines_processed": lines_processed,
            "damage_lines": damage_lines,
            "skipped": dict(skipped),
        }

    def get_stats(self) -> Dict[str, Any]:
        return self.stats
