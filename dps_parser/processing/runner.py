"""
Parse runner shared by the CLI and the API.

Picks the sequential parser or the parallel processor depending on log size
and detects the log's target.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..analyzer.targets import detect_target
from ..config.settings import ParserSettings
from ..models.player import RankedEntry
from ..parser.parser import DPSLogParser
from .parallel_processor import ParallelLogProcessor

logger = logging.getLogger(__name__)


@dataclass
class ParseRun:
    """Result of parsing one log."""

    entries: List[RankedEntry]
    target: Optional[str] = None
    parallel: bool = False
    stats: Dict[str, Any] = field(default_factory=dict)


def run_parse(
    content: str,
    parser_settings: Optional[ParserSettings] = None,
    no_parallel: bool = False,
    max_workers: Optional[int] = None,
) -> ParseRun:
    """
    Parse log text into rankings, using parallel aggregation for large logs.

    Args:
        content: Full text of a combat log export
        parser_settings: Size threshold, worker and chunk settings
        no_parallel: Force the sequential parser
        max_workers: Override the configured worker count

    Returns:
        ParseRun with entries, detected target and statistics
    """
    parser_settings = parser_settings or ParserSettings()
    workers = max_workers or parser_settings.max_workers
    line_count = content.count("\n") + 1

    use_parallel = (
        not no_parallel
        and workers > 1
        and line_count > parser_settings.parallel_threshold
    )

    if use_parallel:
        processor = ParallelLogProcessor(max_workers=workers, chunk_size=parser_settings.chunk_size)
        entries = processor.process_text(content)
        stats = processor.get_stats()
    else:
        parser = DPSLogParser()
        entries = parser.parse_text(content)
        stats = parser.get_stats()

    target = detect_target(content)
    if target:
        logger.info(f"Detected target: {target}")

    return ParseRun(entries=entries, target=target, parallel=use_parallel, stats=stats)
