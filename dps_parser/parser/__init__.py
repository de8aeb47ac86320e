"""
Combat log parser module for processing combat log exports.
"""

from .tokenizer import LineTokenizer
from .events import DamageLine, EventType
from .parser import DPSLogParser, parse_dps_log
from .timestamps import parse_log_timestamp

__all__ = [
    "LineTokenizer",
    "DamageLine",
    "EventType",
    "DPSLogParser",
    "parse_dps_log",
    "parse_log_timestamp",
]
