"""
Guild DPS Parser

Parses combat logs exported by the game client and turns them into a ranked
DPS leaderboard for guild raid tracking.
"""

from .parser.parser import DPSLogParser, parse_dps_log
from .models.player import PlayerAggregate, RankedEntry

__version__ = "0.1.0"
__author__ = "Guild DPS Parser Team"

__all__ = ["DPSLogParser", "parse_dps_log", "PlayerAggregate", "RankedEntry"]
