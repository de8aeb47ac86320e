"""
Data models for combat log DPS analysis.
"""

from .player import PlayerAggregate, RankedEntry

__all__ = [
    "PlayerAggregate",
    "RankedEntry",
]
