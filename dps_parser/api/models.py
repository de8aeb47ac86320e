"""
Pydantic models for the DPS API.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RankedEntryModel(BaseModel):
    """One leaderboard row."""

    rank: int = Field(..., ge=1, description="1-based position, highest DPS first")
    player_name: str = Field(..., description="In-game player name")
    dps: int = Field(..., description="Damage per second, rounded")
    total_damage: int = Field(..., description="Total damage dealt")
    duration: int = Field(..., ge=0, description="Damage window in whole seconds")


class ParseTextRequest(BaseModel):
    """Raw log text pasted by the user."""

    content: str = Field(..., description="Full combat log text")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "CombatLogVersion,4\n"
                "20250101-10:00:00:000,DamageDone,Skill,1,1500,0,0,0,PlayerA,Mannequin",
            }
        }
    )


class ParseResponse(BaseModel):
    """Parsed leaderboard for one log."""

    file_name: Optional[str] = None
    target: Optional[str] = Field(None, description="Detected target, if any")
    entries: List[RankedEntryModel] = Field(default_factory=list)
    stats: Dict[str, Any] = Field(default_factory=dict)


class ImportRequest(BaseModel):
    """Ranked entries to match against the guild roster."""

    entries: List[RankedEntryModel]
    profiles: Dict[str, str] = Field(..., description="In-game name -> user id")
    guild_id: Optional[str] = None
    event_id: Optional[str] = None
    target: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "entries": [
                    {"rank": 1, "player_name": "PlayerA", "dps": 1500, "total_damage": 15000, "duration": 10}
                ],
                "profiles": {"PlayerA": "user-123"},
                "guild_id": "guild-1",
                "target": "Mannequin",
            }
        }
    )


class ImportResponse(BaseModel):
    """Performance rows for matched players."""

    rows: List[Dict[str, Any]]
    imported: int
    skipped: int
    skipped_players: List[str]
