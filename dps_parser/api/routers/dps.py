"""
DPS log parsing and import API endpoints.

Provides endpoints for parsing uploaded or pasted combat logs into
leaderboards and for turning leaderboards into roster performance rows.
"""

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from ...analyzer.roster import build_performance_rows
from ...config.settings import ApplicationSettings, get_settings
from ...models.player import RankedEntry
from ...processing.runner import run_parse
from ..models import ImportRequest, ImportResponse, ParseResponse, ParseTextRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dps")


def get_app_settings(request: Request) -> ApplicationSettings:
    """Settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def _parse_response(content: str, settings: ApplicationSettings, file_name=None) -> ParseResponse:
    # Parsing is CPU bound; keep it off the event loop
    run = await asyncio.get_event_loop().run_in_executor(
        None, partial(run_parse, content, settings.parser)
    )
    return ParseResponse(
        file_name=file_name,
        target=run.target,
        entries=[entry.to_dict() for entry in run.entries],
        stats={**run.stats, "parallel": run.parallel},
    )


@router.post("/parse", response_model=ParseResponse)
async def parse_log_file(
    file: UploadFile = File(...),
    settings: ApplicationSettings = Depends(get_app_settings),
) -> ParseResponse:
    """
    Parse an uploaded combat log file.

    Args:
        file: Combat log export (.txt, .csv or .log)

    Returns:
        Leaderboard, detected target and parse statistics
    """
    file_name = file.filename or ""
    if not settings.upload.is_allowed(file_name):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type. Allowed: {', '.join(settings.upload.allowed_extensions)}",
        )

    data = await file.read()
    if len(data) > settings.upload.max_file_size:
        raise HTTPException(
            status_code=413,
            detail=f"File too large ({len(data)} bytes, max {settings.upload.max_file_size})",
        )

    logger.info(f"Parsing uploaded log {file_name} ({len(data)} bytes)")
    return await _parse_response(data.decode("utf-8", errors="ignore"), settings, file_name=file_name)


@router.post("/parse-text", response_model=ParseResponse)
async def parse_log_text(
    request: ParseTextRequest,
    settings: ApplicationSettings = Depends(get_app_settings),
) -> ParseResponse:
    """Parse pasted combat log text."""
    if len(request.content.encode("utf-8")) > settings.upload.max_file_size:
        raise HTTPException(status_code=413, detail="Log content too large")

    return await _parse_response(request.content, settings)


@router.post("/import", response_model=ImportResponse)
async def import_rankings(request: ImportRequest) -> ImportResponse:
    """
    Match a leaderboard against the guild roster.

    Entries whose player is not in `profiles` are skipped and reported.
    """
    entries = [RankedEntry(**entry.model_dump()) for entry in request.entries]
    result = build_performance_rows(
        entries,
        request.profiles,
        guild_id=request.guild_id,
        event_id=request.event_id,
        target=request.target,
    )
    return ImportResponse(
        rows=result.rows,
        imported=result.imported,
        skipped=result.skipped,
        skipped_players=result.skipped_players,
    )
