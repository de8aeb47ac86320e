"""
FastAPI server for combat log DPS parsing.

This package provides:
- Log upload and pasted-text parsing endpoints
- Roster import endpoint
- Health checks
"""

from .app import create_app, run_server

__all__ = ["create_app", "run_server"]
