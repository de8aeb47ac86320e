"""
API routers package.

- dps: Log parsing and roster import endpoints
"""

from . import dps

__all__ = ["dps"]
