"""
Processing module for parallel combat log analysis.
"""

from .parallel_processor import ParallelLogProcessor
from .runner import ParseRun, run_parse

__all__ = ["ParallelLogProcessor", "ParseRun", "run_parse"]
