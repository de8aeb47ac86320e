"""
Aggregation, ranking and presentation helpers for parsed combat logs.
"""

from .aggregator import DamageAggregator
from .metrics import MetricsCalculator, divide_half_up

__all__ = ["DamageAggregator", "MetricsCalculator", "divide_half_up"]
