"""
Volume analytics: swap deduplication and per-wallet metrics.
"""

from volume_checker.analytics.aggregator import (
    AggregationResult,
    WalletMetrics,
    aggregate,
    human_usd,
    merge_swaps,
)

__all__ = [
    "AggregationResult",
    "WalletMetrics",
    "aggregate",
    "human_usd",
    "merge_swaps",
]
