"""
Deduplicating aggregation of swap results into per-wallet volume metrics.

The by-origin, by-sender and by-recipient result sets overlap, so records are
merged by swap id first and every metric is computed from the merged set:

- execution: attributed only to the swap's origin
- involvement: attributed to each distinct address among origin, sender and
  recipient, once per swap even when one address fills several roles
- top pairs: execution volume per "TOKEN0/TOKEN1", top 5 descending

Amounts that were missing or unparseable at ingestion count as 0 and are
reported in AggregationResult.non_ok_usd.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable

from volume_checker.subgraph.models import USD_OK, AddressSet, SwapRecord
from volume_checker.volume_logging import get_logger

logger = get_logger(__name__)

TOP_PAIRS_LIMIT = 5


def human_usd(x: float) -> str:
    """Format like en-US currency with two decimals: 6001 -> "$6,001.00"."""
    sign = "-" if x < 0 else ""
    return f"{sign}${abs(x):,.2f}"


@dataclass(frozen=True)
class WalletMetrics:
    """Finalized volume metrics for one wallet."""

    address: str
    swaps_execution: int = 0
    volume_execution_usd: float = 0.0
    swaps_involved: int = 0
    volume_involved_usd: float = 0.0
    top_pairs: tuple[str, ...] = ()


@dataclass
class _Accumulator:
    address: str
    swaps_execution: int = 0
    volume_execution_usd: float = 0.0
    swaps_involved: int = 0
    volume_involved_usd: float = 0.0
    pair_volume: dict[str, float] = field(default_factory=lambda: defaultdict(float))

    def finalize(self, top_n: int) -> WalletMetrics:
        ranked = sorted(self.pair_volume.items(), key=lambda kv: kv[1], reverse=True)[:top_n]
        return WalletMetrics(
            address=self.address,
            swaps_execution=self.swaps_execution,
            volume_execution_usd=self.volume_execution_usd,
            swaps_involved=self.swaps_involved,
            volume_involved_usd=self.volume_involved_usd,
            top_pairs=tuple(f"{pair} ({human_usd(usd)})" for pair, usd in ranked),
        )


@dataclass(frozen=True)
class AggregationResult:
    metrics: dict[str, WalletMetrics]
    total_swaps: int
    duplicates: int = 0
    non_ok_usd: int = 0


def merge_swaps(*record_lists: Iterable[SwapRecord]) -> dict[str, SwapRecord]:
    """Merge result lists by swap id; the first copy seen is kept."""
    merged: dict[str, SwapRecord] = {}
    for records in record_lists:
        for rec in records:
            merged.setdefault(rec.id, rec)
    return merged


def aggregate(
    addresses: AddressSet | Iterable[str],
    by_origin: Iterable[SwapRecord],
    by_sender: Iterable[SwapRecord],
    by_recipient: Iterable[SwapRecord],
    *,
    top_n: int = TOP_PAIRS_LIMIT,
) -> AggregationResult:
    """
    Compute metrics for every requested address from the three raw lists.

    Every requested address gets an entry, zero-valued if no swap matched.
    The result does not depend on the order of the three lists beyond
    float summation order.
    """
    if not isinstance(addresses, AddressSet):
        addresses = AddressSet(addresses)
    by_origin, by_sender, by_recipient = list(by_origin), list(by_sender), list(by_recipient)
    merged = merge_swaps(by_origin, by_sender, by_recipient)
    raw_count = len(by_origin) + len(by_sender) + len(by_recipient)

    acc = {addr: _Accumulator(address=addr) for addr in addresses}
    non_ok_usd = 0

    for swap in merged.values():
        usd = swap.amount_usd
        if swap.usd_status != USD_OK:
            non_ok_usd += 1

        executor = acc.get(swap.origin)
        if executor is not None:
            executor.swaps_execution += 1
            executor.volume_execution_usd += usd
            executor.pair_volume[swap.pair] += usd

        for addr in swap.participants:
            involved = acc.get(addr)
            if involved is not None:
                involved.swaps_involved += 1
                involved.volume_involved_usd += usd

    if non_ok_usd:
        logger.warning("aggregate_usd_defaulted_to_zero", swaps=non_ok_usd)
    logger.info(
        "aggregate_complete",
        wallets=len(acc),
        unique_swaps=len(merged),
        duplicates=raw_count - len(merged),
    )
    return AggregationResult(
        metrics={addr: a.finalize(top_n) for addr, a in acc.items()},
        total_swaps=len(merged),
        duplicates=raw_count - len(merged),
        non_ok_usd=non_ok_usd,
    )
