"""
Daily volume check: fetch swaps with endpoint fallback, aggregate, and
evaluate the threshold against execution volume.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

import httpx

from volume_checker.analytics.aggregator import AggregationResult, WalletMetrics, aggregate
from volume_checker.core.exceptions import EmptyAddressSet
from volume_checker.subgraph.client import DEFAULT_TIMEOUT_SEC
from volume_checker.subgraph.fetcher import fetch_with_fallbacks
from volume_checker.subgraph.models import AddressSet
from volume_checker.subgraph.paginator import PAGE_SIZE
from volume_checker.volume_logging import get_logger
from volume_checker.wallets import utc_day_bounds

logger = get_logger(__name__)


@dataclass(frozen=True)
class VolumeReport:
    day: str
    start: int
    end: int
    threshold: float
    endpoint: str
    addresses: tuple[str, ...]
    metrics: dict[str, WalletMetrics]
    total_swaps: int
    duplicates: int = 0
    non_ok_usd: int = 0

    def passes(self, address: str) -> bool:
        """True if the wallet's execution volume meets the threshold."""
        m = self.metrics[address.strip().lower()]
        return m.volume_execution_usd >= self.threshold

    def ordered_metrics(self) -> list[WalletMetrics]:
        """Metrics in the caller's address order."""
        return [self.metrics[a] for a in self.addresses]

    @property
    def passing(self) -> list[str]:
        return [a for a in self.addresses if self.passes(a)]


def run_volume_check(
    addresses: Iterable[str],
    day: str | date,
    endpoints: Iterable[str],
    *,
    threshold: float,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    page_size: int = PAGE_SIZE,
    parallel: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> VolumeReport:
    """
    Fetch and aggregate one UTC day of swaps for the given wallets.

    Raises EmptyAddressSet before any network call when addresses is empty,
    and AllEndpointsFailed when no endpoint completes all queries.
    """
    address_set = AddressSet(addresses)
    if not address_set:
        raise EmptyAddressSet()
    start, end = utc_day_bounds(day)
    day_str = day if isinstance(day, str) else day.isoformat()

    fetched = fetch_with_fallbacks(
        list(endpoints),
        address_set,
        start,
        end,
        timeout=timeout,
        page_size=page_size,
        parallel=parallel,
        transport=transport,
    )
    result: AggregationResult = aggregate(
        address_set, fetched.by_origin, fetched.by_sender, fetched.by_recipient
    )
    report = VolumeReport(
        day=day_str.strip(),
        start=start,
        end=end,
        threshold=float(threshold),
        endpoint=fetched.endpoint,
        addresses=tuple(address_set),
        metrics=result.metrics,
        total_swaps=result.total_swaps,
        duplicates=result.duplicates,
        non_ok_usd=result.non_ok_usd,
    )
    logger.info(
        "volume_check_complete",
        day=report.day,
        wallets=len(report.addresses),
        passing=len(report.passing),
        total_swaps=report.total_swaps,
    )
    return report
