"""
Endpoint fallback for the three swap queries.

Endpoints are tried strictly in priority order. For each one, the by-origin,
by-sender and by-recipient queries must all run to completion; if any of them
fails, everything fetched from that endpoint is discarded and the next
endpoint is tried. The first endpoint to complete all three wins and no
further endpoints are contacted.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from threading import Event
from typing import Any, Iterable

import httpx

from volume_checker.config.env import mask_endpoint
from volume_checker.core.exceptions import (
    AllEndpointsFailed,
    EmptyAddressSet,
    EndpointExhausted,
    QueryCancelled,
    RequestFailure,
)
from volume_checker.subgraph.client import DEFAULT_TIMEOUT_SEC, SubgraphClient
from volume_checker.subgraph.models import AddressSet, SwapRecord
from volume_checker.subgraph.paginator import PAGE_SIZE, fetch_all
from volume_checker.subgraph.queries import (
    QUERIES_BY_ROLE,
    ROLE_ORIGIN,
    ROLE_RECIPIENT,
    ROLE_SENDER,
    ROLES,
)
from volume_checker.volume_logging import bind_endpoint, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Raw swap lists from the winning endpoint."""

    by_origin: list[SwapRecord]
    by_sender: list[SwapRecord]
    by_recipient: list[SwapRecord]
    endpoint: str

    @property
    def raw_count(self) -> int:
        return len(self.by_origin) + len(self.by_sender) + len(self.by_recipient)


def _fetch_or_stop(
    client: SubgraphClient,
    role: str,
    variables: dict[str, Any],
    page_size: int,
    stop: Event,
) -> list[SwapRecord]:
    try:
        return fetch_all(client, QUERIES_BY_ROLE[role], variables, page_size=page_size, stop=stop)
    except BaseException:
        stop.set()
        raise


def _run_queries(
    client: SubgraphClient,
    variables: dict[str, Any],
    page_size: int,
    parallel: bool,
) -> dict[str, list[SwapRecord]]:
    if not parallel:
        return {
            role: fetch_all(client, QUERIES_BY_ROLE[role], variables, page_size=page_size)
            for role in ROLES
        }

    # a failing query sets stop; the others give up before their next page
    stop = Event()
    results: dict[str, list[SwapRecord]] = {}
    errors: list[BaseException] = []
    with ThreadPoolExecutor(max_workers=len(ROLES)) as pool:
        futures = {
            pool.submit(_fetch_or_stop, client, role, variables, page_size, stop): role
            for role in ROLES
        }
        for future in as_completed(futures):
            try:
                results[futures[future]] = future.result()
            except BaseException as e:
                errors.append(e)
    if errors:
        raise next((e for e in errors if not isinstance(e, QueryCancelled)), errors[0])
    return results


def fetch_from_endpoint(
    url: str,
    addresses: AddressSet,
    start: int,
    end: int,
    *,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    page_size: int = PAGE_SIZE,
    parallel: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """
    Run all three queries against one endpoint.

    Raises EndpointExhausted if any query fails; partial results are dropped.
    """
    variables = {"addresses": addresses.as_list(), "start": int(start), "end": int(end)}
    try:
        client = SubgraphClient(url, timeout=timeout, transport=transport)
    except ValueError as e:
        raise EndpointExhausted(url, RequestFailure(url, f"invalid endpoint: {e}")) from e
    try:
        with client:
            results = _run_queries(client, variables, page_size, parallel)
    except RequestFailure as e:
        raise EndpointExhausted(url, e) from e
    return FetchResult(
        by_origin=results[ROLE_ORIGIN],
        by_sender=results[ROLE_SENDER],
        by_recipient=results[ROLE_RECIPIENT],
        endpoint=url,
    )


def fetch_with_fallbacks(
    endpoints: Iterable[str],
    addresses: AddressSet | Iterable[str],
    start: int,
    end: int,
    *,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    page_size: int = PAGE_SIZE,
    parallel: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """
    Return swaps for the addresses in [start, end] from the first endpoint
    that completes all three queries.

    Raises EmptyAddressSet before any request when no addresses are given,
    and AllEndpointsFailed (with every attempt's error) when no endpoint succeeds.
    """
    if not isinstance(addresses, AddressSet):
        addresses = AddressSet(addresses)
    if not addresses:
        raise EmptyAddressSet()
    if end < start:
        raise ValueError("end must be >= start")

    attempts: list[tuple[str, BaseException]] = []
    for url in endpoints:
        log = bind_endpoint(mask_endpoint(url), __name__)
        log.info("subgraph_endpoint_try", wallet_count=len(addresses))
        try:
            result = fetch_from_endpoint(
                url,
                addresses,
                start,
                end,
                timeout=timeout,
                page_size=page_size,
                parallel=parallel,
                transport=transport,
            )
        except EndpointExhausted as e:
            log.warning("subgraph_endpoint_failed", error=str(e.cause))
            attempts.append((url, e.cause))
            continue
        log.info(
            "subgraph_endpoint_ok",
            by_origin=len(result.by_origin),
            by_sender=len(result.by_sender),
            by_recipient=len(result.by_recipient),
        )
        return result

    logger.error("subgraph_all_endpoints_failed", attempts=len(attempts))
    raise AllEndpointsFailed(attempts)
