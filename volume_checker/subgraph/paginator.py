"""
Offset pagination over one swaps query on one endpoint.

Pages are requested with first=page_size and skip=0, page_size, 2*page_size...
until a page comes back shorter than page_size. A result that is an exact
multiple of page_size therefore costs one extra, empty request. Any request
error aborts the whole query; no partial list is returned. An optional stop
event is checked before every page so a caller can abandon the query early.
"""

from __future__ import annotations

from threading import Event
from typing import Any

from volume_checker.core.exceptions import QueryCancelled, RequestFailure
from volume_checker.subgraph.client import SubgraphClient
from volume_checker.subgraph.models import SwapRecord
from volume_checker.volume_logging import get_logger

logger = get_logger(__name__)

PAGE_SIZE = 1000


def _parse_page(client: SubgraphClient, data: dict[str, Any], skip: int) -> list[SwapRecord]:
    rows = data.get("swaps")
    if not isinstance(rows, list):
        raise RequestFailure(client.url, f"response has no swaps list (skip={skip})")
    try:
        return [SwapRecord.from_graph_item(row) for row in rows]
    except ValueError as e:
        raise RequestFailure(client.url, f"malformed swap at skip={skip}: {e}") from e


def fetch_all(
    client: SubgraphClient,
    query: str,
    variables: dict[str, Any],
    *,
    page_size: int = PAGE_SIZE,
    stop: Event | None = None,
) -> list[SwapRecord]:
    """
    Run one query to exhaustion and return every record in source order.

    variables holds the base filter (addresses, start, end); first/skip are
    added per page. Raises RequestFailure on the first failed page, and
    QueryCancelled if stop is set before the next page is requested.
    """
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    out: list[SwapRecord] = []
    skip = 0
    pages = 0
    while True:
        if stop is not None and stop.is_set():
            logger.debug("subgraph_query_cancelled", skip=skip, total=len(out))
            raise QueryCancelled(client.url)
        data = client.request(query, {**variables, "first": page_size, "skip": skip})
        rows = _parse_page(client, data, skip)
        pages += 1
        out.extend(rows)
        logger.debug("subgraph_page_fetched", skip=skip, rows=len(rows), total=len(out))
        if len(rows) < page_size:
            break
        skip += page_size
    logger.debug("subgraph_query_complete", pages=pages, total=len(out))
    return out
