"""
Subgraph access: swap record schema, GraphQL client, pagination and
endpoint fallback.
"""

from volume_checker.subgraph.client import SubgraphClient
from volume_checker.subgraph.fetcher import FetchResult, fetch_from_endpoint, fetch_with_fallbacks
from volume_checker.subgraph.models import AddressSet, SwapRecord, parse_usd
from volume_checker.subgraph.paginator import PAGE_SIZE, fetch_all

__all__ = [
    "AddressSet",
    "FetchResult",
    "PAGE_SIZE",
    "SubgraphClient",
    "SwapRecord",
    "fetch_all",
    "fetch_from_endpoint",
    "fetch_with_fallbacks",
    "parse_usd",
]
