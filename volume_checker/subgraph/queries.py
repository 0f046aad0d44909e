"""
GraphQL queries for swaps on a v3-style subgraph.

The three queries differ only in which address field is filtered. Results
are ordered by timestamp ascending and paged with first/skip.
"""

from __future__ import annotations

ROLE_ORIGIN = "origin"
ROLE_SENDER = "sender"
ROLE_RECIPIENT = "recipient"

ROLES = (ROLE_ORIGIN, ROLE_SENDER, ROLE_RECIPIENT)

_SWAPS_QUERY_TEMPLATE = """
query SwapsBy{name}($addresses: [Bytes!]!, $start: Int!, $end: Int!, $first: Int!, $skip: Int!) {{
  swaps(
    where: {{ {field}_in: $addresses, timestamp_gte: $start, timestamp_lte: $end }}
    orderBy: timestamp
    orderDirection: asc
    first: $first
    skip: $skip
  ) {{
    id
    timestamp
    amountUSD
    origin
    sender
    recipient
    pool {{ feeTier token0 {{ symbol id: address }} token1 {{ symbol id: address }} }}
  }}
}}
"""


def swaps_query(role: str) -> str:
    """Return the swaps query filtered on the given address field."""
    if role not in ROLES:
        raise ValueError(f"unknown swap role {role!r}; expected one of {ROLES}")
    return _SWAPS_QUERY_TEMPLATE.format(name=role.capitalize(), field=role)


SWAPS_BY_ORIGIN = swaps_query(ROLE_ORIGIN)
SWAPS_BY_SENDER = swaps_query(ROLE_SENDER)
SWAPS_BY_RECIPIENT = swaps_query(ROLE_RECIPIENT)

QUERIES_BY_ROLE = {
    ROLE_ORIGIN: SWAPS_BY_ORIGIN,
    ROLE_SENDER: SWAPS_BY_SENDER,
    ROLE_RECIPIENT: SWAPS_BY_RECIPIENT,
}
