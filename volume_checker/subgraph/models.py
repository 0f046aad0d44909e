"""
Data models for subgraph swap results.

The subgraph returns loosely-typed JSON. SwapRecord.from_graph_item applies
the defaulting rules once at ingestion so the aggregator never touches raw
dicts:

- id is required and non-empty
- missing timestamp -> 0
- amountUSD goes through parse_usd(): missing or unparseable -> 0.0, with
  the reason kept in usd_status
- origin / sender / recipient are lowercased; missing -> ""
- missing token symbols -> "T0" / "T1"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

USD_OK = "ok"
USD_MISSING = "missing"
USD_INVALID = "invalid"

TOKEN0_PLACEHOLDER = "T0"
TOKEN1_PLACEHOLDER = "T1"


def parse_usd(raw: Any) -> tuple[float, str]:
    """
    Coerce a subgraph amountUSD value to float.

    Returns (value, status). status is USD_OK, USD_MISSING (None or blank)
    or USD_INVALID (unparseable, NaN, infinite, bool); value is 0.0 unless
    status is USD_OK.
    """
    if raw is None:
        return 0.0, USD_MISSING
    if isinstance(raw, bool):
        return 0.0, USD_INVALID
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0, USD_MISSING
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0, USD_INVALID
    if not math.isfinite(value):
        return 0.0, USD_INVALID
    return value, USD_OK


def _lower(value: Any) -> str:
    return str(value).strip().lower() if value else ""


def _symbol(token: Any, placeholder: str) -> str:
    if not isinstance(token, dict):
        return placeholder
    sym = token.get("symbol")
    if sym is None:
        return placeholder
    sym = str(sym).strip()
    return sym or placeholder


def _fee_tier(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class SwapRecord:
    """One swap event as returned by the swaps(...) query."""

    id: str
    timestamp: int
    amount_usd: float
    usd_status: str
    origin: str
    sender: str
    recipient: str
    fee_tier: int | None
    token0_symbol: str
    token1_symbol: str

    @property
    def pair(self) -> str:
        return f"{self.token0_symbol}/{self.token1_symbol}"

    @property
    def participants(self) -> frozenset[str]:
        """Distinct non-empty addresses among origin, sender and recipient."""
        return frozenset(a for a in (self.origin, self.sender, self.recipient) if a)

    @classmethod
    def from_graph_item(cls, item: dict[str, Any]) -> "SwapRecord":
        """Build from a single swaps[] item. Raises ValueError if the item has no usable id."""
        if not isinstance(item, dict):
            raise ValueError(f"swap item must be an object, got {type(item).__name__}")
        swap_id = str(item.get("id") or "").strip()
        if not swap_id:
            raise ValueError("swap item has no id")
        try:
            timestamp = int(item.get("timestamp") or 0)
        except (TypeError, ValueError):
            raise ValueError(f"swap {swap_id} has invalid timestamp {item.get('timestamp')!r}") from None
        amount_usd, usd_status = parse_usd(item.get("amountUSD"))
        pool = item.get("pool") if isinstance(item.get("pool"), dict) else {}
        return cls(
            id=swap_id,
            timestamp=timestamp,
            amount_usd=amount_usd,
            usd_status=usd_status,
            origin=_lower(item.get("origin")),
            sender=_lower(item.get("sender")),
            recipient=_lower(item.get("recipient")),
            fee_tier=_fee_tier(pool.get("feeTier")),
            token0_symbol=_symbol(pool.get("token0"), TOKEN0_PLACEHOLDER),
            token1_symbol=_symbol(pool.get("token1"), TOKEN1_PLACEHOLDER),
        )


class AddressSet:
    """
    Immutable, order-preserving set of lowercased wallet addresses.

    Membership is case-insensitive so role matching never depends on how a
    subgraph or a wallet file spells the hex digits.
    """

    __slots__ = ("_order", "_members")

    def __init__(self, addresses: Iterable[str] = ()) -> None:
        order: list[str] = []
        members: set[str] = set()
        for addr in addresses:
            a = _lower(addr)
            if a and a not in members:
                members.add(a)
                order.append(a)
        self._order = tuple(order)
        self._members = frozenset(members)

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, str):
            return False
        return address.strip().lower() in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __bool__(self) -> bool:
        return bool(self._order)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AddressSet):
            return self._order == other._order
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._order)

    def __repr__(self) -> str:
        return f"AddressSet({list(self._order)!r})"

    def as_list(self) -> list[str]:
        return list(self._order)
