"""
Wallet list helpers: parsing, file loading, validation and UTC day bounds.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterable

from volume_checker.volume_logging import get_logger

logger = get_logger(__name__)

EVM_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")
SECONDS_PER_DAY = 86_400


def parse_address_list(raw: str | None) -> list[str]:
    """Split a comma-separated list; items are trimmed and empties dropped."""
    return [s.strip() for s in (raw or "").split(",") if s.strip()]


def uniq_lower(items: Iterable[str]) -> list[str]:
    """Lowercase and dedupe, keeping first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        v = item.strip().lower()
        if v and v not in seen:
            seen.add(v)
            out.append(v)
    return out


def load_wallets_from_file(path: str | Path) -> list[str]:
    """One address per line; blank lines and # comments are skipped. Missing file -> []."""
    p = Path(path)
    if not p.is_file():
        logger.debug("wallet_file_missing", path=str(p))
        return []
    lines = p.read_text(encoding="utf-8").splitlines()
    wallets = [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]
    return uniq_lower(wallets)


def is_evm_address(address: str) -> bool:
    return bool(EVM_ADDRESS_RE.match(address.strip().lower()))


def filter_valid_addresses(addresses: Iterable[str]) -> list[str]:
    """Keep 0x-prefixed 40-hex-digit addresses; log and drop the rest."""
    out: list[str] = []
    for addr in addresses:
        if is_evm_address(addr):
            out.append(addr)
        else:
            logger.warning("wallet_address_invalid", wallet_id=addr)
    return out


def utc_day_bounds(day: str | date) -> tuple[int, int]:
    """
    Return (start, end) UTC seconds for one calendar day, both inclusive:
    00:00:00 through 23:59:59.
    """
    if isinstance(day, str):
        try:
            day = datetime.strptime(day.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise ValueError(f"date must be YYYY-MM-DD, got {day!r}") from None
    start = int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())
    return start, start + SECONDS_PER_DAY - 1


def today_utc() -> str:
    return datetime.now(timezone.utc).date().isoformat()
