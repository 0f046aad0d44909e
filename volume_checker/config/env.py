"""
Environment variable loading for Volume Checker.

- SUBGRAPH_URL: primary subgraph endpoint, tried first
- SUBGRAPH_FALLBACK_URLS: comma-separated extra endpoints, tried next
- WALLET_FILE: wallet list, one address per line (default: account.txt)
- REQUEST_TIMEOUT_SEC: per-request timeout in seconds (default: 30)
- MIN_VOLUME_USD: daily execution volume threshold (default: 10000)
- Loads .env from project root and the working directory when available.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is volume_checker/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

# PancakeSwap v3 on BSC (Messari-style schema); tried after any configured URL
DEFAULT_SUBGRAPH_URLS = (
    "https://api.thegraph.com/subgraphs/id/A1BC1hzDsK4NTeXBpKQnDBphngpYZAwDUF7dEBfa3jHK",
    "https://api.thegraph.com/subgraphs/id/78EUqzJmEVJsAKvWghn7qotf9LVGqcTQxJhT5z84ZmgJ",
)

DEFAULT_WALLET_FILE = "account.txt"
DEFAULT_REQUEST_TIMEOUT_SEC = 30.0
DEFAULT_MIN_VOLUME_USD = 10_000.0

_GATEWAY_KEY_RE = re.compile(r"(/api/)([^/]+)(/)")
_QUERY_KEY_RE = re.compile(r"(api[-_]?key=)[^&]+", re.IGNORECASE)


def load_env() -> None:
    """Load .env from project root, then from the working directory. Safe to call multiple times."""
    load_dotenv(_ENV_PATH)
    load_dotenv()


def _split_urls(raw: str | None) -> list[str]:
    return [u.strip() for u in (raw or "").split(",") if u.strip()]


def dedupe_endpoints(urls: list[str]) -> list[str]:
    """Strip, drop empties and repeats; priority order is kept."""
    seen: set[str] = set()
    out: list[str] = []
    for url in urls:
        u = (url or "").strip()
        if u and u not in seen:
            seen.add(u)
            out.append(u)
    return out


def get_subgraph_urls() -> list[str]:
    """
    Resolve the ordered endpoint list.
    Order: SUBGRAPH_URL > SUBGRAPH_FALLBACK_URLS > built-in defaults.
    """
    load_env()
    urls = _split_urls(os.getenv("SUBGRAPH_URL"))
    urls += _split_urls(os.getenv("SUBGRAPH_FALLBACK_URLS"))
    urls += list(DEFAULT_SUBGRAPH_URLS)
    return dedupe_endpoints(urls)


def get_wallet_file() -> Path:
    load_env()
    return Path((os.getenv("WALLET_FILE") or "").strip() or DEFAULT_WALLET_FILE)


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_request_timeout() -> float:
    load_env()
    return _float_env("REQUEST_TIMEOUT_SEC", DEFAULT_REQUEST_TIMEOUT_SEC)


def get_min_volume_usd() -> float:
    load_env()
    return _float_env("MIN_VOLUME_USD", DEFAULT_MIN_VOLUME_USD)


def mask_endpoint(url: str) -> str:
    """Hide API keys in gateway paths (/api/<key>/) and api-key query params."""
    masked = _GATEWAY_KEY_RE.sub(r"\1***\3", url)
    return _QUERY_KEY_RE.sub(r"\1***", masked)
