"""
Daily DEX volume check for a list of wallets.

How to run:
    From project root (with .env configured):
        python -m volume_checker.cli --date 2024-05-01 --min 10000
        python main.py --addresses 0xabc...,0xdef... --parallel

Env vars:
    SUBGRAPH_URL, SUBGRAPH_FALLBACK_URLS  (endpoints; built-in defaults are tried last)
    WALLET_FILE                           (default: account.txt)
    REQUEST_TIMEOUT_SEC, MIN_VOLUME_USD

Output CSV (volume-<date>.csv):
    wallet, swaps_execution, volume_execution_usd, swaps_involved,
    volume_involved_usd, pass, top_pairs
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from volume_checker.analytics.aggregator import human_usd
from volume_checker.config.env import (
    dedupe_endpoints,
    get_min_volume_usd,
    get_request_timeout,
    get_subgraph_urls,
    get_wallet_file,
    load_env,
    mask_endpoint,
)
from volume_checker.core.exceptions import VolumeCheckerError
from volume_checker.engine import run_volume_check
from volume_checker.report.writer import build_rows, csv_filename, render_table, write_csv
from volume_checker.volume_logging import get_logger
from volume_checker.wallets import (
    filter_valid_addresses,
    load_wallets_from_file,
    parse_address_list,
    today_utc,
    uniq_lower,
    utc_day_bounds,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Check daily DEX swap volume per wallet (UTC day)")
    ap.add_argument("--date", type=str, default=None, help="UTC day YYYY-MM-DD (default: today)")
    ap.add_argument("--min", type=float, default=None, dest="threshold", help="Execution volume threshold in USD")
    ap.add_argument("--addresses", type=str, default="", help="Comma-separated wallet addresses")
    ap.add_argument("--wallet-file", type=str, default=None, help="File with one address per line")
    ap.add_argument(
        "--endpoint",
        action="append",
        default=None,
        help="Subgraph URL; repeat for fallbacks (overrides env/defaults)",
    )
    ap.add_argument("--out-dir", type=str, default=".", help="Directory for the CSV report")
    ap.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    ap.add_argument("--parallel", action="store_true", help="Run the three queries per endpoint concurrently")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_env()
    args = build_parser().parse_args(argv)

    day = (args.date or today_utc()).strip()
    try:
        start, end = utc_day_bounds(day)
        threshold = args.threshold if args.threshold is not None else get_min_volume_usd()
        timeout = args.timeout if args.timeout is not None else get_request_timeout()
    except ValueError as e:
        print(f"[volume] ERROR: {e}", file=sys.stderr)
        return 1

    wallet_file = Path(args.wallet_file) if args.wallet_file else get_wallet_file()
    addresses = uniq_lower(parse_address_list(args.addresses) + load_wallets_from_file(wallet_file))
    addresses = filter_valid_addresses(addresses)
    if not addresses:
        print(
            f"[volume] ERROR: no addresses. Fill {wallet_file} or pass --addresses=0xabc,0xdef",
            file=sys.stderr,
        )
        return 1

    endpoints = dedupe_endpoints(args.endpoint) if args.endpoint else get_subgraph_urls()

    print("=== DEX v3 Volume Checker ===")
    print(f"Date (UTC): {day} | Range: {start}..{end}")
    print(f"Wallets: {len(addresses)} | Threshold: {human_usd(threshold)}\n")

    try:
        report = run_volume_check(
            addresses,
            day,
            endpoints,
            threshold=threshold,
            timeout=timeout,
            parallel=args.parallel,
        )
    except VolumeCheckerError as e:
        logger.error("volume_check_failed", error=str(e))
        print(f"[volume] fetch/aggregate failed: {e}", file=sys.stderr)
        return 1

    print(f"Subgraph endpoint: {mask_endpoint(report.endpoint)}\n")
    rows = build_rows(report)
    print(render_table(rows))

    out_path = write_csv(Path(args.out_dir) / csv_filename(report.day), rows)
    print(f"\nSaved: {out_path}")
    print(f"Total swaps (deduped across queries): {report.total_swaps}")
    if report.non_ok_usd:
        print(f"Swaps with missing/unparseable amountUSD (counted as $0): {report.non_ok_usd}")
    print('\nNote: use the "volume_execution_usd" column for the daily per-wallet check (by origin).')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
