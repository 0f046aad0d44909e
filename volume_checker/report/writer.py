"""
Report rows, console table and CSV output for a VolumeReport.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

from volume_checker.analytics.aggregator import human_usd
from volume_checker.engine import VolumeReport

CSV_FIELDS = [
    "wallet",
    "swaps_execution",
    "volume_execution_usd",
    "swaps_involved",
    "volume_involved_usd",
    "pass",
    "top_pairs",
]

PASS_MARK = "✅"
FAIL_MARK = "❌"

_TABLE_COLUMNS = ("wallet", "swaps_exec", "vol_exec", "pass", "top_pairs")


def build_rows(report: VolumeReport) -> list[dict[str, Any]]:
    """One CSV row per requested wallet, in the caller's address order."""
    rows: list[dict[str, Any]] = []
    for m in report.ordered_metrics():
        rows.append({
            "wallet": m.address,
            "swaps_execution": m.swaps_execution,
            "volume_execution_usd": f"{m.volume_execution_usd:.2f}",
            "swaps_involved": m.swaps_involved,
            "volume_involved_usd": f"{m.volume_involved_usd:.2f}",
            "pass": PASS_MARK if report.passes(m.address) else FAIL_MARK,
            "top_pairs": "; ".join(m.top_pairs),
        })
    return rows


def csv_filename(day: str) -> str:
    return f"volume-{day}.csv"


def write_csv(path: str | Path, rows: list[dict[str, Any]]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)
    return p


def render_table(rows: list[dict[str, Any]]) -> str:
    """Plain text table: wallet, swaps_exec, vol_exec, pass, top_pairs."""
    cells = [
        (
            str(r["wallet"]),
            str(r["swaps_execution"]),
            human_usd(float(r["volume_execution_usd"])),
            str(r["pass"]),
            str(r["top_pairs"]),
        )
        for r in rows
    ]
    widths = [len(c) for c in _TABLE_COLUMNS]
    for row in cells:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def _line(values: tuple[str, ...]) -> str:
        return " | ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    out = [_line(_TABLE_COLUMNS), "-+-".join("-" * w for w in widths)]
    out.extend(_line(row) for row in cells)
    return "\n".join(out)
