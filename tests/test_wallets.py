"""
Tests for wallet list parsing, file loading and UTC day bounds.
"""

from __future__ import annotations

from datetime import date

import pytest

from _subgraph_helpers import DAY, DAY_END, DAY_START, WALLET_A, WALLET_B
from volume_checker.wallets import (
    filter_valid_addresses,
    is_evm_address,
    load_wallets_from_file,
    parse_address_list,
    uniq_lower,
    utc_day_bounds,
)


def test_parse_address_list():
    assert parse_address_list(" 0xA, 0xb ,,") == ["0xA", "0xb"]
    assert parse_address_list("") == []
    assert parse_address_list(None) == []


def test_uniq_lower_keeps_first_seen_order():
    assert uniq_lower(["0xB", "0xa", "0xb", " 0xA ", ""]) == ["0xb", "0xa"]


def test_load_wallets_from_file(tmp_path):
    path = tmp_path / "account.txt"
    path.write_text(f"# daily list\n{WALLET_A.upper().replace('0X', '0x')}\r\n\n  {WALLET_B}  \n{WALLET_A}\n", encoding="utf-8")
    assert load_wallets_from_file(path) == [WALLET_A, WALLET_B]


def test_load_wallets_missing_file(tmp_path):
    assert load_wallets_from_file(tmp_path / "nope.txt") == []


def test_filter_valid_addresses():
    assert is_evm_address(WALLET_A)
    assert not is_evm_address("0xabc")
    assert filter_valid_addresses([WALLET_A, "0xabc", "hello", WALLET_B]) == [WALLET_A, WALLET_B]


def test_utc_day_bounds():
    assert utc_day_bounds(DAY) == (DAY_START, DAY_END)
    assert utc_day_bounds(date(2024, 5, 1)) == (DAY_START, DAY_END)
    start, end = utc_day_bounds("1970-01-01")
    assert (start, end) == (0, 86399)


@pytest.mark.parametrize("bad", ["2024-13-01", "01/05/2024", "yesterday", ""])
def test_utc_day_bounds_rejects_bad_dates(bad):
    with pytest.raises(ValueError):
        utc_day_bounds(bad)
