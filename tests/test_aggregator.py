"""
Tests for deduplicated aggregation: execution vs involvement attribution,
top pairs, and the reference end-to-end scenario.
"""

from __future__ import annotations

import itertools

from _subgraph_helpers import OTHER, WALLET_A, WALLET_B, make_swap
from volume_checker.analytics.aggregator import aggregate, human_usd, merge_swaps
from volume_checker.subgraph.models import SwapRecord


def rec(swap_id: str, **kwargs) -> SwapRecord:
    return SwapRecord.from_graph_item(make_swap(swap_id, **kwargs))


def test_every_requested_address_gets_zero_entry():
    result = aggregate([WALLET_A, WALLET_B.upper().replace("0X", "0x")], [], [], [])
    assert set(result.metrics) == {WALLET_A, WALLET_B}
    m = result.metrics[WALLET_B]
    assert (m.swaps_execution, m.volume_execution_usd, m.swaps_involved, m.volume_involved_usd) == (0, 0.0, 0, 0.0)
    assert m.top_pairs == ()
    assert result.total_swaps == 0


def test_merge_keeps_first_copy():
    first = rec("dup", amount="10")
    second = rec("dup", amount="99")
    merged = merge_swaps([first], [second], [rec("other")])
    assert list(merged) == ["dup", "other"]
    assert merged["dup"] is first


def test_dedup_across_all_three_lists():
    swap = rec("x", origin=WALLET_A, sender=WALLET_A, recipient=WALLET_A, amount="250")
    result = aggregate([WALLET_A], [swap], [swap], [swap])
    m = result.metrics[WALLET_A]
    assert m.swaps_involved == 1
    assert m.volume_involved_usd == 250.0
    assert m.swaps_execution == 1
    assert m.volume_execution_usd == 250.0
    assert result.total_swaps == 1
    assert result.duplicates == 2


def test_execution_requires_origin():
    swap = rec("x", origin=OTHER, sender=WALLET_A, recipient=WALLET_B, amount="500")
    result = aggregate([WALLET_A, WALLET_B], [], [swap], [swap])
    for addr in (WALLET_A, WALLET_B):
        m = result.metrics[addr]
        assert m.swaps_execution == 0
        assert m.volume_execution_usd == 0.0
        assert m.top_pairs == ()
        assert m.swaps_involved == 1
        assert m.volume_involved_usd == 500.0


def test_involvement_counts_once_for_multiple_roles():
    swap = rec("x", origin=OTHER, sender=WALLET_A, recipient=WALLET_A, amount="70")
    m = aggregate([WALLET_A], [], [swap], [swap]).metrics[WALLET_A]
    assert m.swaps_involved == 1
    assert m.volume_involved_usd == 70.0


def test_unrequested_addresses_are_ignored():
    swap = rec("x", origin=OTHER, sender=OTHER, recipient=OTHER)
    result = aggregate([WALLET_A], [swap], [], [])
    assert list(result.metrics) == [WALLET_A]
    assert result.metrics[WALLET_A].swaps_involved == 0
    assert result.total_swaps == 1


def test_top_pairs_limit_and_order():
    volumes = {"A": 500, "B": 300, "C": 200, "D": 100, "E": 50, "F": 10}
    swaps = [rec(f"s{sym}", origin=WALLET_A, token0=sym, token1="USDT", amount=str(v)) for sym, v in volumes.items()]
    m = aggregate([WALLET_A], swaps, [], []).metrics[WALLET_A]
    assert m.top_pairs == (
        "A/USDT ($500.00)",
        "B/USDT ($300.00)",
        "C/USDT ($200.00)",
        "D/USDT ($100.00)",
        "E/USDT ($50.00)",
    )


def test_top_pairs_accumulate_per_pair_and_use_placeholders():
    swaps = [
        rec("1", origin=WALLET_A, amount="1000"),
        rec("2", origin=WALLET_A, amount="500"),
        rec("3", origin=WALLET_A, token0=None, token1=None, amount="2000"),
    ]
    m = aggregate([WALLET_A], swaps, [], []).metrics[WALLET_A]
    assert m.top_pairs == ("T0/T1 ($2,000.00)", "WBNB/USDT ($1,500.00)")


def test_missing_and_invalid_usd_count_as_zero_and_are_reported():
    swaps = [
        rec("ok", origin=WALLET_A, amount="10"),
        rec("missing", origin=WALLET_A, amount=None),
        rec("bad", origin=WALLET_A, amount="n/a"),
    ]
    result = aggregate([WALLET_A], swaps, [], [])
    m = result.metrics[WALLET_A]
    assert m.swaps_execution == 3
    assert m.volume_execution_usd == 10.0
    assert result.non_ok_usd == 2


def test_end_to_end_scenario():
    addr = "0xabc"
    id1 = rec("id1", origin="0xabc", amount="6000")
    id2 = rec("id2", origin="0xother", sender="0xabc", recipient="0xdef", amount="4000")
    id3 = rec("id3", origin="0xabc", sender="0xabc", amount="1")
    result = aggregate([addr], [id1, id3], [id2, id3], [])
    m = result.metrics[addr]
    assert m.swaps_execution == 2
    assert m.volume_execution_usd == 6001.0
    assert m.swaps_involved == 3
    assert m.volume_involved_usd == 10001.0
    assert result.total_swaps == 3


def test_independent_of_list_order():
    lists = [
        [rec("1", origin=WALLET_A, amount="5"), rec("2", sender=WALLET_A, amount="7")],
        [rec("2", sender=WALLET_A, amount="7"), rec("3", recipient=WALLET_B, amount="11")],
        [rec("3", recipient=WALLET_B, amount="11"), rec("1", origin=WALLET_A, amount="5")],
    ]
    baseline = aggregate([WALLET_A, WALLET_B], *lists)
    for perm in itertools.permutations(lists):
        assert aggregate([WALLET_A, WALLET_B], *perm).metrics == baseline.metrics


def test_human_usd():
    assert human_usd(6001) == "$6,001.00"
    assert human_usd(0) == "$0.00"
    assert human_usd(1234567.891) == "$1,234,567.89"
    assert human_usd(-5) == "-$5.00"
