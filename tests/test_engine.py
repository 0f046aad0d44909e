"""
Tests for the daily volume check pipeline against a fake subgraph.
"""

from __future__ import annotations

import pytest

from _subgraph_helpers import (
    BAD_URL,
    DAY,
    DAY_END,
    DAY_START,
    GOOD_URL,
    OTHER,
    WALLET_A,
    WALLET_B,
    FakeSubgraph,
    make_swap,
)
from volume_checker.core.exceptions import AllEndpointsFailed, EmptyAddressSet
from volume_checker.engine import run_volume_check


def _swaps():
    return [
        make_swap("id1", origin=WALLET_A, amount="6000"),
        make_swap("id2", origin=OTHER, sender=WALLET_A, recipient=WALLET_B, amount="4000"),
        make_swap("id3", origin=WALLET_A, sender=WALLET_A, amount="1", token0="CAKE"),
        make_swap("id4", origin=WALLET_B, amount="9000", ts=DAY_START - 1),
        make_swap("id5", origin=WALLET_B, amount="20000", ts=DAY_END),
    ]


def test_run_volume_check_end_to_end():
    fake = FakeSubgraph(_swaps())
    fake.fail_host("bad.example")
    report = run_volume_check(
        [WALLET_B, WALLET_A, WALLET_B],
        DAY,
        [BAD_URL, GOOD_URL],
        threshold=10_000,
        transport=fake.transport(),
    )
    assert report.endpoint == GOOD_URL
    assert (report.start, report.end) == (DAY_START, DAY_END)
    assert report.addresses == (WALLET_B, WALLET_A)
    assert report.total_swaps == 4

    a = report.metrics[WALLET_A]
    assert (a.swaps_execution, a.volume_execution_usd) == (2, 6001.0)
    assert (a.swaps_involved, a.volume_involved_usd) == (3, 10001.0)
    assert a.top_pairs == ("WBNB/USDT ($6,000.00)", "CAKE/USDT ($1.00)")

    b = report.metrics[WALLET_B]
    assert (b.swaps_execution, b.volume_execution_usd) == (1, 20000.0)
    assert (b.swaps_involved, b.volume_involved_usd) == (2, 24000.0)

    assert report.passes(WALLET_B)
    assert not report.passes(WALLET_A)
    assert report.passing == [WALLET_B]
    assert [m.address for m in report.ordered_metrics()] == [WALLET_B, WALLET_A]


def test_threshold_is_inclusive():
    fake = FakeSubgraph([make_swap("x", origin=WALLET_A, amount="10000")])
    report = run_volume_check([WALLET_A], DAY, [GOOD_URL], threshold=10_000, transport=fake.transport())
    assert report.passes(WALLET_A)


def test_parallel_mode_same_result():
    seq = run_volume_check([WALLET_A, WALLET_B], DAY, [GOOD_URL], threshold=1, transport=FakeSubgraph(_swaps()).transport())
    par = run_volume_check(
        [WALLET_A, WALLET_B], DAY, [GOOD_URL], threshold=1, parallel=True,
        transport=FakeSubgraph(_swaps()).transport(),
    )
    assert par.metrics == seq.metrics
    assert par.total_swaps == seq.total_swaps


def test_empty_addresses_rejected_before_network():
    fake = FakeSubgraph(_swaps())
    with pytest.raises(EmptyAddressSet):
        run_volume_check(["", "  "], DAY, [GOOD_URL], threshold=1, transport=fake.transport())
    assert fake.requests == []


def test_all_endpoints_failed_propagates():
    fake = FakeSubgraph(_swaps())
    fake.fail_host("bad.example")
    with pytest.raises(AllEndpointsFailed):
        run_volume_check([WALLET_A], DAY, [BAD_URL], threshold=1, transport=fake.transport())
