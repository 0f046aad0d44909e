"""
Pytest fixtures for Volume Checker tests. The subgraph is faked with
httpx.MockTransport so no test touches the network.
"""

from __future__ import annotations

import pytest

from _subgraph_helpers import FakeSubgraph


@pytest.fixture
def fake_subgraph():
    return FakeSubgraph()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer .env / shell settings out of the tests."""
    for name in (
        "SUBGRAPH_URL",
        "SUBGRAPH_FALLBACK_URLS",
        "WALLET_FILE",
        "REQUEST_TIMEOUT_SEC",
        "MIN_VOLUME_USD",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("volume_checker.config.env.load_dotenv", lambda *a, **k: False)
