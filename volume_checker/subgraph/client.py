"""
Minimal GraphQL-over-HTTP client for one subgraph endpoint.

Every failure (transport, timeout, HTTP status, non-JSON body, GraphQL
errors) is raised as RequestFailure. No retries: the fetcher recovers by
moving to the next endpoint.
"""

from __future__ import annotations

from typing import Any

import httpx

from volume_checker.core.exceptions import RequestFailure

DEFAULT_TIMEOUT_SEC = 30.0


class SubgraphClient:
    """
    Synchronous client for a single subgraph URL.

    Usable as a context manager; the underlying httpx.Client is closed on exit.
    transport is passed through to httpx (tests use httpx.MockTransport).

    timeout is applied by httpx per phase (connect, write, pool, and each
    read), not as a deadline on the whole request. A server that keeps
    trickling bytes can therefore hold a request past timeout seconds; the
    fetcher accepts that and only fails over on an actual error.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not url or not url.strip():
            raise ValueError("url must be non-empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.url = url.strip()
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"content-type": "application/json"},
        )

    def __enter__(self) -> "SubgraphClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """POST one GraphQL query; return the data object or raise RequestFailure."""
        try:
            resp = self._client.post(self.url, json={"query": query, "variables": variables})
            resp.raise_for_status()
        except httpx.InvalidURL as e:
            raise RequestFailure(self.url, f"invalid endpoint URL: {e}") from e
        except httpx.HTTPStatusError as e:
            raise RequestFailure(self.url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RequestFailure(self.url, f"transport error: {e!r}") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise RequestFailure(self.url, f"invalid JSON response: {resp.text[:200]!r}") from e

        if not isinstance(body, dict):
            raise RequestFailure(self.url, "response body is not an object")
        errors = body.get("errors")
        if errors:
            raise RequestFailure(self.url, f"GraphQL errors: {errors}")
        data = body.get("data")
        if not isinstance(data, dict):
            raise RequestFailure(self.url, "response has no data object")
        return data
