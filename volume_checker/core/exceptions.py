"""
Application-level exceptions.

RequestFailure is local to one page request and propagates to the fetcher.
EndpointExhausted marks one endpoint attempt as discarded; the fetcher
catches it and moves on. AllEndpointsFailed and EmptyAddressSet are terminal.
"""

from __future__ import annotations


class VolumeCheckerError(Exception):
    """Base class for all volume checker errors."""


class RequestFailure(VolumeCheckerError):
    """A single subgraph request failed: transport, timeout, HTTP status or malformed body."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"{message} (endpoint={endpoint})")
        self.endpoint = endpoint
        self.reason = message


class EndpointExhausted(VolumeCheckerError):
    """An endpoint could not complete all three swap queries."""

    def __init__(self, endpoint: str, cause: BaseException) -> None:
        super().__init__(f"endpoint {endpoint} failed: {cause}")
        self.endpoint = endpoint
        self.cause = cause


class AllEndpointsFailed(VolumeCheckerError):
    """Every candidate endpoint failed; carries each attempt for diagnostics."""

    def __init__(self, attempts: list[tuple[str, BaseException]]) -> None:
        self.attempts = list(attempts)
        if self.attempts:
            msg = f"All subgraph endpoints failed. Last error: {self.last_error}"
        else:
            msg = "All subgraph endpoints failed. No endpoints configured"
        super().__init__(msg)

    @property
    def last_error(self) -> BaseException | None:
        return self.attempts[-1][1] if self.attempts else None


class EmptyAddressSet(VolumeCheckerError, ValueError):
    """No wallet addresses were supplied."""

    def __init__(self, message: str = "no wallet addresses supplied") -> None:
        super().__init__(message)


class QueryCancelled(RequestFailure):
    """A query was stopped between pages because a sibling query on the same endpoint failed."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(endpoint, "query cancelled after a sibling query failed")
