"""
Core cross-cutting pieces shared by the fetcher, aggregator and CLI.
"""

from volume_checker.core.exceptions import (
    AllEndpointsFailed,
    EmptyAddressSet,
    EndpointExhausted,
    QueryCancelled,
    RequestFailure,
    VolumeCheckerError,
)

__all__ = [
    "AllEndpointsFailed",
    "EmptyAddressSet",
    "EndpointExhausted",
    "QueryCancelled",
    "RequestFailure",
    "VolumeCheckerError",
]
