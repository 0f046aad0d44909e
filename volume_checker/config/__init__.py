"""
Configuration for Volume Checker.

Loads settings from environment variables and an optional .env file.
"""

from volume_checker.config.env import (  # noqa: F401
    DEFAULT_SUBGRAPH_URLS,
    get_min_volume_usd,
    get_request_timeout,
    get_subgraph_urls,
    get_wallet_file,
    load_env,
    mask_endpoint,
)

__all__ = [
    "DEFAULT_SUBGRAPH_URLS",
    "get_min_volume_usd",
    "get_request_timeout",
    "get_subgraph_urls",
    "get_wallet_file",
    "load_env",
    "mask_endpoint",
]
