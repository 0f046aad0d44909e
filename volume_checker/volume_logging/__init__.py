"""
Structured logging for Volume Checker.

Use get_logger() in every module so events share one format.
"""

from volume_checker.volume_logging.logger import bind_endpoint, get_logger

__all__ = ["bind_endpoint", "get_logger"]
