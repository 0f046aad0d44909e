"""
Volume Checker — daily DEX swap volume per wallet from a v3 subgraph.

Fetches swap events for a list of wallets over one UTC day (by origin,
sender and recipient), deduplicates them, and computes execution and
involvement volume per wallet for a daily threshold check.
"""

__version__ = "0.1.0"
