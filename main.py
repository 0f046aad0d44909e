"""
Main entrypoint: daily DEX volume check for the configured wallets.

Same as `python -m volume_checker.cli` or the `volume-checker` console script.
"""

from volume_checker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
