"""
l10n-sync - Maintainer tool for syncing translations with a translation platform.
"""

import sys

from .cli import main as run_sync


def main() -> None:
    """Console entry point that exits with the sync's status."""
    try:
        exit_code = run_sync()
    except KeyboardInterrupt:
        import logging

        logger = logging.getLogger(__name__)
        logger.info("Sync interrupted by user")
        exit_code = 130
    sys.exit(exit_code)


__all__ = ["main", "run_sync"]
