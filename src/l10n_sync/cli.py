"""
Command-line entry point for l10n-sync.

This module parses the command line, sets up logging, loads configuration,
wires git and the translation platform client into the orchestrator, and maps
the outcome to a process exit code.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .config.manager import DEFAULT_CONFIG_NAME, ConfigManager
from .sync.orchestrator import SyncOrchestrator
from .translation import create_client
from .utils.core.exceptions import L10nSyncError
from .vcs.git import GitRepository

DESCRIPTION = "Sync translations with the translation platform, committing the results."

EPILOG = f"""\
Steps:
  1. Pull translations from the platform. If anything changed, commit it
     and print a summary of the changes.
  2. Look for untracked files in the translations directory. These are
     languages that were added on the platform; if there are any, print
     instructions for adding them and stop with exit status 1.
  3. Upload the current source strings, then pull again. If anything
     changed, commit it. Rebase and push promptly afterwards: the platform
     now treats your local source strings as authoritative.

The working tree must be clean before starting. Settings are read from
{DEFAULT_CONFIG_NAME} in the current directory when present.

Exit status:
  0  success, or nothing to do
  1  precondition failed, or new languages need manual follow-up
  2  invalid usage
"""

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    # Set specific log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the command-line parser.

    Returns:
        Configured parser; unknown arguments make it exit with status 2
    """
    parser = argparse.ArgumentParser(
        prog="l10n-sync",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _ = parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to the YAML configuration file (default: ./{DEFAULT_CONFIG_NAME} if present)",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def build_orchestrator(config_path: Path | None) -> SyncOrchestrator:
    """
    Load configuration and assemble the orchestrator with real collaborators.

    Args:
        config_path: Configuration file given on the command line, if any

    Returns:
        Ready-to-run orchestrator
    """
    config = ConfigManager.discover(config_path)
    repository = config.repository

    return SyncOrchestrator(
        repository=GitRepository(repository.root),
        client=create_client(config),
        translations_dir=repository.translations_dir,
        languages_file=repository.languages_file,
        translations_message=config.commits.translations_message,
        source_message=config.commits.source_message,
        sibling_checkout=repository.sibling_checkout,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the translation sync.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``

    Returns:
        Exit code
    """
    args = create_argument_parser().parse_args(argv)
    config_path: Path | None = args.config  # pyright: ignore[reportAny]
    verbose: bool = args.verbose  # pyright: ignore[reportAny]

    setup_logging(verbose)

    try:
        orchestrator = build_orchestrator(config_path)
        result = orchestrator.run()
    except L10nSyncError as e:
        logger.error(f"❌ {e}")
        if verbose:
            logger.exception("Full traceback:")
        return e.exit_code

    return result.exit_code
