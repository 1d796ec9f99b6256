"""
Blocking subprocess helpers.

Every external tool the sync workflow drives (git, the translation platform
CLI) goes through ``run_command`` so failures surface as ``CommandError``.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .core.exceptions import CommandError, PreconditionError

logger = logging.getLogger(__name__)


def run_command(
    command: Sequence[str],
    cwd: Path | None = None,
    check: bool = True,
    capture: bool = True,
) -> subprocess.CompletedProcess[str]:
    """
    Run an external command and wait for it to finish.

    Args:
        command: Command and arguments as a list of strings
        cwd: Working directory for the command
        check: Raise ``CommandError`` on a non-zero exit status
        capture: Capture stdout/stderr instead of inheriting the terminal

    Returns:
        The completed process

    Raises:
        CommandError: If ``check`` is set and the command fails
        PreconditionError: If the executable cannot be found
    """
    argv = list(command)
    logger.debug(f"Running: {' '.join(argv)}")

    try:
        result = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=capture,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise PreconditionError(f"Required tool not found: {argv[0]}") from e

    if check and result.returncode != 0:
        raise CommandError(argv, result.returncode, result.stderr or "")

    return result
