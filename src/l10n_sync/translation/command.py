"""Translation platform client that drives the platform's own CLI."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from ..utils.core.exceptions import PreconditionError
from ..utils.process import run_command

logger = logging.getLogger(__name__)


class CommandLineClient:
    """
    Runs configured pull/push commands (e.g. the Transifex ``tx`` client).

    Output is not captured, so the tool's own progress reaches the terminal.
    """

    def __init__(
        self,
        pull_command: Sequence[str],
        push_command: Sequence[str],
        cwd: Path,
    ) -> None:
        self.pull_command: list[str] = list(pull_command)
        self.push_command: list[str] = list(push_command)
        self.cwd: Path = cwd

    @property
    def name(self) -> str:
        """Executable name, used in progress messages."""
        return self.pull_command[0]

    def ensure_available(self) -> None:
        """
        Check that the pull and push executables can be found.

        Raises:
            PreconditionError: If an executable is not on PATH
        """
        for executable in {self.pull_command[0], self.push_command[0]}:
            if shutil.which(executable) is None:
                raise PreconditionError(
                    f"Translation platform client '{executable}' not found on PATH"
                )

    def pull_translations(self) -> None:
        """Download translations into the working tree."""
        _ = run_command(self.pull_command, cwd=self.cwd, capture=False)

    def push_source_strings(self) -> None:
        """Upload the current source strings."""
        _ = run_command(self.push_command, cwd=self.cwd, capture=False)
