"""
Git working-tree queries and commits used by the sync workflow.

The repository is only ever inspected and committed to; branches, remotes and
history are left to the maintainer.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.core.exceptions import CommandError, PreconditionError
from ..utils.process import run_command

logger = logging.getLogger(__name__)


class GitRepository:
    """Thin wrapper around the ``git`` executable for a single working tree."""

    def __init__(self, root: Path, executable: str = "git") -> None:
        self.root: Path = root
        self.executable: str = executable

    def _git(self, *args: str, check: bool = True) -> tuple[str, int]:
        result = run_command([self.executable, *args], cwd=self.root, check=check)
        return result.stdout, result.returncode

    def require_clean_work_tree(self, action: str) -> None:
        """
        Refuse to continue unless the working tree and index are clean.

        Args:
            action: What the caller is about to do, used in the error message

        Raises:
            PreconditionError: If there are unstaged or uncommitted changes
            CommandError: If git cannot compare the tree, e.g. outside a
                repository or before the first commit
        """
        _ = self._git("update-index", "-q", "--ignore-submodules", "--refresh", check=False)

        problems: list[str] = []
        if self._differs("diff-files", "--quiet", "--ignore-submodules"):
            problems.append("You have unstaged changes.")

        if self._differs(
            "diff-index", "--cached", "--quiet", "--ignore-submodules", "HEAD", "--"
        ):
            problems.append("Your index contains uncommitted changes.")

        if problems:
            details = " ".join(problems)
            raise PreconditionError(
                f"Cannot {action}: {details} Please commit or stash them."
            )

    def refresh_index(self) -> None:
        """Refresh stat information in the index so diff checks are accurate."""
        _ = self._git("update-index", "-q", "--refresh", check=False)

    def has_unstaged_changes(self) -> bool:
        """
        Check whether tracked files differ from the index.

        Returns:
            True if ``git diff-files`` reports differences

        Raises:
            CommandError: If git fails for any other reason
        """
        return self._differs("diff-files", "--quiet")

    def _differs(self, *args: str) -> bool:
        # --quiet diffs exit 1 on differences; anything above that is a failure
        command = [self.executable, *args]
        result = run_command(command, cwd=self.root, check=False)
        match result.returncode:
            case 0:
                return False
            case 1:
                return True
            case _:
                raise CommandError(command, result.returncode, result.stderr or "")

    def diff_stat(self, revision: str = "HEAD~") -> str:
        """Return the ``git diff --stat`` summary against ``revision``."""
        output, _ = self._git("--no-pager", "diff", "--stat", revision)
        return output.rstrip()

    def untracked_files(self, path: Path | str) -> list[str]:
        """
        List untracked files below ``path``.

        Args:
            path: Directory to inspect, relative to the repository root

        Returns:
            Repository-relative paths of untracked files
        """
        output, _ = self._git(
            "status", "--porcelain", "-z", "--untracked-files=all", "--", str(path)
        )

        untracked: list[str] = []
        entries = iter(output.split("\0"))
        for entry in entries:
            # Entries are "XY <path>" with no quoting; renames and copies
            # carry their original path as the next entry
            status = entry[:2]
            if status == "??":
                untracked.append(entry[3:])
            elif "R" in status or "C" in status:
                _ = next(entries, None)
        return untracked

    def commit_all(self, message: str) -> None:
        """Commit every modified tracked file with ``message``."""
        logger.debug(f"Committing: {message}")
        _ = self._git("commit", "--all", "--quiet", "--message", message)
