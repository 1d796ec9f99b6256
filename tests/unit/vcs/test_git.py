"""
Tests for the git working-tree wrapper.

``subprocess.run`` is mocked so each test can assert the exact git
invocation and script its exit status.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from l10n_sync.utils.core.exceptions import CommandError, PreconditionError
from l10n_sync.vcs.git import GitRepository


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> Mock:
    """Build a stand-in for ``subprocess.CompletedProcess``."""
    return Mock(returncode=returncode, stdout=stdout, stderr=stderr)


def git_args(mock_run: Mock) -> list[list[str]]:
    """Argument lists of every git call made through the mock."""
    return [call.args[0] for call in mock_run.call_args_list]


class TestRequireCleanWorkTree:
    """Test the clean working tree precondition."""

    def test_clean_tree(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0)

            repo.require_clean_work_tree("sync translations")

        assert git_args(mock_run) == [
            ["git", "update-index", "-q", "--ignore-submodules", "--refresh"],
            ["git", "diff-files", "--quiet", "--ignore-submodules"],
            ["git", "diff-index", "--cached", "--quiet", "--ignore-submodules", "HEAD", "--"],
        ]
        for call in mock_run.call_args_list:
            assert call.kwargs["cwd"] == tmp_path

    def test_unstaged_changes(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [completed(0), completed(1), completed(0)]

            with pytest.raises(PreconditionError) as exc_info:
                repo.require_clean_work_tree("sync translations")

        message = str(exc_info.value)
        assert message.startswith("Cannot sync translations:")
        assert "unstaged changes" in message
        assert "uncommitted" not in message

    def test_staged_changes(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [completed(0), completed(0), completed(1)]

            with pytest.raises(PreconditionError) as exc_info:
                repo.require_clean_work_tree("sync translations")

        assert "index contains uncommitted changes" in str(exc_info.value)


    @pytest.mark.parametrize("returncode", [128, 129])
    def test_git_failure_is_not_reported_as_dirty(
        self, tmp_path: Path, returncode: int
    ) -> None:
        """Outside a repository or without HEAD, git errors surface as such."""
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                completed(0),
                completed(returncode, stderr="fatal: not a git repository"),
            ]

            with pytest.raises(CommandError) as exc_info:
                repo.require_clean_work_tree("sync translations")

        assert exc_info.value.exit_code == returncode
        assert "not a git repository" in str(exc_info.value)
        assert "commit or stash" not in str(exc_info.value)

    def test_missing_head(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = [
                completed(0),
                completed(0),
                completed(128, stderr="fatal: bad revision 'HEAD'"),
            ]

            with pytest.raises(CommandError) as exc_info:
                repo.require_clean_work_tree("sync translations")

        assert exc_info.value.command[1] == "diff-index"


class TestHasUnstagedChanges:
    """Test the diff-files check."""

    @pytest.mark.parametrize(("returncode", "expected"), [(0, False), (1, True)])
    def test_exit_status(self, tmp_path: Path, returncode: int, expected: bool) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(returncode)

            assert repo.has_unstaged_changes() is expected

        assert git_args(mock_run) == [["git", "diff-files", "--quiet"]]

    def test_git_failure(self, tmp_path: Path) -> None:
        """Exit statuses other than 0/1 are real errors."""
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(128)

            with pytest.raises(CommandError) as exc_info:
                _ = repo.has_unstaged_changes()

        assert exc_info.value.exit_code == 128


class TestUntrackedFiles:
    """Test parsing of porcelain status output."""

    def test_only_untracked_entries(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        output = (
            " M static/translations/de.json\0"
            "?? static/translations/uk.json\0"
            "?? static/translations/pt_BR.json\0"
        )
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0, stdout=output)

            files = repo.untracked_files(Path("static/translations"))

        assert files == ["static/translations/uk.json", "static/translations/pt_BR.json"]
        assert git_args(mock_run) == [
            ["git", "status", "--porcelain", "-z", "--untracked-files=all", "--", "static/translations"]
        ]

    def test_names_are_not_quoted(self, tmp_path: Path) -> None:
        """Non-ASCII names come back as written, not C-escaped."""
        repo = GitRepository(tmp_path)
        output = "?? static/translations/中文.json\0?? static/translations/my file.json\0"
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0, stdout=output)

            files = repo.untracked_files("static/translations")

        assert files == [
            "static/translations/中文.json",
            "static/translations/my file.json",
        ]

    def test_rename_source_path_is_skipped(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        output = (
            "R  static/translations/pt.json\0"
            "static/translations/pt_PT.json\0"
            "?? static/translations/uk.json\0"
        )
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0, stdout=output)

            files = repo.untracked_files("static/translations")

        assert files == ["static/translations/uk.json"]

    def test_no_output(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0, stdout="")

            assert repo.untracked_files("static/translations") == []


class TestCommitAndDiff:
    """Test commit and diff summary commands."""

    def test_commit_all(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0)

            repo.commit_all("i18n: Sync translations.")

        assert git_args(mock_run) == [
            ["git", "commit", "--all", "--quiet", "--message", "i18n: Sync translations."]
        ]

    def test_commit_failure(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(1, stderr="hook declined")

            with pytest.raises(CommandError) as exc_info:
                repo.commit_all("i18n: Sync translations.")

        assert "hook declined" in str(exc_info.value)

    def test_diff_stat(self, tmp_path: Path) -> None:
        repo = GitRepository(tmp_path)
        stat = " static/translations/de.json | 2 +-\n 1 file changed\n"
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = completed(0, stdout=stat)

            assert repo.diff_stat() == stat.rstrip()

        assert git_args(mock_run) == [["git", "--no-pager", "diff", "--stat", "HEAD~"]]
