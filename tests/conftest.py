"""
Global test configuration fixtures for l10n-sync tests.

Provides fake collaborators, orchestrator factories, configuration objects and
a throwaway git repository for integration tests.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from l10n_sync.config.schema import SyncConfig
from l10n_sync.sync.orchestrator import SyncOrchestrator
from l10n_sync.sync.types import TranslationClient, VersionControl
from tests.utils.sync_helpers import SOURCE_MESSAGE, TRANSLATIONS_MESSAGE, FakeRepository


@pytest.fixture
def fake_repository() -> FakeRepository:
    """A clean fake working tree."""
    return FakeRepository()


@pytest.fixture
def make_orchestrator() -> Callable[..., SyncOrchestrator]:
    """
    Factory for orchestrators wired to the given collaborators.

    Returns:
        Callable taking a repository and client plus optional overrides
    """

    def _make(
        repository: VersionControl,
        client: TranslationClient,
        sibling_checkout: Path | None = None,
    ) -> SyncOrchestrator:
        return SyncOrchestrator(
            repository=repository,
            client=client,
            translations_dir=Path("static/translations"),
            languages_file=Path("src/i18n/languages.py"),
            translations_message=TRANSLATIONS_MESSAGE,
            source_message=SOURCE_MESSAGE,
            sibling_checkout=sibling_checkout,
        )

    return _make


@pytest.fixture
def default_config(tmp_path: Path) -> SyncConfig:
    """Default configuration anchored at a temporary directory."""
    return SyncConfig().resolve_paths(tmp_path)


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create a git repository with one committed translation file.

    Skips the test when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    for var, value in {
        "GIT_AUTHOR_NAME": "Test Maintainer",
        "GIT_AUTHOR_EMAIL": "maintainer@example.com",
        "GIT_COMMITTER_NAME": "Test Maintainer",
        "GIT_COMMITTER_EMAIL": "maintainer@example.com",
        "GIT_CONFIG_NOSYSTEM": "1",
        "HOME": str(tmp_path),
    }.items():
        monkeypatch.setenv(var, value)

    repo = tmp_path / "repo"
    translations = repo / "static" / "translations"
    translations.mkdir(parents=True)
    _ = (translations / "en.json").write_text('{"hello": "Hello"}\n', encoding="utf-8")
    _ = (translations / "de.json").write_text('{"hello": "Hallo"}\n', encoding="utf-8")

    _ = _git(repo, "init", "--quiet")
    _ = _git(repo, "add", "--all")
    _ = _git(repo, "commit", "--quiet", "--message", "Initial commit")
    return repo


@pytest.fixture
def git_log() -> Callable[[Path], list[str]]:
    """Return commit subjects of a repository, newest first."""

    def _log(repo: Path) -> list[str]:
        return _git(repo, "log", "--format=%s").splitlines()

    return _log
