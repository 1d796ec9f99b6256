"""
Result records and collaborator interfaces for the sync workflow.

The orchestrator only talks to git and the translation platform through the
protocols defined here, so tests can substitute in-memory fakes.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol


class StepOutcome(Enum):
    """What a single sync step ended up doing."""

    COMMITTED = "committed"
    NO_CHANGES = "no_changes"
    NEW_LANGUAGES = "new_languages"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one step of the sync."""

    step: str
    outcome: StepOutcome
    commit_message: str | None = None
    diff_summary: str | None = None
    new_files: tuple[str, ...] = ()


@dataclass
class SyncResult:
    """Ordered results of a sync run."""

    steps: list[StepResult] = field(default_factory=list)

    @property
    def needs_attention(self) -> bool:
        """True when the run stopped because a human has to act first."""
        return any(step.outcome is StepOutcome.NEW_LANGUAGES for step in self.steps)

    @property
    def commits(self) -> int:
        """Number of commits the run created."""
        return sum(1 for step in self.steps if step.outcome is StepOutcome.COMMITTED)

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 1 if self.needs_attention else 0


class VersionControl(Protocol):
    """Working-tree operations the sync needs from version control."""

    def require_clean_work_tree(self, action: str) -> None: ...

    def refresh_index(self) -> None: ...

    def has_unstaged_changes(self) -> bool: ...

    def diff_stat(self, revision: str = "HEAD~") -> str: ...

    def untracked_files(self, path: Path | str) -> list[str]: ...

    def commit_all(self, message: str) -> None: ...


class TranslationClient(Protocol):
    """Operations the sync needs from the translation platform."""

    @property
    def name(self) -> str: ...

    def ensure_available(self) -> None: ...

    def pull_translations(self) -> None: ...

    def push_source_strings(self) -> object: ...
