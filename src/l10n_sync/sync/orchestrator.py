"""
Sync orchestrator for translation updates.

Runs the fixed three-step pipeline:

1. Pull translations from the platform and commit any changes.
2. Stop if the pull brought in files for languages the repository does not
   track yet; a maintainer has to wire those up by hand.
3. Push source strings, pull again, and commit any changes.

Every external failure propagates immediately; nothing is retried or rolled
back.
"""

import logging
from pathlib import Path

from ..utils.core.exceptions import PreconditionError
from . import messages
from .types import StepOutcome, StepResult, SyncResult, TranslationClient, VersionControl

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """Sequences the translation sync against injected collaborators."""

    def __init__(
        self,
        repository: VersionControl,
        client: TranslationClient,
        translations_dir: Path,
        languages_file: Path,
        translations_message: str,
        source_message: str,
        sibling_checkout: Path | None = None,
    ) -> None:
        self.repository: VersionControl = repository
        self.client: TranslationClient = client
        self.translations_dir: Path = translations_dir
        self.languages_file: Path = languages_file
        self.translations_message: str = translations_message
        self.source_message: str = source_message
        self.sibling_checkout: Path | None = sibling_checkout

    def check_preconditions(self) -> None:
        """
        Verify the surroundings before touching anything.

        Raises:
            PreconditionError: If the sibling checkout or platform tooling is
                missing, or the working tree is dirty
        """
        if self.sibling_checkout is not None and not self.sibling_checkout.is_dir():
            raise PreconditionError(
                f"Expected a checkout of the related project at {self.sibling_checkout}"
            )

        self.client.ensure_available()
        self.repository.require_clean_work_tree("sync translations")

    def _commit_if_changed(self, step: str, message: str) -> StepResult:
        self.repository.refresh_index()
        if not self.repository.has_unstaged_changes():
            return StepResult(step=step, outcome=StepOutcome.NO_CHANGES)

        self.repository.commit_all(message)
        summary = self.repository.diff_stat()
        logger.info(f"Committed: {message}")
        return StepResult(
            step=step,
            outcome=StepOutcome.COMMITTED,
            commit_message=message,
            diff_summary=summary,
        )

    def pull_translations(self) -> StepResult:
        """Step 1: pull translations and commit whatever changed."""
        logger.info(f"Syncing translations from {self.client.name}...")
        self.client.pull_translations()

        result = self._commit_if_changed("pull-translations", self.translations_message)
        if result.outcome is StepOutcome.NO_CHANGES:
            logger.info(f"Syncing translations from {self.client.name}... none.")
            return result

        if result.diff_summary:
            print(result.diff_summary)
        print()
        print(messages.after_translations_commit(self.client.name))
        return result

    def detect_new_languages(self) -> StepResult:
        """Step 2: stop when the translations directory has untracked files."""
        logger.info(f"Checking {self.translations_dir} for new languages...")
        self.repository.refresh_index()
        new_files = self.repository.untracked_files(self.translations_dir)
        if not new_files:
            logger.info("Checking for new languages... none.")
            return StepResult(step="detect-new-languages", outcome=StepOutcome.NO_CHANGES)

        logger.warning(f"Found {len(new_files)} untracked file(s) in {self.translations_dir}")
        print(
            messages.new_languages_found(
                new_files, self.translations_dir, self.languages_file
            )
        )
        return StepResult(
            step="detect-new-languages",
            outcome=StepOutcome.NEW_LANGUAGES,
            new_files=tuple(new_files),
        )

    def push_source_strings(self) -> StepResult:
        """Step 3: upload source strings, pull again and commit whatever changed."""
        logger.info(f"Uploading source strings to {self.client.name}...")
        self.client.push_source_strings()
        logger.info(f"Re-syncing translations from {self.client.name}...")
        self.client.pull_translations()

        result = self._commit_if_changed("push-source-strings", self.source_message)
        if result.outcome is StepOutcome.NO_CHANGES:
            logger.info(f"Syncing source strings with {self.client.name}... none.")
            return result

        print(messages.after_source_commit(self.client.name))
        return result

    def run(self) -> SyncResult:
        """
        Run the whole pipeline.

        Returns:
            SyncResult: Results of the steps that ran; the run stops after
                step 2 when new languages are found
        """
        self.check_preconditions()

        result = SyncResult()
        result.steps.append(self.pull_translations())

        detection = self.detect_new_languages()
        result.steps.append(detection)
        if detection.outcome is StepOutcome.NEW_LANGUAGES:
            return result

        result.steps.append(self.push_source_strings())
        logger.info("Translation sync complete.")
        return result
