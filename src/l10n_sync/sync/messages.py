"""Operator guidance printed between sync steps."""

from collections.abc import Sequence
from pathlib import Path


def after_translations_commit(platform: str) -> str:
    """Guidance after step 1 committed translations pulled from the platform."""
    return f"""\
Committed translation updates from {platform}; summary above.

Please look over the changes, then get them merged promptly: build and smoke
test the app in at least one of the updated languages, and push the commit
along with your other work.
"""


def new_languages_found(
    new_files: Sequence[str],
    translations_dir: Path,
    languages_file: Path,
) -> str:
    """Guidance when step 2 finds untracked files in the translations directory."""
    listing = "\n".join(f"  {path}" for path in new_files)
    return f"""\
New languages found! Untracked files in {translations_dir}:
{listing}

To finish adding them:
  * Add each new language to {languages_file}.
  * Review the new files, then commit them together with that change.
  * Run this tool again to continue with uploading source strings.

Stopping here; no source strings were pushed.
"""


def after_source_commit(platform: str) -> str:
    """Guidance after step 3 committed the refreshed translations."""
    return f"""\
Uploaded source strings to {platform} and committed the resulting updates.

{platform} now treats your local source strings as authoritative. Please
rebase onto the upstream branch and push this commit promptly, so that other
maintainers syncing translations do not undo or conflict with it.
"""
