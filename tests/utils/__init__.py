"""
Test utilities package for l10n-sync tests.

## Available Modules

### sync_helpers.py
In-memory collaborators for the sync orchestrator:
- `FakeRepository`: Working-tree state, recorded calls and commits
- `FakeTranslationClient`: Platform client whose pulls modify a FakeRepository
"""
