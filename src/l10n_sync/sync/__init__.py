"""
Translation sync pipeline.

The orchestrator and the records it produces.
"""

from .orchestrator import SyncOrchestrator
from .types import (
    StepOutcome,
    StepResult,
    SyncResult,
    TranslationClient,
    VersionControl,
)

__all__ = [
    "SyncOrchestrator",
    "StepOutcome",
    "StepResult",
    "SyncResult",
    "TranslationClient",
    "VersionControl",
]
