"""
Basic exception classes for l10n-sync.

This module contains the error taxonomy shared by every part of the sync
workflow without creating import cycles.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    PRECONDITION = "precondition"
    CONFIGURATION = "configuration"
    COMMAND = "command"
    PLATFORM = "platform"
    UNKNOWN = "unknown"


class L10nSyncError(Exception):
    """Base exception class for l10n-sync specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        exit_code: int = 1,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.exit_code: int = exit_code


class PreconditionError(L10nSyncError):
    """The repository or its surroundings are not ready for a sync."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PRECONDITION,
            severity=ErrorSeverity.HIGH,
        )


class ConfigurationError(L10nSyncError):
    """Configuration-related errors."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
        )


class CommandError(L10nSyncError):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stderr: str = "",
    ) -> None:
        self.command: list[str] = list(command)
        self.returncode: int = returncode
        self.stderr: str = stderr.strip()

        message = f"Command failed with exit status {returncode}: {' '.join(self.command)}"
        if self.stderr:
            message = f"{message}\n{self.stderr}"

        super().__init__(
            message,
            category=ErrorCategory.COMMAND,
            severity=ErrorSeverity.HIGH,
            exit_code=returncode if returncode > 0 else 1,
        )


class PlatformError(L10nSyncError):
    """Translation platform API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PLATFORM,
            severity=ErrorSeverity.MEDIUM,
        )
        self.status_code: int | None = status_code
