"""Exceptions raised by the PodLint engine."""

from typing import Optional

from podlint.core.models import Violation


class PodLintError(Exception):
    """Base exception for system-level failures (exit code 2)."""
    pass


class DocumentReadError(PodLintError):
    """The manifest file is missing, unreadable or not valid UTF-8."""
    pass


class DocumentParseError(PodLintError):
    """The manifest text does not compose into a single document tree."""

    def __init__(self, reason: str, line: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.line = line


class ValidationAborted(Exception):
    """Raised by the fail-fast policy to unwind the traversal."""

    def __init__(self, violation: Violation):
        super().__init__(violation.message)
        self.violation = violation
