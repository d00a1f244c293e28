"""Registration form exceptions."""
from __future__ import annotations

from typing import Sequence

from ..models.validation_issue import ValidationIssue


class RegistrationError(Exception):
    """Base exception for the registration feature."""


class UploadLimitError(RegistrationError):
    """Raised when more files are attached to a slot than it accepts."""


class SubmissionRejectedError(RegistrationError):
    """Raised when the assembled submission does not pass validation."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        summary = "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        super().__init__(f"Submission rejected ({len(self.issues)} issue(s)): {summary}")
