# registration/models/validation_issue.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """One failed form rule. *field* uses payload paths such as ``guests.0.fullName``."""
    field: str
    message: str
