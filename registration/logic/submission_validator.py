"""
SubmissionValidator - form-level rules checked before a submission leaves the form.
"""

from __future__ import annotations

from typing import List

from ..models.submission import RegistrationSubmission
from ..models.validation_issue import ValidationIssue

MIN_FULL_NAME_LENGTH = 2

MESSAGES = {
    "full_name": "Le nom complet doit comporter au moins 2 caractères",
    "nationality": "Veuillez sélectionner une nationalité",
    "identification": "L'identification est requise",
    "marriage_certificate": "Le certificat de mariage est requis",
    "terms": "Vous devez accepter les conditions générales",
    "signature": "Veuillez fournir votre signature",
}


class SubmissionValidator:
    """
    Checks a RegistrationSubmission and lists every failed rule.

    The marriage certificate is only demanded while the roster requires it.
    File contents are not checked, only counts.
    """

    def __init__(self, *, min_full_name_length: int = MIN_FULL_NAME_LENGTH) -> None:
        self._min_name = min_full_name_length

    def validate(self, submission: RegistrationSubmission) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []

        for i, guest in enumerate(submission.guests):
            if len(guest.full_name.strip()) < self._min_name:
                issues.append(ValidationIssue(f"guests.{i}.fullName", MESSAGES["full_name"]))
            if not guest.nationality.strip():
                issues.append(ValidationIssue(f"guests.{i}.nationality", MESSAGES["nationality"]))

        if submission.identification_file_count <= 0:
            issues.append(ValidationIssue("identification", MESSAGES["identification"]))
        if submission.requires_marriage_certificate and submission.marriage_certificate_file_count <= 0:
            issues.append(ValidationIssue("marriageCertificate", MESSAGES["marriage_certificate"]))
        if not submission.terms_accepted:
            issues.append(ValidationIssue("termsAccepted", MESSAGES["terms"]))
        if submission.signature is None:
            issues.append(ValidationIssue("signature", MESSAGES["signature"]))

        return issues

    def is_valid(self, submission: RegistrationSubmission) -> bool:
        return not self.validate(submission)
