"""Form-level rules applied before submission."""
from __future__ import annotations

import unittest
from dataclasses import replace

from guests.models.guest_entry import GuestEntry, Sex
from registration.logic.submission_validator import MESSAGES, SubmissionValidator
from registration.models.submission import RegistrationSubmission
from signature.models.signature_artifact import SignatureArtifact

_SIGNATURE = SignatureArtifact(png_bytes=b"\x89PNG\r\n\x1a\n", width=1, height=1)


def _submission(**overrides) -> RegistrationSubmission:
    base = RegistrationSubmission(
        guest_count=1,
        guests=(GuestEntry(full_name="Nadia Idrissi", sex=Sex.FEMALE, nationality="Morocco"),),
        identification_file_count=1,
        marriage_certificate_file_count=0,
        requires_marriage_certificate=False,
        terms_accepted=True,
        signature=_SIGNATURE,
    )
    return replace(base, **overrides)


class TestSubmissionValidator(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = SubmissionValidator()

    def test_complete_submission_passes(self) -> None:
        self.assertEqual(self.validator.validate(_submission()), [])
        self.assertTrue(self.validator.is_valid(_submission()))

    def test_short_name(self) -> None:
        guests = (GuestEntry(full_name=" N ", nationality="Morocco"),)
        issues = self.validator.validate(_submission(guests=guests))
        self.assertEqual([(i.field, i.message) for i in issues], [("guests.0.fullName", MESSAGES["full_name"])])

    def test_missing_nationality_on_second_guest(self) -> None:
        guests = (
            GuestEntry(full_name="Nadia Idrissi", nationality="Morocco"),
            GuestEntry(full_name="Omar Idrissi", nationality="  "),
        )
        issues = self.validator.validate(_submission(guest_count=2, guests=guests))
        self.assertEqual([i.field for i in issues], ["guests.1.nationality"])

    def test_identification_required(self) -> None:
        issues = self.validator.validate(_submission(identification_file_count=0))
        self.assertEqual([i.field for i in issues], ["identification"])

    def test_certificate_only_when_required(self) -> None:
        self.assertEqual(self.validator.validate(_submission(requires_marriage_certificate=False)), [])
        issues = self.validator.validate(_submission(requires_marriage_certificate=True))
        self.assertEqual([i.field for i in issues], ["marriageCertificate"])
        ok = _submission(requires_marriage_certificate=True, marriage_certificate_file_count=1)
        self.assertEqual(self.validator.validate(ok), [])

    def test_terms_and_signature(self) -> None:
        issues = self.validator.validate(_submission(terms_accepted=False, signature=None))
        self.assertEqual([i.field for i in issues], ["termsAccepted", "signature"])

    def test_payload_without_signature(self) -> None:
        payload = _submission(signature=None).to_payload()
        self.assertIsNone(payload["signature"])
        self.assertEqual(payload["guests"][0]["sex"], "female")


if __name__ == "__main__":
    unittest.main()
