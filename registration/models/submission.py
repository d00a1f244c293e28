"""
Submission payload assembled by the registration form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from guests.models.guest_entry import GuestEntry
from signature.models.signature_artifact import SignatureArtifact


@dataclass(frozen=True)
class RegistrationSubmission:
    """
    Everything the form hands over at submission time.

    Attributes:
        guest_count (int): Desired count; equals len(guests).
        guests (tuple[GuestEntry, ...]): Roster snapshot.
        identification_file_count (int): Files attached to the identification slot.
        marriage_certificate_file_count (int): Files attached to the certificate slot.
        requires_marriage_certificate (bool): Derived from the roster.
        terms_accepted (bool): Acceptance token received.
        signature (SignatureArtifact | None): Latest completed signature, if any.
    """
    guest_count: int
    guests: tuple[GuestEntry, ...]
    identification_file_count: int
    marriage_certificate_file_count: int
    requires_marriage_certificate: bool
    terms_accepted: bool
    signature: Optional[SignatureArtifact]

    def to_payload(self) -> Dict[str, Any]:
        """Canonical dict form (camelCase keys, signature as PNG data URL or None)."""
        return {
            "guestCount": self.guest_count,
            "guests": [g.to_payload() for g in self.guests],
            "identificationFileCount": self.identification_file_count,
            "marriageCertificateFileCount": self.marriage_certificate_file_count,
            "requiresMarriageCertificate": self.requires_marriage_certificate,
            "termsAccepted": self.terms_accepted,
            "signature": self.signature.data_url if self.signature is not None else None,
        }
