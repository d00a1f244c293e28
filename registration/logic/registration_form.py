"""RegistrationForm - wires roster, uploads, terms and signature into one submission."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from guests.logic.roster_synchronizer import RosterObserver, RosterSynchronizer
from guests.models.guest_entry import GuestEntry
from guests.models.roster_state import RosterState
from signature.logic.signature_surface import SignatureSurface
from signature.models.signature_artifact import SignatureArtifact

from ..exceptions.errors import SubmissionRejectedError
from ..models.submission import RegistrationSubmission
from ..models.validation_issue import ValidationIssue
from .submission_validator import SubmissionValidator
from .terms import is_acceptance
from .upload_slot import UploadSlot

logger = logging.getLogger(__name__)

SubmissionSink = Callable[[Dict[str, Any]], None]


class RegistrationForm:
    """
    Form orchestrator.

    Responsibilities:
    - Forward guest count / field changes to the RosterSynchronizer
    - Keep the latest signature artifact reported by the signature surface
    - Hold the upload slots and the terms acceptance
    - Build, validate and hand over the submission payload

    SRP: no widget code here; views call these methods explicitly.
    """

    def __init__(
            self,
            roster: Optional[RosterSynchronizer] = None,
            *,
            identification: Optional[UploadSlot] = None,
            marriage_certificate: Optional[UploadSlot] = None,
            validator: Optional[SubmissionValidator] = None,
    ) -> None:
        """
        Args:
            roster: Roster synchronizer, one guest by default
            identification: Upload slot for ID / passport copies
            marriage_certificate: Upload slot for the certificate
            validator: Form rules applied by submit()
        """
        self._roster = roster if roster is not None else RosterSynchronizer(initial_count=1)
        self.identification = identification or UploadSlot("identification")
        self.marriage_certificate = marriage_certificate or UploadSlot("marriageCertificate")
        self._validator = validator or SubmissionValidator()
        self._terms_accepted = False
        self._signature: Optional[SignatureArtifact] = None
        self._surface: Optional[SignatureSurface] = None

    @classmethod
    def from_config(cls, config) -> "RegistrationForm":
        """
        Build a form from a ConfigService ([Roster] and [Uploads] sections).
        """
        rc = config.roster
        roster = RosterSynchronizer(
            allowed_counts=range(rc.min_guests, rc.max_guests + 1),
            moroccan_token=rc.moroccan_token,
            initial_count=rc.default_guest_count,
        )
        max_files = config.uploads.max_files
        return cls(
            roster,
            identification=UploadSlot("identification", max_files=max_files),
            marriage_certificate=UploadSlot("marriageCertificate", max_files=max_files),
        )

    # ------------------------------------------------------------------ #
    #  Roster                                                            #
    # ------------------------------------------------------------------ #
    @property
    def roster(self) -> tuple[GuestEntry, ...]:
        return self._roster.roster

    @property
    def guest_count(self) -> int:
        return self._roster.desired_count

    @property
    def allowed_guest_counts(self) -> tuple[int, ...]:
        return self._roster.allowed_counts

    @property
    def requires_marriage_certificate(self) -> bool:
        return self._roster.requires_marriage_certificate

    def set_guest_count(self, n: int) -> RosterState:
        return self._roster.set_desired_count(n)

    def update_guest(self, index: int, field: str, value: Any) -> RosterState:
        return self._roster.update_guest_field(index, field, value)

    def subscribe_roster(self, callback: RosterObserver) -> None:
        self._roster.subscribe(callback)

    def unsubscribe_roster(self, callback: RosterObserver) -> None:
        self._roster.unsubscribe(callback)

    # ------------------------------------------------------------------ #
    #  Signature                                                         #
    # ------------------------------------------------------------------ #
    @property
    def signature(self) -> Optional[SignatureArtifact]:
        return self._signature

    def attach_signature(self, surface: SignatureSurface) -> None:
        """Become the stroke-complete observer of *surface*."""
        self.detach_signature()
        self._surface = surface
        surface.on_stroke_complete(self.receive_signature)

    def detach_signature(self) -> None:
        if self._surface is not None:
            if not self._surface.closed:
                self._surface.on_stroke_complete(None)
            self._surface = None

    def receive_signature(self, artifact: Optional[SignatureArtifact]) -> None:
        """Latest artifact wins; None means the signature could not be produced."""
        self._signature = artifact
        if artifact is None:
            logger.warning("Signature missing after stroke completion")

    def discard_signature(self) -> None:
        self._signature = None

    # ------------------------------------------------------------------ #
    #  Terms                                                             #
    # ------------------------------------------------------------------ #
    @property
    def terms_accepted(self) -> bool:
        return self._terms_accepted

    def accept_terms(self, token: Optional[str]) -> bool:
        self._terms_accepted = is_acceptance(token)
        return self._terms_accepted

    def withdraw_terms(self) -> None:
        self._terms_accepted = False

    # ------------------------------------------------------------------ #
    #  Submission                                                        #
    # ------------------------------------------------------------------ #
    def build_submission(self) -> RegistrationSubmission:
        state = self._roster.state()
        return RegistrationSubmission(
            guest_count=state.desired_count,
            guests=state.guests,
            identification_file_count=self.identification.count,
            marriage_certificate_file_count=self.marriage_certificate.count,
            requires_marriage_certificate=state.requires_marriage_certificate,
            terms_accepted=self._terms_accepted,
            signature=self._signature,
        )

    def validate(self) -> List[ValidationIssue]:
        return self._validator.validate(self.build_submission())

    def submit(self, sink: SubmissionSink) -> Dict[str, Any]:
        """
        Validate and hand the payload to *sink* (the transport).

        Raises:
            SubmissionRejectedError: at least one form rule failed
        """
        submission = self.build_submission()
        issues = self._validator.validate(submission)
        if issues:
            logger.info("Submission rejected: %d issue(s)", len(issues))
            raise SubmissionRejectedError(issues)

        payload = submission.to_payload()
        sink(payload)
        logger.info("Submission accepted: %d guest(s), certificate required: %s",
                    submission.guest_count, submission.requires_marriage_certificate)
        return payload

    def close(self) -> None:
        self.detach_signature()
        self._roster.close()
