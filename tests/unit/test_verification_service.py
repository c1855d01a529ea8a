"""
TicketVerifier tests covering result composition end to end.

Run with: pytest tests/unit/test_verification_service.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from models.verification import VerificationStatus
from services.verification_service import (
    REASON_ID_MISMATCH,
    REASON_VERIFIED,
    TicketVerifier,
)

REFERENCE = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
DATE_REASON = "Ticket date is outside valid window (must be within last 60 days)"


@pytest.fixture
def verifier():
    return TicketVerifier()


def test_labelled_ticket_text_verifies(verifier):
    result = verifier.verify(
        "ABC12345", reference_time=REFERENCE, extracted_text="TICKET-ABC12345"
    )
    assert result.status == VerificationStatus.VALID
    assert result.reason == REASON_VERIFIED
    assert result.extracted_id == "ABC12345"
    assert result.to_response().model_dump(by_alias=True) == {
        "valid": True,
        "reason": "Ticket verified successfully",
        "extractedId": "ABC12345",
    }


def test_unrecognizable_text_does_not_match(verifier):
    result = verifier.verify(
        "XYZ00000", reference_time=REFERENCE, extracted_text="hello world"
    )
    assert result.status == VerificationStatus.INVALID
    assert result.reason == REASON_ID_MISMATCH
    assert result.extracted_id == "HELLOWORLD"
    assert result.to_response().valid is False


def test_identifier_is_scanned_when_no_text_given(verifier):
    """Simulated OCR: the entered identifier is its own source text."""
    result = verifier.verify("abc-12345", reference_time=REFERENCE)
    assert result.extracted_id == "ABC12345"
    assert result.status == VerificationStatus.VALID


def test_labelled_identifier_without_text_is_too_far_from_itself(verifier):
    """'TICKET-ABC12345' extracts ABC12345, six edits from TICKETABC12345."""
    result = verifier.verify("TICKET-ABC12345", reference_time=REFERENCE)
    assert result.extracted_id == "ABC12345"
    assert result.status == VerificationStatus.INVALID


def test_fuzzy_transcription_noise_is_tolerated(verifier):
    result = verifier.verify(
        "ABC12345", reference_time=REFERENCE, extracted_text="TICKET: ABC1234S"
    )
    assert result.extracted_id == "ABC1234S"
    assert result.status == VerificationStatus.VALID


@pytest.mark.parametrize("identifier", [None, ""])
def test_missing_identifier_is_invalid(verifier, identifier):
    result = verifier.verify(identifier, reference_time=REFERENCE)
    assert result.status == VerificationStatus.INVALID
    assert result.reason == REASON_ID_MISMATCH
    assert result.extracted_id == ""


def test_stale_ticket_date_takes_precedence(verifier):
    result = verifier.verify(
        "XYZ00000",
        reference_time=REFERENCE,
        ticket_date=REFERENCE - timedelta(days=61),
        extracted_text="hello world",
    )
    assert result.status == VerificationStatus.INVALID
    assert result.reason == DATE_REASON
    assert result.extracted_id == "HELLOWORLD"


def test_default_reference_time_is_now(verifier):
    result = verifier.verify("ABC12345")
    assert result.status == VerificationStatus.VALID


def test_configured_window_appears_in_reason():
    verifier = TicketVerifier(validity_window_days=7)
    result = verifier.verify(
        "ABC12345",
        reference_time=REFERENCE,
        ticket_date=REFERENCE - timedelta(days=8),
    )
    assert result.reason == "Ticket date is outside valid window (must be within last 7 days)"


def test_pending_is_never_produced(verifier):
    inputs = [None, "", "ABC12345", "TICKET-ABC12345", "???", "ÄÖÜ"]
    statuses = {verifier.verify(value, reference_time=REFERENCE).status for value in inputs}
    assert VerificationStatus.PENDING not in statuses


def test_no_break_space_after_label_still_extracts(verifier):
    result = verifier.verify(
        "ABC123", reference_time=REFERENCE, extracted_text="Ticket:\u00a0ABC123 Screen 4"
    )
    assert result.extracted_id == "ABC123"
    assert result.status == VerificationStatus.VALID
