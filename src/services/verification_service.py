"""
Ticket verification.

Combines identifier extraction, fuzzy matching and the validity-window check
into a single VerificationResult. The verifier keeps no state between calls
and performs no I/O, so one instance can serve every request.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from models.verification import VerificationResult, VerificationStatus
from services.date_window import DEFAULT_VALIDITY_WINDOW_DAYS, is_within_validity_window
from services.identifier_extraction import extract_identifier
from services.matching import DEFAULT_MAX_EDIT_DISTANCE, identifiers_match
from utils.logging_config import get_logger

logger = get_logger(__name__)

REASON_VERIFIED = "Ticket verified successfully"
REASON_ID_MISMATCH = "Ticket ID does not match or could not be extracted"
REASON_DATE_TEMPLATE = "Ticket date is outside valid window (must be within last {days} days)"


class TicketVerifier:
    """Stateless verifier for user-submitted ticket identifiers."""

    def __init__(
        self,
        validity_window_days: int = DEFAULT_VALIDITY_WINDOW_DAYS,
        max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
    ):
        self.validity_window_days = validity_window_days
        self.max_edit_distance = max_edit_distance

    def verify(
        self,
        ticket_identifier: Optional[str],
        reference_time: Optional[datetime] = None,
        ticket_date: Optional[datetime] = None,
        extracted_text: Optional[str] = None,
    ) -> VerificationResult:
        """
        Verify a user-entered ticket identifier.

        ``extracted_text`` is the text read off the ticket image. Without it the
        identifier itself is scanned, which simulates OCR. No date is read off
        the ticket yet, so ``ticket_date`` defaults to the reference time and
        the window check passes; a date extractor should pass its value here.
        """
        now = reference_time or datetime.now(timezone.utc)
        source_text = ticket_identifier if extracted_text is None else extracted_text
        extracted_id = extract_identifier(source_text)

        id_matches = identifiers_match(
            extracted_id, ticket_identifier, max_distance=self.max_edit_distance
        )
        date_ok = is_within_validity_window(
            ticket_date or now, now, window_days=self.validity_window_days
        )

        if not date_ok:
            result = VerificationResult(
                status=VerificationStatus.INVALID,
                reason=REASON_DATE_TEMPLATE.format(days=self.validity_window_days),
                extracted_id=extracted_id,
            )
        elif not id_matches:
            result = VerificationResult(
                status=VerificationStatus.INVALID,
                reason=REASON_ID_MISMATCH,
                extracted_id=extracted_id,
            )
        else:
            result = VerificationResult(
                status=VerificationStatus.VALID,
                reason=REASON_VERIFIED,
                extracted_id=extracted_id,
            )

        logger.debug(
            "Ticket verified",
            extra={"status": result.status.value, "extracted_id": extracted_id},
        )
        return result
