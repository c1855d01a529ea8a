"""
Ticket submission workflow.

Stores the uploaded image, verifies the user-entered identifier and records
the outcome. All I/O lives here; the verifier stays pure.
"""

from __future__ import annotations

import base64
import binascii
import time
from datetime import datetime, timezone
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.exc import SQLAlchemyError

from models.verification import (
    TicketVerificationRecord,
    TicketVerificationRequest,
    VerificationResponse,
)
from repositories.s3_repo import S3Repository
from repositories.verification_repo import TicketVerificationRepository
from services.date_window import as_utc
from services.verification_service import TicketVerifier
from utils.error_handling import PersistenceError, StorageUploadError, ValidationError
from utils.logging_config import get_logger
from utils.validators import ensure_present

logger = get_logger(__name__)


def build_image_key(review_id: str, file_name: str, now_ms: Optional[int] = None) -> str:
    """Object key ``{review_id}-{epoch_ms}.{extension}``."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    extension = file_name.rsplit(".", 1)[-1]
    return f"{review_id}-{stamp}.{extension}"


def decode_image(encoded: str) -> bytes:
    """Decode a base64 image payload, rejecting malformed input."""
    try:
        content = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("ticket_image must be base64-encoded") from exc
    ensure_present(content, "ticket_image")
    return content


class TicketSubmissionService:
    """Upload, verify and persist a ticket submission."""

    def __init__(
        self,
        storage: S3Repository,
        repository: Optional[TicketVerificationRepository],
        verifier: Optional[TicketVerifier] = None,
    ):
        self.storage = storage
        self.repository = repository
        self.verifier = verifier or TicketVerifier()

    def submit(
        self,
        request: TicketVerificationRequest,
        reference_time: Optional[datetime] = None,
    ) -> VerificationResponse:
        """Run the full submission flow and return the client response."""
        now = reference_time or datetime.now(timezone.utc)
        content = decode_image(request.ticket_image)

        key = build_image_key(request.review_id, request.ticket_image_name)
        try:
            self.storage.upload_bytes(key, content, content_type=request.content_type)
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Ticket image upload failed",
                extra={"review_id": request.review_id, "key": key, "error": str(exc)},
            )
            raise StorageUploadError() from exc

        image_url = self.storage.public_url(key)
        result = self.verifier.verify(
            request.ticket_identifier,
            reference_time=now,
            extracted_text=request.ticket_text,
        )

        record = TicketVerificationRecord(
            review_id=request.review_id,
            ticket_image_url=image_url,
            ticket_identifier=request.ticket_identifier,
            extracted_ticket_id=result.extracted_id,
            validation_status=result.status,
            validation_reason=result.reason,
            ticket_date=as_utc(now).date(),
        )
        self._save(record)

        logger.info(
            "Ticket verification stored",
            extra={
                "review_id": request.review_id,
                "status": result.status.value,
                "extracted_id": result.extracted_id,
            },
        )
        return result.to_response()

    def _save(self, record: TicketVerificationRecord) -> None:
        if self.repository is None:
            logger.error("No database configured", extra={"review_id": record.review_id})
            raise PersistenceError()
        try:
            self.repository.insert(record)
        except SQLAlchemyError as exc:
            logger.error(
                "Verification insert failed",
                extra={"review_id": record.review_id, "error": str(exc)},
            )
            raise PersistenceError() from exc
