"""
Ticket verification handler for POST /tickets/verify.

The handler only parses and answers HTTP; uploading, verifying and saving
live in TicketSubmissionService.
"""

from __future__ import annotations

import base64
import json
import uuid
from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from models.verification import TicketVerificationRequest
from utils.error_handling import AppError, json_response, to_response, CORS_HEADERS
from utils.logging_config import get_logger

logger = get_logger(__name__)

MISSING_FIELDS_REASON = "Missing required fields"

# Lazy-loaded service to avoid import-time AWS/DB connections
_submission_service: Optional["TicketSubmissionService"] = None


def _get_submission_service():
    """Lazy-load TicketSubmissionService."""
    global _submission_service
    if _submission_service is None:
        from repositories.postgres_repo import PostgresRepository, get_db_engine
        from repositories.s3_repo import S3Repository
        from repositories.verification_repo import TicketVerificationRepository
        from services.ticket_submission_service import TicketSubmissionService
        from services.verification_service import TicketVerifier
        from utils.config import RuntimeSettings

        settings = RuntimeSettings.from_environment()
        engine = get_db_engine()
        repository = (
            TicketVerificationRepository(PostgresRepository(engine)) if engine else None
        )
        _submission_service = TicketSubmissionService(
            storage=S3Repository(
                settings.ticket_images_bucket,
                region=settings.aws_region,
                public_base_url=settings.public_bucket_url,
            ),
            repository=repository,
            verifier=TicketVerifier(
                validity_window_days=settings.validity_window_days,
                max_edit_distance=settings.max_edit_distance,
            ),
        )
    return _submission_service


def _parse_body(event: Dict) -> Dict:
    raw = event.get("body") or "{}"
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    return json.loads(raw)


def preflight_handler(event, context) -> Dict:
    """Answer CORS preflight requests."""
    return {"statusCode": 200, "headers": dict(CORS_HEADERS), "body": ""}


def lambda_handler(event, context) -> Dict:
    """Handle POST /tickets/verify."""
    correlation_id = str(uuid.uuid4())

    try:
        request = TicketVerificationRequest.model_validate(_parse_body(event))
    except (PydanticValidationError, ValueError) as exc:
        logger.info(
            "Rejected ticket submission",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return json_response(400, {"valid": False, "reason": MISSING_FIELDS_REASON})

    try:
        response = _get_submission_service().submit(request)
    except AppError as exc:
        logger.warning(
            "Ticket verification failed",
            extra={"correlation_id": correlation_id, "review_id": request.review_id},
        )
        return to_response(exc)
    except Exception as exc:
        logger.exception(
            "Verification error",
            extra={"correlation_id": correlation_id, "review_id": request.review_id},
        )
        return json_response(500, {"valid": False, "reason": str(exc) or "Unknown error"})

    logger.info(
        "Ticket verification served",
        extra={
            "correlation_id": correlation_id,
            "review_id": request.review_id,
            "valid": response.valid,
        },
    )
    return json_response(200, response.model_dump(by_alias=True))
