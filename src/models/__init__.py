"""Pydantic models for API payloads."""

from models.verification import (  # noqa: F401
    TicketVerificationRecord,
    TicketVerificationRequest,
    VerificationResponse,
    VerificationResult,
    VerificationStatus,
)
