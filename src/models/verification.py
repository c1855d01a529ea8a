"""Pydantic models for ticket verification."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerificationStatus(str, Enum):
    """Outcome of a ticket verification.

    PENDING is reserved for manual review and is not produced by the verifier.
    """

    VALID = "valid"
    INVALID = "invalid"
    PENDING = "pending"


class VerificationResponse(BaseModel):
    """Public response returned to the client."""

    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    reason: str
    extracted_id: str = Field(default="", alias="extractedId")


class VerificationResult(BaseModel):
    """Result of a single verification; built once per request."""

    status: VerificationStatus
    reason: str = Field(min_length=1)
    extracted_id: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID

    def to_response(self) -> VerificationResponse:
        """Collapse the tri-state status to the boolean client contract."""
        return VerificationResponse(
            valid=self.is_valid,
            reason=self.reason,
            extracted_id=self.extracted_id,
        )


class TicketVerificationRequest(BaseModel):
    """Inbound payload for POST /tickets/verify."""

    review_id: str
    ticket_image: str = Field(description="base64-encoded image bytes")
    ticket_image_name: str
    ticket_identifier: Optional[str] = None
    ticket_text: Optional[str] = Field(
        default=None, description="text already read off the image upstream"
    )
    content_type: Optional[str] = None

    @field_validator("review_id", "ticket_image", "ticket_image_name")
    @classmethod
    def validate_required(cls, value: str) -> str:
        """Reject blank strings so no upload happens for an empty submission."""
        cleaned = (value or "").strip()
        if not cleaned:
            raise ValueError("review_id and ticket_image must be provided")
        return cleaned


class TicketVerificationRecord(BaseModel):
    """Row written to the ticket_verifications table."""

    review_id: str
    ticket_image_url: str
    ticket_identifier: Optional[str] = None
    extracted_ticket_id: str
    validation_status: VerificationStatus
    validation_reason: str
    ticket_date: date
