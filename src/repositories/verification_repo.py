"""Persistence for ticket verification results."""

from models.verification import TicketVerificationRecord
from repositories.postgres_repo import PostgresRepository

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS ticket_verifications (
    id BIGSERIAL PRIMARY KEY,
    review_id TEXT NOT NULL,
    ticket_image_url TEXT NOT NULL,
    ticket_identifier TEXT,
    extracted_ticket_id TEXT NOT NULL DEFAULT '',
    validation_status TEXT NOT NULL
        CHECK (validation_status IN ('valid', 'invalid', 'pending')),
    validation_reason TEXT NOT NULL,
    ticket_date DATE NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
)
"""

INSERT_SQL = """
INSERT INTO ticket_verifications (
    review_id, ticket_image_url, ticket_identifier, extracted_ticket_id,
    validation_status, validation_reason, ticket_date
) VALUES (
    :review_id, :ticket_image_url, :ticket_identifier, :extracted_ticket_id,
    :validation_status, :validation_reason, :ticket_date
)
"""


class TicketVerificationRepository:
    """Schema and write helpers for the ticket_verifications table."""

    def __init__(self, postgres: PostgresRepository):
        self.postgres = postgres

    def create_table(self) -> None:
        self.postgres.execute(CREATE_TABLE_SQL)

    def insert(self, record: TicketVerificationRecord) -> None:
        """Insert one verification row."""
        params = record.model_dump(mode="json")
        self.postgres.execute(INSERT_SQL, params)
