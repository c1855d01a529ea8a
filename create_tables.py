#!/usr/bin/env python3
"""Create the ticket_verifications table in the configured database."""

import sys

sys.path.insert(0, "src")

from repositories.postgres_repo import PostgresRepository, get_db_engine  # noqa: E402
from repositories.verification_repo import TicketVerificationRepository  # noqa: E402


def main():
    engine = get_db_engine()
    if engine is None:
        print("Set DATABASE_URL or DB_SECRET_ARN before running this script.")
        sys.exit(1)

    try:
        TicketVerificationRepository(PostgresRepository(engine)).create_table()
    except Exception as e:
        print(f"Error creating table: {e}")
        sys.exit(1)

    print("Table ticket_verifications is ready.")


if __name__ == "__main__":
    main()
