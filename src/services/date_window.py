"""Recency check for ticket dates."""

from datetime import datetime, timedelta, timezone

DEFAULT_VALIDITY_WINDOW_DAYS = 60


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so aware and naive values compare."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def is_within_validity_window(
    ticket_date: datetime,
    reference_time: datetime,
    window_days: int = DEFAULT_VALIDITY_WINDOW_DAYS,
) -> bool:
    """True when the ticket is no older than ``window_days`` before ``reference_time``.

    Future-dated tickets pass; there is no upper bound.
    """
    earliest = as_utc(reference_time) - timedelta(days=window_days)
    return as_utc(ticket_date) >= earliest
