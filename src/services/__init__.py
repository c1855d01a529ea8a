"""Business logic services used by handlers.

The verification core (extraction, matching, date window) has no I/O and is
safe to import anywhere. The submission service pulls in boto3 and
SQLAlchemy, so handlers load it lazily.
"""

# Do NOT import the submission service here - use lazy loading in handlers instead
