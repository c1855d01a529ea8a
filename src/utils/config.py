"""
Runtime settings for the verification Lambda.

Read once per cold start; every value has a default so local runs and
tests work without any environment set up.
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class RuntimeSettings:
    """Values the handler and services read from the Lambda environment."""

    environment: str = "dev"
    aws_region: str = "eu-west-2"

    # Object storage for uploaded ticket images
    ticket_images_bucket: str = "ticket-images"
    public_bucket_url: Optional[str] = None

    # Verification thresholds
    validity_window_days: int = 60
    max_edit_distance: int = 2

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            aws_region=os.environ.get("AWS_REGION", "eu-west-2"),
            ticket_images_bucket=os.environ.get("TICKET_IMAGES_BUCKET", "ticket-images"),
            public_bucket_url=os.environ.get("PUBLIC_BUCKET_URL") or None,
            validity_window_days=int(os.environ.get("VALIDITY_WINDOW_DAYS", "60")),
            max_edit_distance=int(os.environ.get("MAX_EDIT_DISTANCE", "2")),
        )
