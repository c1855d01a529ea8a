"""
Environment-specific configuration settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Ticket image storage
    images_bucket_name: str = "ticket-images"

    # Verification thresholds passed to the Lambda
    validity_window_days: int = 60
    max_edit_distance: int = 2

    # Database Configuration (Cost-optimized)
    db_instance_class: str = "t3.micro"  # Free tier eligible
    db_allocated_storage: int = 20  # Minimum GB

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 15

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", "eu-west-2")
        bucket = os.environ.get("TICKET_IMAGES_BUCKET", "ticket-images")

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                images_bucket_name=bucket,
                db_instance_class="t3.small",
                db_allocated_storage=50,
                lambda_memory_mb=512,
                lambda_timeout_seconds=30,
            )

        return cls(environment=env, aws_region=region, images_bucket_name=bucket)
