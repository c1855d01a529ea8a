"""S3 repository for uploaded ticket images."""

from typing import Optional
import boto3


class S3Repository:
    """Minimal helper around S3 for image uploads and public links."""

    def __init__(
        self,
        bucket_name: str,
        region: str = "eu-west-2",
        public_base_url: Optional[str] = None,
    ):
        self.bucket_name = bucket_name
        self.region = region
        self.public_base_url = public_base_url
        self.client = boto3.client("s3")

    def upload_bytes(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        """Upload raw bytes under ``key``."""
        params = {"Bucket": self.bucket_name, "Key": key, "Body": content}
        if content_type:
            params["ContentType"] = content_type
        self.client.put_object(**params)

    def public_url(self, key: str) -> str:
        """Return the public URL of an object (CloudFront/base URL if configured)."""
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"
