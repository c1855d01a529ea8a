"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when a submission is missing required fields."""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message, status_code=400)


class StorageUploadError(AppError):
    """Raised when the ticket image cannot be written to object storage."""

    def __init__(self, message: str = "Failed to upload ticket image"):
        super().__init__(message, status_code=500)


class PersistenceError(AppError):
    """Raised when the verification row cannot be saved."""

    def __init__(self, message: str = "Failed to save verification"):
        super().__init__(message, status_code=500)


def json_response(status: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response with CORS headers."""
    return {
        "statusCode": status,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return json_response(error.status_code, {"valid": False, "reason": str(error)})
