"""Tests for configuration, error responses and validators."""

import json
import logging

import pytest

from utils.config import RuntimeSettings
from utils.error_handling import (
    AppError,
    PersistenceError,
    StorageUploadError,
    ValidationError,
    json_response,
    to_response,
)
from utils.logging_config import get_logger
from utils.validators import ensure_present


class TestRuntimeSettings:

    def test_defaults(self, monkeypatch):
        for name in (
            "TICKET_IMAGES_BUCKET",
            "PUBLIC_BUCKET_URL",
            "VALIDITY_WINDOW_DAYS",
            "MAX_EDIT_DISTANCE",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = RuntimeSettings.from_environment()
        assert settings.ticket_images_bucket == "ticket-images"
        assert settings.public_bucket_url is None
        assert settings.validity_window_days == 60
        assert settings.max_edit_distance == 2

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TICKET_IMAGES_BUCKET", "prod-tickets")
        monkeypatch.setenv("PUBLIC_BUCKET_URL", "https://cdn.example.com")
        monkeypatch.setenv("VALIDITY_WINDOW_DAYS", "30")
        monkeypatch.setenv("MAX_EDIT_DISTANCE", "1")

        settings = RuntimeSettings.from_environment()
        assert settings.ticket_images_bucket == "prod-tickets"
        assert settings.public_bucket_url == "https://cdn.example.com"
        assert settings.validity_window_days == 30
        assert settings.max_edit_distance == 1


class TestErrorHandling:

    @pytest.mark.parametrize(
        "error, status, reason",
        [
            (ValidationError(), 400, "Missing required fields"),
            (StorageUploadError(), 500, "Failed to upload ticket image"),
            (PersistenceError(), 500, "Failed to save verification"),
            (AppError("Teapot", status_code=418), 418, "Teapot"),
        ],
    )
    def test_to_response(self, error, status, reason):
        resp = to_response(error)
        assert resp["statusCode"] == status
        assert json.loads(resp["body"]) == {"valid": False, "reason": reason}

    def test_json_response_carries_cors_headers(self):
        resp = json_response(200, {"ok": True})
        assert resp["headers"]["Content-Type"] == "application/json"
        assert resp["headers"]["Access-Control-Allow-Origin"] == "*"


class TestValidators:

    @pytest.mark.parametrize("value", [None, "", b"", []])
    def test_ensure_present_rejects_empty(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ensure_present(value, "ticket_image")
        assert str(exc_info.value) == "ticket_image is required"

    def test_ensure_present_accepts_value(self):
        ensure_present(b"img", "ticket_image")


def test_get_logger_configures_one_handler(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    logger = get_logger("tests.logging")
    again = get_logger("tests.logging")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_log_level_comes_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_logger("tests.logging.debug").level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    assert get_logger("tests.logging.unknown").level == logging.INFO


def test_records_carry_service_fields(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    logger = get_logger("tests.logging.fields")
    record = logger.makeRecord(
        logger.name, logging.INFO, __file__, 1, "Ticket verified", None, None,
        extra={"review_id": "rev-1"},
    )

    payload = json.loads(logger.handlers[0].formatter.format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "Ticket verified"
    assert payload["service"] == "ticket-verification"
    assert payload["environment"] == "staging"
    assert payload["review_id"] == "rev-1"
    assert "timestamp" in payload
