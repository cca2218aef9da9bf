"""Tests for the HTTP validation endpoints."""

import struct

import pytest
from fastapi.testclient import TestClient

from datastream_validator.main import create_app

TIFF = b"II*\x00\x08\x00\x00\x00" + b"\x00" * 8


@pytest.fixture
def client():
    """Test client for a fresh app instance."""
    with TestClient(create_app()) as test_client:
        yield test_client


def upload(client, content, **fields):
    return client.post(
        "/api/v1/validate",
        files={"file": ("datastream.bin", content, "application/octet-stream")},
        data=fields,
    )


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestFormats:

    def test_lists_formats(self, client):
        response = client.get("/api/v1/formats")

        assert response.status_code == 200
        assert "wav" in response.json()["formats"]


class TestValidate:

    def test_explicit_format(self, client):
        response = upload(client, TIFF, format="tiff", dsid="OBJ")

        assert response.status_code == 200
        body = response.json()
        assert body["dsid"] == "OBJ"
        assert body["format"] == "tiff"
        assert body["passed"] is True
        assert len(body["results"]) == 1
        assert "Intel" in body["results"][0]["message"]

    def test_structural_failure_is_not_an_http_error(self, client):
        response = upload(client, b"\x00" * 16, format="tiff")

        assert response.status_code == 200
        assert response.json()["passed"] is False

    def test_auto_detects_format(self, client):
        wav_header = (
            b"RIFF" + struct.pack("<I", 36) + b"WAVEfmt "
            + struct.pack("<IHHIIHH", 16, 1, 1, 8000, 16000, 2, 16)
            + b"data" + struct.pack("<I", 0)
        )
        response = upload(client, wav_header)

        assert response.status_code == 200
        body = response.json()
        assert body["format"] == "wav"
        assert len(body["results"]) == 7

    def test_auto_detect_failure(self, client):
        response = upload(client, b"plain text that matches nothing")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_format(self, client):
        response = upload(client, TIFF, format="bmp")

        assert response.status_code == 400
        assert "bmp" in response.json()["detail"]

    def test_text_params(self, client):
        response = upload(
            client,
            b"the cat sat with a cat and another cat",
            format="text",
            dsid="OCR",
            text_substring="cat",
            text_count="3",
        )

        assert response.status_code == 200
        assert response.json()["passed"] is True

    def test_upload_too_large(self, client):
        app = client.app
        from datastream_validator.config import Settings, get_settings

        app.dependency_overrides[get_settings] = lambda: Settings(max_upload_size=4)
        try:
            response = upload(client, TIFF, format="tiff")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert "exceeds maximum" in response.json()["detail"]


class TestErrorHandlers:

    def test_registered_handlers(self):
        from datastream_validator.utils.exceptions import (
            DatastreamNotFoundError,
            DatastreamValidatorError,
            ValidationError,
        )

        handlers = create_app().exception_handlers

        assert ValidationError in handlers
        assert DatastreamValidatorError in handlers
        # Missing datastreams are reported as failed results, not HTTP errors
        assert DatastreamNotFoundError not in handlers
