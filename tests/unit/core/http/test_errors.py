"""Tests for structured error payloads."""

from core.exceptions import (
    ConfigurationError,
    NoContentError,
    NoImageDataError,
    ProviderError,
    ServiceError,
    ValidationError,
)
from core.http.errors import (
    format_configuration_error,
    format_provider_error,
    format_service_error,
    format_validation_error,
)


def test_validation_payload():
    payload = format_validation_error(ValidationError("Prompt is required", field="prompt"))

    assert payload == {
        "error": "Prompt is required",
        "type": "validation_error",
        "context": {"field": "prompt"},
    }


def test_configuration_payload_names_key():
    payload = format_configuration_error(
        ConfigurationError("OPENROUTER_API_KEY is not configured", key="OPENROUTER_API_KEY")
    )

    assert payload["type"] == "configuration_error"
    assert payload["context"] == {"key": "OPENROUTER_API_KEY"}


def test_provider_payload_carries_status_and_body():
    payload = format_provider_error(
        ProviderError("upstream failed", provider="gemini", status_code=500, body='{"x": 1}')
    )

    assert payload["type"] == "provider_error"
    assert payload["context"] == {"provider": "gemini", "status_code": 500, "body": '{"x": 1}'}


def test_provider_payload_kinds_for_empty_responses():
    assert format_provider_error(NoContentError("empty"))["type"] == "no_content_error"
    assert format_provider_error(NoImageDataError("no image"))["type"] == "no_image_data_error"
    assert "context" not in format_provider_error(NoContentError("empty"))


def test_service_payload():
    assert format_service_error(ServiceError("boom")) == {"error": "boom", "type": "service_error"}
