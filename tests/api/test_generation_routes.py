"""HTTP tests for the generation endpoints."""

from __future__ import annotations

import pytest

from features.image.service import ImageService
from features.markup.service import MarkupService
from tests.helpers import FakeContentProvider, RecordingProviderFactory, image_result, make_png_bytes, text_result


@pytest.mark.asyncio
async def test_health(api_client) -> None:
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_generate_without_prompt_is_400(api_client) -> None:
    response = await api_client.post("/api/generate", json={"useCanvas": False})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Prompt is required"
    assert body["type"] == "validation_error"


@pytest.mark.asyncio
async def test_schema_violation_is_400_with_error_message(api_client) -> None:
    response = await api_client.post("/api/generate", json={"prompt": "x", "quality": "ultra"})

    assert response.status_code == 400
    assert "quality" in response.json()["error"]


@pytest.mark.asyncio
async def test_missing_credential_is_500_naming_the_key(api_client, clear_provider_keys) -> None:
    response = await api_client.post("/api/generate", json={"prompt": "A chair"})

    assert response.status_code == 500
    body = response.json()
    assert "GOOGLE_GEMINI_API_KEY" in body["error"]
    assert body["type"] == "configuration_error"
    assert body["context"] == {"key": "GOOGLE_GEMINI_API_KEY"}


@pytest.mark.asyncio
async def test_markup_missing_credential_for_secondary(api_client, clear_provider_keys) -> None:
    response = await api_client.post(
        "/api/generate-ui",
        json={"prompt": "Form", "provider": "secondary", "canvasDimensions": {"width": 10, "height": 10}},
    )

    assert response.status_code == 500
    assert "OPENROUTER_API_KEY" in response.json()["error"]


@pytest.mark.asyncio
async def test_generate_ui_400x300_returns_unfenced_code(api_client, monkeypatch) -> None:
    provider = FakeContentProvider(
        model="gemini-3-flash-preview",
        image_output=False,
        results=[text_result("```html\n<form class=\"grid gap-2\"></form>\n```")],
    )
    factory = RecordingProviderFactory(provider)
    monkeypatch.setattr(
        "features.markup.routes.MarkupService",
        lambda: MarkupService(provider_factory=factory),
    )

    response = await api_client.post(
        "/api/generate-ui",
        json={"prompt": "Login form", "canvasDimensions": {"width": 400, "height": 300}, "model": "pro"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "uiCode": '<form class="grid gap-2"></form>',
        "outputWidth": 400,
        "outputHeight": 300,
        "provider": "primary",
    }
    assert factory.calls == [("primary", "gemini-3-pro-preview")]


@pytest.mark.asyncio
async def test_generate_ui_without_dimensions_is_400(api_client) -> None:
    response = await api_client.post("/api/generate-ui", json={"prompt": "Login form"})

    assert response.status_code == 400
    assert response.json()["type"] == "validation_error"


@pytest.mark.asyncio
async def test_generate_image_response_shape(api_client, monkeypatch) -> None:
    provider = FakeContentProvider(results=[image_result(make_png_bytes(200, 200))])
    monkeypatch.setattr(
        "features.image.routes.ImageService",
        lambda: ImageService(provider_factory=RecordingProviderFactory(provider)),
    )

    response = await api_client.post(
        "/api/generate",
        json={
            "prompt": "A chair",
            "outputMode": "preset",
            "outputLongEdge": 1024,
            "outputAspectRatio": "16:9",
            "provider": "nonsense",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["imageUrl"].startswith("data:image/png;base64,")
    assert (body["outputWidth"], body["outputHeight"]) == (1024, 576)
    assert body["provider"] == "primary"
    assert body["sourceMimeType"] == "image/png"
    assert "enhancedPrompt" not in body


@pytest.mark.asyncio
async def test_generate_image_text_only_provider(api_client, monkeypatch) -> None:
    provider = FakeContentProvider(
        provider_name="openrouter",
        model="z-ai/glm-4.6v",
        image_output=False,
        results=[text_result("A detailed prompt")],
    )
    monkeypatch.setattr(
        "features.image.routes.ImageService",
        lambda: ImageService(provider_factory=RecordingProviderFactory(provider)),
    )

    response = await api_client.post("/api/generate", json={"prompt": "Desk", "provider": "secondary"})

    assert response.status_code == 200
    body = response.json()
    assert "imageUrl" not in body
    assert body["enhancedPrompt"] == "A detailed prompt"
    assert body["provider"] == "secondary"
    assert body["message"]


@pytest.mark.asyncio
async def test_list_providers(api_client, monkeypatch) -> None:
    monkeypatch.delenv("GOOGLE_GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("OPENROUTER_API_KEY", "or-key")

    response = await api_client.get("/api/providers")

    assert response.status_code == 200
    assert response.json() == {"providers": ["secondary"], "default": "primary"}
