"""Tests for the markup service."""

from __future__ import annotations

import pytest

from core.exceptions import NoContentError, ValidationError
from core.providers.types import ImagePart
from features.generation.prompts import CANVAS_INSTRUCTIONS, MARKUP_PREAMBLE, REFERENCE_INSTRUCTIONS
from features.markup.service import MarkupService, markup_strength, resolve_markup_model
from tests.helpers import FakeContentProvider, RecordingProviderFactory, make_png_data_url, text_result


def _markup_provider(reply: str) -> FakeContentProvider:
    return FakeContentProvider(
        model="gemini-3-flash-preview",
        image_output=False,
        results=[text_result(reply)],
    )


@pytest.mark.asyncio
async def test_minimal_request_returns_unfenced_markup() -> None:
    provider = _markup_provider("```html\n<div class=\"p-4\">Hi</div>\n```")
    factory = RecordingProviderFactory(provider)

    result = await MarkupService(provider_factory=factory).generate_markup(
        prompt="A greeting card", width=400, height=300
    )

    assert result.ui_code == '<div class="p-4">Hi</div>'
    assert (result.width, result.height) == (400, 300)
    assert result.provider_id == "primary"
    assert factory.calls == [("primary", "gemini-3-flash-preview")]

    call = provider.calls[0]
    parts = call.contents[0].parts
    assert parts[0].text == MARKUP_PREAMBLE
    assert "A greeting card" in parts[1].text
    assert "400x300px" in parts[-1].text
    assert len(parts) == 3
    assert call.config.temperature == 0.85
    assert call.config.max_output_tokens == 16384


@pytest.mark.asyncio
async def test_missing_dimensions_raise_validation_error() -> None:
    service = MarkupService(provider_factory=RecordingProviderFactory(_markup_provider("x")))

    with pytest.raises(ValidationError) as exc_info:
        await service.generate_markup(prompt="form", width=None, height=None)

    assert exc_info.value.field == "canvasDimensions"


@pytest.mark.asyncio
async def test_missing_prompt_raises_validation_error() -> None:
    service = MarkupService(provider_factory=RecordingProviderFactory(_markup_provider("x")))

    with pytest.raises(ValidationError):
        await service.generate_markup(prompt="", width=100, height=100)


@pytest.mark.asyncio
async def test_canvas_and_references_are_framed_and_capped() -> None:
    provider = _markup_provider("<section/>")
    references = [make_png_data_url() for _ in range(7)]

    await MarkupService(provider_factory=RecordingProviderFactory(provider)).generate_markup(
        prompt="Pricing table",
        width=1200,
        height=800,
        canvas_image=make_png_data_url(),
        use_canvas=True,
        reference_images=references,
        canvas_strength=80,
        reference_strength=30,
    )

    call = provider.calls[0]
    parts = call.contents[0].parts
    assert isinstance(parts[2], ImagePart)
    assert parts[3].text == CANVAS_INSTRUCTIONS["strong"]
    assert sum(isinstance(part, ImagePart) for part in parts) == 1 + 5
    assert parts[-2].text == REFERENCE_INSTRUCTIONS["weak"]
    assert call.config.temperature == 0.7


@pytest.mark.asyncio
async def test_empty_reply_raises_no_content() -> None:
    service = MarkupService(provider_factory=RecordingProviderFactory(_markup_provider("```\n```")))

    with pytest.raises(NoContentError):
        await service.generate_markup(prompt="menu", width=320, height=480)


def test_resolve_markup_model_aliases() -> None:
    assert resolve_markup_model("fast") == "gemini-3-flash-preview"
    assert resolve_markup_model("quality") == "gemini-3-pro-preview"
    assert resolve_markup_model("PRO") == "gemini-3-pro-preview"
    assert resolve_markup_model("unknown") == "gemini-3-flash-preview"
    assert resolve_markup_model(None) == "gemini-3-flash-preview"


def test_markup_strength_uses_strongest_applicable_input() -> None:
    assert markup_strength(has_canvas=False, has_references=False, canvas_strength=90, reference_strength=90) == 50
    assert markup_strength(has_canvas=True, has_references=False, canvas_strength=20, reference_strength=90) == 20
    assert markup_strength(has_canvas=True, has_references=True, canvas_strength=20, reference_strength=90) == 90
