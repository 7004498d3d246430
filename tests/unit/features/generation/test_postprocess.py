"""Tests for response post-processing."""

from __future__ import annotations

import base64

import pytest

from core.exceptions import NoImageDataError
from core.providers.types import GenerateContentResult, ImagePart, TextPart
from features.generation.postprocess import (
    decode_image_part,
    find_image_part,
    resize_cover,
    resize_cover_sync,
    strip_code_fences,
)
from tests.helpers import image_size, make_png_bytes


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("```html\n<div>x</div>\n```", "<div>x</div>"),
        ("```\n<div>x</div>\n```", "<div>x</div>"),
        ("  <div>x</div>  ", "<div>x</div>"),
        ("```html\n```html\n<p/>\n```\n```", "<p/>"),
    ],
)
def test_strip_code_fences(raw, expected) -> None:
    assert strip_code_fences(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["```html\n<div>x</div>", "<div>x</div>\n```", "<pre>```code```</pre>", "", "```html\n<a/>\n```"],
)
def test_strip_code_fences_is_idempotent(raw) -> None:
    once = strip_code_fences(raw)

    assert strip_code_fences(once) == once


def test_partial_fences_are_left_alone() -> None:
    assert strip_code_fences("```html\n<div>x</div>") == "```html\n<div>x</div>"


def test_find_image_part_raises_with_text_preview() -> None:
    result = GenerateContentResult(candidate_parts=[TextPart(text="I cannot draw that")])

    with pytest.raises(NoImageDataError) as exc_info:
        find_image_part(result, provider="gemini")

    assert "I cannot draw that" in str(exc_info.value)
    assert exc_info.value.provider == "gemini"


def test_find_image_part_returns_first_image() -> None:
    first = ImagePart(mime_type="image/png", data="AAAA")
    result = GenerateContentResult(
        candidate_parts=[TextPart(text="t"), first, ImagePart(mime_type="image/jpeg", data="BBBB")]
    )

    assert find_image_part(result) is first


def test_resize_cover_produces_exact_png_size() -> None:
    resized = resize_cover_sync(make_png_bytes(1024, 1024), 1024, 576)

    assert resized.startswith(b"\x89PNG")
    assert image_size(resized) == (1024, 576)


@pytest.mark.asyncio
async def test_resize_cover_runs_off_loop_and_upscales() -> None:
    resized = await resize_cover(make_png_bytes(100, 50), 400, 300)

    assert image_size(resized) == (400, 300)


def test_resize_cover_rejects_undecodable_bytes() -> None:
    with pytest.raises(NoImageDataError):
        resize_cover_sync(b"not an image", 64, 64)


def test_decode_image_part() -> None:
    part = ImagePart(mime_type="image/png", data=base64.b64encode(b"abc").decode())

    assert decode_image_part(part) == b"abc"
