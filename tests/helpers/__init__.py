"""Shared fakes and payload builders for the test-suite."""

from __future__ import annotations

import base64
from io import BytesIO
from types import SimpleNamespace
from typing import Any, List, Optional

from PIL import Image

from core.providers.base import BaseContentProvider
from core.providers.capabilities import ProviderCapabilities
from core.providers.types import (
    Content,
    GenerateContentResult,
    GenerationConfig,
    ImagePart,
    TextPart,
)


def make_png_bytes(width: int, height: int, color: tuple = (200, 30, 30)) -> bytes:
    """Return PNG bytes of a solid-colour image."""

    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_png_data_url(width: int = 8, height: int = 8) -> str:
    return "data:image/png;base64," + base64.b64encode(make_png_bytes(width, height)).decode()


def image_size(image_bytes: bytes) -> tuple[int, int]:
    with Image.open(BytesIO(image_bytes)) as image:
        return image.size


class FakeContentProvider(BaseContentProvider):
    """Content provider that records requests and replays queued results."""

    def __init__(
        self,
        *,
        provider_name: str = "gemini",
        model: str = "gemini-2.5-flash-image",
        image_output: bool = True,
        results: Optional[List[Any]] = None,
    ) -> None:
        self.provider_name = provider_name
        self.model = model
        self.capabilities = ProviderCapabilities(
            image_input=True,
            image_output=image_output,
        )
        self.results: List[Any] = list(results or [])
        self.calls: List[SimpleNamespace] = []

    async def generate_content(
        self,
        contents: List[Content],
        config: Optional[GenerationConfig] = None,
    ) -> GenerateContentResult:
        self.calls.append(SimpleNamespace(contents=contents, config=config))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def text_result(text: str) -> GenerateContentResult:
    return GenerateContentResult(candidate_parts=[TextPart(text=text)])


def image_result(image_bytes: bytes, mime_type: str = "image/png") -> GenerateContentResult:
    return GenerateContentResult(
        candidate_parts=[
            ImagePart(mime_type=mime_type, data=base64.b64encode(image_bytes).decode()),
        ]
    )


class RecordingProviderFactory:
    """Stand-in for ``get_content_provider`` handing out fakes in order.

    The last fake is reused once the queue is down to one entry.
    """

    def __init__(self, *providers: FakeContentProvider) -> None:
        self._queue = list(providers)
        self.calls: List[tuple] = []

    def __call__(self, provider_id: Optional[str], model: Optional[str]) -> FakeContentProvider:
        self.calls.append((provider_id, model))
        if len(self._queue) > 1:
            return self._queue.pop(0)
        return self._queue[0]


__all__ = [
    "FakeContentProvider",
    "RecordingProviderFactory",
    "image_result",
    "image_size",
    "make_png_bytes",
    "make_png_data_url",
    "text_result",
]
