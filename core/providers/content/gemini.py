"""Google Gemini content provider.

Part handling:
    - ``TextPart``  -> ``types.Part(text=...)``
    - ``ImagePart`` -> ``types.Part(inline_data=types.Blob(...))`` (lossless)
    - ``system`` role entries -> ``system_instruction`` on the request config

Response parts carrying ``inline_data`` come back as ``ImagePart``; thought
parts are skipped.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from google import genai
from google.genai import errors as genai_errors  # type: ignore
from google.genai import types  # type: ignore

from config.generation.models import DEFAULT_GEMINI_MODEL, gemini_model_outputs_images
from core.exceptions import NoContentError, ProviderError
from core.providers.base import BaseContentProvider
from core.providers.capabilities import ProviderCapabilities
from core.providers.types import (
    Content,
    GenerateContentResult,
    GenerationConfig,
    ImagePart,
    Part,
    TextPart,
)

logger = logging.getLogger(__name__)

_SYSTEM_ROLE = "system"


class GeminiContentProvider(BaseContentProvider):
    """Generate text and images through the Gemini ``generate_content`` API."""

    provider_name = "gemini"

    def __init__(self, api_key: str, model: str | None = None, client: Any = None) -> None:
        self.model = (model or DEFAULT_GEMINI_MODEL).strip()
        self.client = client if client is not None else genai.Client(api_key=api_key)
        self.capabilities = ProviderCapabilities(
            image_input=True,
            image_output=gemini_model_outputs_images(self.model),
        )

    async def generate_content(
        self,
        contents: Sequence[Content],
        config: Optional[GenerationConfig] = None,
    ) -> GenerateContentResult:
        try:
            system_instruction, sdk_contents = to_sdk_contents(contents)
        except (binascii.Error, ValueError) as exc:
            logger.error("Gemini request could not be built: %s", exc)
            raise ProviderError(
                f"Gemini request could not be built: {exc}",
                provider=self.provider_name,
                original_error=exc,
                body=str(exc),
            ) from exc
        sdk_config = build_sdk_config(config, system_instruction)

        logger.info(
            "Calling Gemini generate_content (model=%s, messages=%d, parts=%d)",
            self.model,
            len(sdk_contents),
            sum(len(item.parts or []) for item in sdk_contents),
        )

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.model,
                contents=sdk_contents,
                config=sdk_config,
            )
        except genai_errors.APIError as exc:
            body = json.dumps(exc.details) if getattr(exc, "details", None) else str(exc)
            logger.error("Gemini API error %s: %s", getattr(exc, "code", None), body)
            raise ProviderError(
                f"Gemini API error {getattr(exc, 'code', '')}: {getattr(exc, 'message', None) or exc}",
                provider=self.provider_name,
                original_error=exc,
                status_code=getattr(exc, "code", None),
                body=body,
            ) from exc
        except Exception as exc:  # pragma: no cover - transport failures
            logger.error("Gemini request failed: %s", exc)
            raise ProviderError(
                f"Gemini request failed: {exc}",
                provider=self.provider_name,
                original_error=exc,
            ) from exc

        return parse_sdk_response(response, model=self.model, provider=self.provider_name)


def to_sdk_contents(contents: Sequence[Content]) -> Tuple[Optional[str], List[types.Content]]:
    """Translate the content model into SDK objects.

    Returns the joined system instruction (if any) and the remaining messages.
    """

    system_chunks: List[str] = []
    sdk_contents: List[types.Content] = []

    for content in contents:
        if content.role == _SYSTEM_ROLE:
            system_chunks.extend(
                part.text for part in content.parts if isinstance(part, TextPart) and part.text
            )
            continue
        sdk_contents.append(
            types.Content(role=content.role, parts=[_to_sdk_part(part) for part in content.parts])
        )

    system_instruction = "\n\n".join(system_chunks) or None
    return system_instruction, sdk_contents


def _to_sdk_part(part: Part) -> types.Part:
    if isinstance(part, ImagePart):
        return types.Part(
            inline_data=types.Blob(
                mime_type=part.mime_type,
                data=base64.b64decode(part.data),
            )
        )
    return types.Part(text=part.text)


def build_sdk_config(
    config: Optional[GenerationConfig],
    system_instruction: Optional[str] = None,
) -> Optional[types.GenerateContentConfig]:
    """Return a config carrying only the explicitly set fields."""

    kwargs = config.present_fields() if config else {}
    if system_instruction:
        kwargs["system_instruction"] = system_instruction
    if not kwargs:
        return None
    return types.GenerateContentConfig(**kwargs)


def parse_sdk_response(response: Any, *, model: str, provider: str = "gemini") -> GenerateContentResult:
    """Normalise a ``generate_content`` response into the content model."""

    candidates = getattr(response, "candidates", None)
    if not candidates:
        feedback = getattr(response, "prompt_feedback", None)
        raise NoContentError(
            f"Gemini returned no candidates{f' ({feedback})' if feedback else ''}",
            provider=provider,
        )

    parts = [part for part in _convert_parts(_candidate_parts(candidates[0])) if part is not None]
    if not parts:
        finish_reason = getattr(candidates[0], "finish_reason", None)
        raise NoContentError(
            f"Gemini candidate contained no content (finish_reason={finish_reason})",
            provider=provider,
        )

    return GenerateContentResult(candidate_parts=parts, model=model)


def _candidate_parts(candidate: Any) -> Iterable[Any]:
    content = getattr(candidate, "content", None)
    return getattr(content, "parts", None) or []


def _convert_parts(sdk_parts: Iterable[Any]) -> Iterable[Optional[Part]]:
    for sdk_part in sdk_parts:
        if getattr(sdk_part, "thought", False):
            yield None
            continue

        inline_data = getattr(sdk_part, "inline_data", None)
        if inline_data is not None and getattr(inline_data, "data", None):
            data = inline_data.data
            encoded = base64.b64encode(data).decode("utf-8") if isinstance(data, bytes) else str(data)
            yield ImagePart(
                mime_type=getattr(inline_data, "mime_type", None) or "image/png",
                data=encoded,
            )
            continue

        text = getattr(sdk_part, "text", None)
        yield TextPart(text=text) if text else None


__all__ = [
    "GeminiContentProvider",
    "build_sdk_config",
    "parse_sdk_response",
    "to_sdk_contents",
]
