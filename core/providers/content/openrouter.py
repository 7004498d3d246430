"""OpenRouter content provider (OpenAI-compatible chat completions).

Part handling:
    - ``TextPart``  -> ``{"type": "text", "text": ...}``
    - ``ImagePart`` -> ``{"type": "image_url", "image_url": {"url": "data:<mime>;base64,<data>"}}``
      for vision models. For models listed as text-only the image is replaced
      by a ``{"type": "text"}`` placeholder holding the mime type, payload size
      and the first characters of the payload. Image content never reaches a
      text-only model.
    - ``system`` role entries are sent as ``system`` messages.

Responses are flattened into a single ``TextPart``; ``message.images`` data
URLs (returned by image-capable routes) become ``ImagePart`` entries. The
provider itself advertises no native image generation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from config.generation.models import (
    OPENROUTER_API_URL,
    OPENROUTER_REFERER,
    OPENROUTER_TEXT_ONLY_MODELS,
    OPENROUTER_TIMEOUT_SECONDS,
    OPENROUTER_TITLE,
    openrouter_default_model,
)
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
from core.utils.data_urls import build_data_url, parse_data_url

logger = logging.getLogger(__name__)

IMAGE_PLACEHOLDER_PREVIEW_CHARS = 32

_CONFIG_FIELD_MAP = {
    "temperature": "temperature",
    "top_p": "top_p",
    "top_k": "top_k",
    "max_output_tokens": "max_tokens",
}


class OpenRouterContentProvider(BaseContentProvider):
    """Generate text through OpenRouter's chat completions endpoint."""

    provider_name = "openrouter"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        *,
        api_url: str = OPENROUTER_API_URL,
        timeout: float = OPENROUTER_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key
        self.model = (model or openrouter_default_model()).strip()
        self.api_url = api_url
        self.timeout = timeout
        self.capabilities = ProviderCapabilities(
            image_input=self.model not in OPENROUTER_TEXT_ONLY_MODELS,
            image_output=False,
        )

    async def generate_content(
        self,
        contents: Sequence[Content],
        config: Optional[GenerationConfig] = None,
    ) -> GenerateContentResult:
        payload = self.build_payload(contents, config)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": OPENROUTER_REFERER,
            "X-Title": OPENROUTER_TITLE,
        }

        logger.info(
            "Calling OpenRouter chat completions (model=%s, messages=%d, image_input=%s)",
            self.model,
            len(payload["messages"]),
            self.capabilities.image_input,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("OpenRouter request failed: %s", exc)
            raise ProviderError(
                f"OpenRouter request failed: {exc}",
                provider=self.provider_name,
                original_error=exc,
            ) from exc

        if not 200 <= response.status_code < 300:
            logger.error("OpenRouter API error %s: %s", response.status_code, response.text)
            raise ProviderError(
                f"OpenRouter API error: {response.status_code} - {response.text}",
                provider=self.provider_name,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("OpenRouter returned a non-JSON body: %s", response.text[:200])
            raise ProviderError(
                "OpenRouter returned a non-JSON response",
                provider=self.provider_name,
                original_error=exc,
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if not isinstance(data, dict):
            raise self._unexpected_shape(response)
        try:
            return self.parse_response(data)
        except (AttributeError, TypeError) as exc:
            raise self._unexpected_shape(response) from exc

    def _unexpected_shape(self, response: httpx.Response) -> ProviderError:
        logger.error("OpenRouter response has an unexpected shape: %s", response.text[:200])
        return ProviderError(
            "OpenRouter returned an unexpected response shape",
            provider=self.provider_name,
            status_code=response.status_code,
            body=response.text,
        )

    def build_payload(
        self,
        contents: Sequence[Content],
        config: Optional[GenerationConfig] = None,
    ) -> Dict[str, Any]:
        """Translate the content model into a chat completions request body."""

        messages = [
            {
                "role": content.role,
                "content": [self._to_wire_part(part) for part in content.parts],
            }
            for content in contents
        ]

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "stream": False,
        }
        if config:
            for name, value in config.present_fields().items():
                payload[_CONFIG_FIELD_MAP[name]] = value
        return payload

    def _to_wire_part(self, part: Part) -> Dict[str, Any]:
        if isinstance(part, TextPart):
            return {"type": "text", "text": part.text}
        if not self.capabilities.image_input:
            return {"type": "text", "text": image_placeholder(part)}
        return {
            "type": "image_url",
            "image_url": {"url": build_data_url(part.mime_type or "image/png", part.data)},
        }

    def parse_response(self, data: Dict[str, Any]) -> GenerateContentResult:
        """Normalise a chat completions response into the content model."""

        choices = data.get("choices") or []
        if not choices:
            error = data.get("error")
            raise NoContentError(
                f"OpenRouter returned no choices{f': {error}' if error else ''}",
                provider=self.provider_name,
            )

        message = choices[0].get("message") or {}
        parts: List[Part] = []

        text = _flatten_message_content(message.get("content"))
        if text:
            parts.append(TextPart(text=text))

        for image in message.get("images") or []:
            url = ((image or {}).get("image_url") or {}).get("url")
            if isinstance(url, str) and url.startswith("data:"):
                decoded = parse_data_url(url)
                parts.append(ImagePart(mime_type=decoded.mime_type, data=decoded.data))

        if not parts:
            raise NoContentError(
                f"OpenRouter choice contained no content (finish_reason={choices[0].get('finish_reason')})",
                provider=self.provider_name,
            )

        return GenerateContentResult(candidate_parts=parts, model=data.get("model") or self.model)


def image_placeholder(part: ImagePart) -> str:
    """Describe an image part in text for models that cannot read images."""

    preview = part.data[:IMAGE_PLACEHOLDER_PREVIEW_CHARS]
    return (
        f"[image omitted: {part.mime_type}, {len(part.data)} base64 chars, "
        f"begins {preview}...]"
    )


def _flatten_message_content(content: Any) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(
            str(item.get("text") or "") for item in content if isinstance(item, dict)
        )
    return str(content)


__all__ = ["OpenRouterContentProvider", "image_placeholder"]
