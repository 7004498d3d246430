"""Response models for FastAPI endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialise with camelCase keys, omitting unset optional fields."""

        return self.model_dump(by_alias=True, exclude_none=True)


class GenerateImageResponse(_CamelResponse):
    """Response payload for image synthesis.

    ``image_url`` is absent when the provider cannot produce images; the
    ``enhanced_prompt`` and ``message`` explain what was returned instead.
    """

    success: bool = True
    image_url: Optional[str] = None
    model: str
    enhanced_prompt: Optional[str] = None
    output_width: int
    output_height: int
    source_mime_type: Optional[str] = None
    provider: str
    message: Optional[str] = None


class GenerateMarkupResponse(_CamelResponse):
    """Response payload for markup synthesis."""

    success: bool = True
    ui_code: str
    output_width: int
    output_height: int
    provider: str


class ProvidersResponse(_CamelResponse):
    """Configured providers and the default identifier."""

    providers: List[str]
    default: str


__all__ = [
    "GenerateImageResponse",
    "GenerateMarkupResponse",
    "ProvidersResponse",
]
