"""Provider-agnostic multimodal content model.

A request is an ordered list of :class:`Content` entries, each an ordered list
of parts. A part is either :class:`TextPart` or :class:`ImagePart` (mime type +
base64 payload). Part order is replayed verbatim to the provider, so text that
frames an image must sit directly before or after it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True, slots=True)
class TextPart:
    """Plain text segment of a message."""

    text: str


@dataclass(frozen=True, slots=True)
class ImagePart:
    """Inline binary segment of a message (base64 encoded)."""

    mime_type: str
    data: str


Part = Union[TextPart, ImagePart]


@dataclass(slots=True)
class Content:
    """One role-tagged message."""

    role: str
    parts: List[Part] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Sampling options; ``None`` fields are never sent to a provider."""

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    max_output_tokens: Optional[int] = None

    def present_fields(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly set."""

        return {
            name: value
            for name, value in (
                ("temperature", self.temperature),
                ("top_p", self.top_p),
                ("top_k", self.top_k),
                ("max_output_tokens", self.max_output_tokens),
            )
            if value is not None
        }


@dataclass(slots=True)
class GenerateContentResult:
    """Normalised provider response.

    ``candidate_parts`` holds the parts of the first candidate; ``text``
    concatenates its text parts.
    """

    candidate_parts: List[Part] = field(default_factory=list)
    model: Optional[str] = None

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.candidate_parts if isinstance(part, TextPart))

    def first_image(self) -> Optional[ImagePart]:
        for part in self.candidate_parts:
            if isinstance(part, ImagePart):
                return part
        return None


__all__ = [
    "Content",
    "GenerateContentResult",
    "GenerationConfig",
    "ImagePart",
    "Part",
    "TextPart",
]
