"""Business logic for Tailwind markup synthesis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from config.generation.defaults import (
    DEFAULT_STRENGTH,
    MARKUP_MAX_OUTPUT_TOKENS,
    MAX_REFERENCE_IMAGES,
)
from config.generation.models import (
    DEFAULT_MARKUP_MODEL,
    GEMINI_MARKUP_MODELS,
    MARKUP_MODEL_ALIASES,
)
from core.exceptions import NoContentError, ValidationError
from core.providers.base import BaseContentProvider
from core.providers.factory import get_content_provider, resolve_provider_id
from core.providers.types import GenerationConfig
from core.utils.data_urls import DataUrl, parse_data_url
from features.generation.postprocess import strip_code_fences
from features.generation.prompts import build_contents, build_markup_parts
from features.generation.sampling import map_strength_to_temperature

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Optional[str], Optional[str]], BaseContentProvider]


@dataclass(slots=True)
class MarkupGenerationResult:
    provider_id: str
    model: str
    ui_code: str
    width: int
    height: int


def resolve_markup_model(tier: Optional[str]) -> str:
    """Map ``fast`` / ``quality`` (or an alias such as ``pro``) to a model id."""

    normalized = (tier or "").strip().lower() or DEFAULT_MARKUP_MODEL
    normalized = MARKUP_MODEL_ALIASES.get(normalized, normalized)
    return GEMINI_MARKUP_MODELS.get(normalized, GEMINI_MARKUP_MODELS[DEFAULT_MARKUP_MODEL])


def markup_strength(
    *,
    has_canvas: bool,
    has_references: bool,
    canvas_strength: float,
    reference_strength: float,
) -> float:
    """Return the strength that drives sampling: the strongest applicable input."""

    strengths: List[float] = []
    if has_canvas:
        strengths.append(canvas_strength)
    if has_references:
        strengths.append(reference_strength)
    return max(strengths) if strengths else DEFAULT_STRENGTH


class MarkupService:
    """Turn a description and optional sketch into a Tailwind markup fragment."""

    def __init__(self, provider_factory: ProviderFactory | None = None) -> None:
        self._provider_factory = provider_factory or get_content_provider

    async def generate_markup(
        self,
        *,
        prompt: Optional[str],
        width: Optional[float],
        height: Optional[float],
        canvas_image: Optional[str] = None,
        use_canvas: bool = False,
        model: Optional[str] = None,
        reference_images: Sequence[str] = (),
        provider: Optional[str] = None,
        canvas_strength: Optional[float] = None,
        reference_strength: Optional[float] = None,
    ) -> MarkupGenerationResult:
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt is required", field="prompt")
        if not width or not height:
            raise ValidationError("Canvas dimensions are required", field="canvasDimensions")

        output_width = int(round(width))
        output_height = int(round(height))

        resolved = resolve_provider_id(provider)
        content_provider = self._provider_factory(resolved.provider_id, resolve_markup_model(model))

        canvas: Optional[DataUrl] = (
            parse_data_url(canvas_image) if use_canvas and canvas_image else None
        )

        references = [image for image in reference_images if image]
        if len(references) > MAX_REFERENCE_IMAGES:
            logger.warning(
                "Received %d reference images; using the first %d",
                len(references),
                MAX_REFERENCE_IMAGES,
            )
        references = references[:MAX_REFERENCE_IMAGES]

        canvas_strength = DEFAULT_STRENGTH if canvas_strength is None else canvas_strength
        reference_strength = DEFAULT_STRENGTH if reference_strength is None else reference_strength

        parts = build_markup_parts(
            prompt,
            width=output_width,
            height=output_height,
            canvas=canvas,
            reference_images=[parse_data_url(image) for image in references],
            canvas_strength=canvas_strength,
            reference_strength=reference_strength,
        )

        strength = markup_strength(
            has_canvas=canvas is not None,
            has_references=bool(references),
            canvas_strength=canvas_strength,
            reference_strength=reference_strength,
        )
        config = GenerationConfig(
            temperature=map_strength_to_temperature(
                content_provider.provider_name, content_provider.model, strength
            ),
            max_output_tokens=MARKUP_MAX_OUTPUT_TOKENS,
        )

        logger.info(
            "Generating markup (provider=%s, model=%s, size=%sx%s, canvas=%s, references=%d, temperature=%s)",
            resolved.provider_id,
            content_provider.model,
            output_width,
            output_height,
            canvas is not None,
            len(references),
            config.temperature,
        )

        result = await content_provider.generate_content(build_contents(parts), config)
        ui_code = strip_code_fences(result.text)
        if not ui_code:
            raise NoContentError(
                "Provider returned no markup", provider=content_provider.provider_name
            )

        return MarkupGenerationResult(
            provider_id=resolved.provider_id,
            model=content_provider.model,
            ui_code=ui_code,
            width=output_width,
            height=output_height,
        )


__all__ = ["MarkupGenerationResult", "MarkupService", "markup_strength", "resolve_markup_model"]
