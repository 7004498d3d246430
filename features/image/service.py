"""Business logic for image synthesis from a prompt, sketch and material references."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from config.generation.defaults import (
    DEFAULT_MATERIAL_WEIGHT,
    DEFAULT_STRENGTH,
    IMAGE_TOP_K,
    IMAGE_TOP_P,
    MAX_MATERIAL_REFERENCES,
    OUTPUT_IMAGE_MIME_TYPE,
)
from config.generation.models import (
    DEFAULT_IMAGE_QUALITY,
    GEMINI_IMAGE_MODELS,
    GEMINI_VISION_MODEL,
)
from config.generation.presets import get_lighting_prompt
from core.exceptions import EnhancementError, NoContentError, ValidationError
from core.providers.base import BaseContentProvider
from core.providers.factory import get_content_provider, resolve_provider_id
from core.providers.types import GenerationConfig, TextPart
from core.pydantic_schemas import MaterialReferenceItem
from core.utils.data_urls import DataUrl, build_data_url, parse_data_url
from features.generation.postprocess import decode_image_part, find_image_part, resize_cover
from features.generation.prompts import (
    IMAGE_SYSTEM_INSTRUCTION,
    TEXT_ONLY_IMAGE_INSTRUCTION,
    MaterialReference,
    apply_lighting_preset,
    build_contents,
    build_enhancement_parts,
    build_image_parts,
    image_output_constraint,
)
from features.generation.sampling import map_strength_to_temperature
from features.generation.sizing import OutputSizeSpec, resolve_output_size

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Optional[str], Optional[str]], BaseContentProvider]


@dataclass(slots=True)
class ImageGenerationResult:
    """Outcome of one image request.

    ``image_url`` is ``None`` when the provider has no image output; in that
    case ``enhanced_prompt`` carries the text the provider produced.
    """

    provider_id: str
    model: str
    width: int
    height: int
    image_url: Optional[str] = None
    enhanced_prompt: Optional[str] = None
    source_mime_type: Optional[str] = None
    message: Optional[str] = None


def _prompt_preview(prompt: str) -> str:
    text = (prompt or "").strip().replace("\n", " ")
    return text[:120] + ("..." if len(text) > 120 else "")


def normalize_material_references(
    material_references: Optional[Sequence[MaterialReferenceItem]] = None,
    material_reference: Optional[str] = None,
    material_weight: Optional[float] = None,
) -> List[MaterialReference]:
    """Merge the list and legacy single-reference fields, keep the first eight."""

    if material_references is not None:
        items = [(item.data_url, item.weight) for item in material_references]
    elif material_reference:
        items = [(material_reference, material_weight)]
    else:
        items = []

    if len(items) > MAX_MATERIAL_REFERENCES:
        logger.warning(
            "Received %d material references; using the first %d",
            len(items),
            MAX_MATERIAL_REFERENCES,
        )

    references: List[MaterialReference] = []
    for data_url, weight in items[:MAX_MATERIAL_REFERENCES]:
        if not data_url:
            continue
        references.append(
            MaterialReference(
                image=parse_data_url(data_url),
                weight=DEFAULT_MATERIAL_WEIGHT if weight is None else float(weight),
            )
        )
    return references


class ImageService:
    """Coordinate prompt enhancement, provider dispatch and image post-processing."""

    def __init__(self, provider_factory: ProviderFactory | None = None) -> None:
        self._provider_factory = provider_factory or get_content_provider

    async def generate_image(
        self,
        *,
        prompt: Optional[str],
        canvas_image: Optional[str] = None,
        use_canvas: bool = False,
        quality: str = DEFAULT_IMAGE_QUALITY,
        preset: Optional[str] = None,
        material_references: Sequence[MaterialReference] = (),
        output_size: OutputSizeSpec = OutputSizeSpec(),
        provider: Optional[str] = None,
    ) -> ImageGenerationResult:
        """Generate an image sized exactly to ``output_size``.

        Args:
            prompt: Text description; required
            canvas_image: Canvas sketch as a data URL
            use_canvas: Whether the sketch takes part in the request
            quality: ``preview`` (fast model) or ``final`` (high quality model)
            preset: Lighting preset key
            material_references: Normalised material references (max eight)
            output_size: Canvas or preset sizing request
            provider: Public provider identifier; unknown values fall back
        """

        if not prompt or not prompt.strip():
            raise ValidationError("Prompt is required", field="prompt")

        resolved = resolve_provider_id(provider)
        model_name = GEMINI_IMAGE_MODELS.get(quality, GEMINI_IMAGE_MODELS[DEFAULT_IMAGE_QUALITY])
        content_provider = self._provider_factory(resolved.provider_id, model_name)

        size = resolve_output_size(output_size)
        canvas = parse_data_url(canvas_image) if use_canvas and canvas_image else None

        logger.info(
            "Generating image (provider=%s, model=%s, size=%sx%s, canvas=%s, materials=%d, prompt='%s')",
            resolved.provider_id,
            content_provider.model,
            size.width,
            size.height,
            canvas is not None,
            len(material_references),
            _prompt_preview(prompt),
        )

        base_prompt = prompt
        if canvas is not None:
            try:
                base_prompt = await self._enhance_prompt(resolved.provider_id, prompt, canvas)
            except EnhancementError as exc:
                logger.warning("Prompt enhancement failed, using original prompt: %s", exc)
                base_prompt = prompt

        base_prompt = apply_lighting_preset(base_prompt, get_lighting_prompt(preset))
        main_prompt = image_output_constraint(base_prompt, size.width, size.height)
        parts = build_image_parts(main_prompt, materials=material_references, canvas=canvas)

        strength = (
            round(max(reference.weight for reference in material_references) * 100)
            if material_references
            else DEFAULT_STRENGTH
        )
        config = GenerationConfig(
            temperature=map_strength_to_temperature(
                content_provider.provider_name, content_provider.model, strength
            ),
            top_p=IMAGE_TOP_P,
            top_k=IMAGE_TOP_K,
        )

        if not content_provider.capabilities.image_output:
            return await self._describe_instead(
                content_provider, resolved.provider_id, parts, config, size.width, size.height
            )

        result = await content_provider.generate_content(
            build_contents(parts, IMAGE_SYSTEM_INSTRUCTION), config
        )
        image_part = find_image_part(result, provider=content_provider.provider_name)
        resized = await resize_cover(
            decode_image_part(image_part, provider=content_provider.provider_name),
            size.width,
            size.height,
        )

        logger.info(
            "Image generation successful (provider=%s, model=%s, source_mime_type=%s)",
            resolved.provider_id,
            content_provider.model,
            image_part.mime_type,
        )

        return ImageGenerationResult(
            provider_id=resolved.provider_id,
            model=content_provider.model,
            width=size.width,
            height=size.height,
            image_url=build_data_url(OUTPUT_IMAGE_MIME_TYPE, resized),
            enhanced_prompt=base_prompt if base_prompt != prompt else None,
            source_mime_type=image_part.mime_type,
        )

    async def _enhance_prompt(self, provider_id: str, prompt: str, canvas: DataUrl) -> str:
        """Fold the sketch into a richer prompt with a vision call."""

        try:
            vision_provider = self._provider_factory(provider_id, GEMINI_VISION_MODEL)
            result = await vision_provider.generate_content(
                build_contents(build_enhancement_parts(prompt, canvas))
            )
        except Exception as exc:
            raise EnhancementError(f"Vision analysis failed: {exc}", original_error=exc) from exc

        enhanced = result.text.strip()
        if not enhanced:
            raise EnhancementError("Vision analysis returned an empty prompt")

        logger.info("Enhanced prompt with canvas: %s", _prompt_preview(enhanced))
        return enhanced

    async def _describe_instead(
        self,
        content_provider: BaseContentProvider,
        provider_id: str,
        parts: list,
        config: GenerationConfig,
        width: int,
        height: int,
    ) -> ImageGenerationResult:
        """Ask a provider without image output for a detailed generation prompt."""

        result = await content_provider.generate_content(
            build_contents([TextPart(text=TEXT_ONLY_IMAGE_INSTRUCTION), *parts]), config
        )
        enhanced = result.text.strip()
        if not enhanced:
            raise NoContentError(
                "Provider returned an empty prompt", provider=content_provider.provider_name
            )

        logger.info(
            "Provider %s has no image output; returning enhanced prompt only",
            provider_id,
        )
        return ImageGenerationResult(
            provider_id=provider_id,
            model=content_provider.model,
            width=width,
            height=height,
            enhanced_prompt=enhanced,
            message=(
                f"Provider '{provider_id}' ({content_provider.provider_name}) cannot generate "
                "images; no image was produced. The enhanced prompt can be used with an "
                "image-capable provider."
            ),
        )


__all__ = ["ImageGenerationResult", "ImageService", "normalize_material_references"]
