"""Prompt assembly for markup and image synthesis.

Every builder here is deterministic: same inputs, same ordered parts. Part
order is part of the contract because models read the text that sits
directly before or after each image as the description of that image.

Markup synthesis:
    [preamble, main prompt, (canvas image, canvas instruction)?,
     reference image*, reference instruction?, output format constraint]

Image synthesis:
    [(material instruction, material image)*, main prompt, canvas image?]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from core.providers.types import Content, ImagePart, Part, TextPart
from core.utils.data_urls import DataUrl
from features.generation.sampling import strength_band

MARKUP_PREAMBLE = (
    "You are a senior front-end engineer who turns product descriptions and "
    "wireframe sketches into clean, production-ready Tailwind CSS markup."
)

CANVAS_INSTRUCTIONS: Dict[str, str] = {
    "weak": (
        "Use this canvas image as loose inspiration only. You may reinterpret the "
        "layout, spacing and elements as long as the result fits the description. "
    ),
    "medium": "Use this canvas image as a reference for the UI layout and elements. ",
    "strong": (
        "Follow this canvas image closely. Reproduce its layout, element positions, "
        "proportions and visual hierarchy as faithfully as possible. "
    ),
}

REFERENCE_INSTRUCTIONS: Dict[str, str] = {
    "weak": (
        "These reference images are optional mood inspiration. Borrow general "
        "atmosphere only where it suits the description. "
    ),
    "medium": "Also use these reference images to guide the UI design, style, and layout. ",
    "strong": (
        "Match the visual style of these reference images precisely: colour palette, "
        "typography, spacing, corner radii and component styling. "
    ),
}

IMAGE_SYSTEM_INSTRUCTION = (
    "You are a specialized Product Visualization Engine. Your task is to interpret "
    "sketches or CAD drawings and render them as finished physical products. Always "
    "prioritize physical accuracy and realistic materials. When provided with a "
    "material reference image, carefully analyze its color, grain, texture, and "
    "reflectivity, and apply those exact properties to the primary object in the "
    "sketch. Maintain photorealistic quality and professional lighting."
)

TEXT_ONLY_IMAGE_INSTRUCTION = (
    "You cannot return images. Instead, write one detailed prompt that an image "
    "generation model could use to render the request below, taking any attached "
    "images into account. Respond ONLY with that prompt, no other text."
)


@dataclass(frozen=True, slots=True)
class MaterialReference:
    """Material reference image with its influence weight in [0, 1]."""

    image: DataUrl
    weight: float


def markup_main_prompt(prompt: str) -> str:
    return f'Generate Tailwind CSS UI code based on this description: "{prompt}". '


def markup_output_constraint(width: int, height: int) -> str:
    return (
        "Generate only the HTML code with Tailwind CSS classes for the specific UI mockup. "
        f"The UI should be responsive and match the dimensions of {width}x{height}px. "
        "Do not include <!DOCTYPE html>, <html>, <head>, or <body> tags. Only return the "
        "specific UI component or section with appropriate Tailwind classes. Focus on the "
        "visual elements and layout without generating full page structure."
    )


def canvas_instruction(strength: float) -> str:
    """Return the canvas framing text for a 0-100 strength."""

    return CANVAS_INSTRUCTIONS[strength_band(strength)]


def reference_instruction(strength: float) -> str:
    """Return the style-reference framing text for a 0-100 strength."""

    return REFERENCE_INSTRUCTIONS[strength_band(strength)]


def build_markup_parts(
    prompt: str,
    *,
    width: int,
    height: int,
    canvas: Optional[DataUrl] = None,
    reference_images: Sequence[DataUrl] = (),
    canvas_strength: float = 50,
    reference_strength: float = 50,
) -> List[Part]:
    """Assemble the parts for a markup synthesis request."""

    parts: List[Part] = [
        TextPart(text=MARKUP_PREAMBLE),
        TextPart(text=markup_main_prompt(prompt)),
    ]

    if canvas is not None:
        parts.append(ImagePart(mime_type=canvas.mime_type, data=canvas.data))
        parts.append(TextPart(text=canvas_instruction(canvas_strength)))

    if reference_images:
        for reference in reference_images:
            parts.append(ImagePart(mime_type=reference.mime_type, data=reference.data))
        parts.append(TextPart(text=reference_instruction(reference_strength)))

    parts.append(TextPart(text=markup_output_constraint(width, height)))
    return parts


def material_instruction(weight: float) -> str:
    intensity = round(weight * 100)
    return (
        f"Material reference ({intensity}%): analyze color, surface properties, reflectivity, "
        "and grain pattern, then apply these properties to the product surface:"
    )


def apply_lighting_preset(prompt: str, preset_prompt: Optional[str]) -> str:
    if not preset_prompt:
        return prompt
    return f"{prompt}. Environment: {preset_prompt}."


def image_output_constraint(prompt: str, width: int, height: int) -> str:
    """Append the target size hint; exact size is enforced after generation."""

    return (
        f"{prompt}\n\nOutput constraints: {width}x{height}px. "
        "Fill the frame edge-to-edge. No borders."
    )


def build_image_parts(
    main_prompt: str,
    *,
    materials: Sequence[MaterialReference] = (),
    canvas: Optional[DataUrl] = None,
) -> List[Part]:
    """Assemble the parts for an image synthesis request.

    Each material image is preceded by its own instruction carrying that
    image's weight.
    """

    parts: List[Part] = []
    for material in materials:
        parts.append(TextPart(text=material_instruction(material.weight)))
        parts.append(ImagePart(mime_type=material.image.mime_type, data=material.image.data))

    parts.append(TextPart(text=main_prompt))

    if canvas is not None:
        parts.append(ImagePart(mime_type=canvas.mime_type, data=canvas.data))
    return parts


def enhancement_instruction(prompt: str) -> str:
    return (
        "Analyze this sketch/image and enhance the following prompt for AI image "
        f'generation: "{prompt}". \n'
        "Combine the visual elements from the sketch with the text description to create "
        "a detailed, comprehensive prompt.\n"
        "Focus on: style, composition, colors, mood, and key elements.\n"
        "Respond ONLY with the enhanced prompt, no other text."
    )


def build_enhancement_parts(prompt: str, canvas: DataUrl) -> List[Part]:
    """Parts for the preliminary vision call that folds the sketch into the prompt."""

    return [
        TextPart(text=enhancement_instruction(prompt)),
        ImagePart(mime_type=canvas.mime_type, data=canvas.data),
    ]


def build_contents(parts: Sequence[Part], system_instruction: Optional[str] = None) -> List[Content]:
    """Wrap parts into a single user message, optionally led by a system entry."""

    contents: List[Content] = []
    if system_instruction:
        contents.append(Content(role="system", parts=[TextPart(text=system_instruction)]))
    contents.append(Content(role="user", parts=list(parts)))
    return contents


__all__ = [
    "CANVAS_INSTRUCTIONS",
    "IMAGE_SYSTEM_INSTRUCTION",
    "MARKUP_PREAMBLE",
    "MaterialReference",
    "REFERENCE_INSTRUCTIONS",
    "TEXT_ONLY_IMAGE_INSTRUCTION",
    "apply_lighting_preset",
    "build_contents",
    "build_enhancement_parts",
    "build_image_parts",
    "build_markup_parts",
    "canvas_instruction",
    "image_output_constraint",
    "markup_output_constraint",
    "material_instruction",
    "reference_instruction",
]
