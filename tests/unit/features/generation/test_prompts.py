"""Tests for prompt assembly."""

from __future__ import annotations

from core.providers.types import ImagePart, TextPart
from core.utils.data_urls import DataUrl
from features.generation.prompts import (
    CANVAS_INSTRUCTIONS,
    IMAGE_SYSTEM_INSTRUCTION,
    MARKUP_PREAMBLE,
    REFERENCE_INSTRUCTIONS,
    MaterialReference,
    apply_lighting_preset,
    build_contents,
    build_image_parts,
    build_markup_parts,
    image_output_constraint,
    markup_output_constraint,
)

CANVAS = DataUrl(mime_type="image/png", data="Q0FOVkFT")
REF_A = DataUrl(mime_type="image/jpeg", data="UkVGQQ==")
REF_B = DataUrl(mime_type="image/webp", data="UkVGQg==")


def test_markup_parts_minimal_order() -> None:
    parts = build_markup_parts("A login form", width=400, height=300)

    assert parts == [
        TextPart(text=MARKUP_PREAMBLE),
        TextPart(text='Generate Tailwind CSS UI code based on this description: "A login form". '),
        TextPart(text=markup_output_constraint(400, 300)),
    ]
    assert "400x300px" in parts[-1].text


def test_markup_parts_with_canvas_and_references() -> None:
    parts = build_markup_parts(
        "Dashboard",
        width=800,
        height=600,
        canvas=CANVAS,
        reference_images=[REF_A, REF_B],
        canvas_strength=90,
        reference_strength=10,
    )

    assert [type(part).__name__ for part in parts] == [
        "TextPart",
        "TextPart",
        "ImagePart",
        "TextPart",
        "ImagePart",
        "ImagePart",
        "TextPart",
        "TextPart",
    ]
    assert parts[2] == ImagePart(mime_type="image/png", data="Q0FOVkFT")
    assert parts[3].text == CANVAS_INSTRUCTIONS["strong"]
    assert parts[4].mime_type == "image/jpeg"
    assert parts[5].mime_type == "image/webp"
    assert parts[6].text == REFERENCE_INSTRUCTIONS["weak"]


def test_markup_strength_thresholds_pick_instruction_text() -> None:
    def canvas_text(strength: float) -> str:
        return build_markup_parts("x", width=1, height=1, canvas=CANVAS, canvas_strength=strength)[3].text

    assert canvas_text(40) == CANVAS_INSTRUCTIONS["weak"]
    assert canvas_text(41) == CANVAS_INSTRUCTIONS["medium"]
    assert canvas_text(70) == CANVAS_INSTRUCTIONS["medium"]
    assert canvas_text(71) == CANVAS_INSTRUCTIONS["strong"]


def test_image_parts_interleave_per_material_weight() -> None:
    parts = build_image_parts(
        "main prompt",
        materials=[MaterialReference(image=REF_A, weight=0.25), MaterialReference(image=REF_B, weight=1.0)],
        canvas=CANVAS,
    )

    assert parts[0].text.startswith("Material reference (25%)")
    assert parts[1].data == REF_A.data
    assert parts[2].text.startswith("Material reference (100%)")
    assert parts[3].data == REF_B.data
    assert parts[4] == TextPart(text="main prompt")
    assert parts[5] == ImagePart(mime_type="image/png", data=CANVAS.data)
    assert len(parts) == 6


def test_image_parts_without_materials_or_canvas() -> None:
    assert build_image_parts("only text") == [TextPart(text="only text")]


def test_lighting_and_output_constraint() -> None:
    prompt = apply_lighting_preset("a chair", "soft light")

    assert prompt == "a chair. Environment: soft light."
    assert apply_lighting_preset("a chair", None) == "a chair"
    assert image_output_constraint(prompt, 1024, 576).endswith(
        "Output constraints: 1024x576px. Fill the frame edge-to-edge. No borders."
    )


def test_build_contents_leads_with_system_entry() -> None:
    contents = build_contents([TextPart(text="hi")], IMAGE_SYSTEM_INSTRUCTION)

    assert [content.role for content in contents] == ["system", "user"]
    assert contents[0].parts == [TextPart(text=IMAGE_SYSTEM_INSTRUCTION)]
    assert [content.role for content in build_contents([TextPart(text="hi")])] == ["user"]
