"""Request models for FastAPI endpoints.

Field names follow the canvas UI's camelCase JSON; snake_case names are
accepted as well.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MaterialReferenceItem(_CamelModel):
    """Material reference image with its influence weight."""

    data_url: str = ""
    weight: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class CanvasDimensions(_CamelModel):
    """Pixel size of the drawing surface."""

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class GenerateImageRequest(_CamelModel):
    """Request payload for image synthesis from a prompt and sketch."""

    prompt: Optional[str] = None
    canvas_image: Optional[str] = None
    use_canvas: bool = False
    quality: Literal["preview", "final"] = "preview"
    preset: Optional[str] = None
    material_reference: Optional[str] = None
    material_weight: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    material_references: Optional[List[MaterialReferenceItem]] = None
    output_mode: Literal["canvas", "preset"] = "canvas"
    output_long_edge: Optional[int] = Field(default=None, gt=0)
    output_aspect_ratio: Optional[str] = None
    output_width: Optional[float] = None
    output_height: Optional[float] = None
    provider: Optional[str] = None


class GenerateMarkupRequest(_CamelModel):
    """Request payload for Tailwind markup synthesis."""

    prompt: Optional[str] = None
    canvas_image: Optional[str] = None
    use_canvas: bool = False
    model: str = "fast"
    reference_images: List[str] = Field(default_factory=list)
    canvas_dimensions: Optional[CanvasDimensions] = None
    provider: Optional[str] = None
    canvas_strength: Optional[float] = Field(default=None, ge=0, le=100)
    reference_strength: Optional[float] = Field(default=None, ge=0, le=100)

    @field_validator("model")
    @classmethod
    def _normalise_model(cls, value: str) -> str:
        return (value or "").strip().lower() or "fast"


__all__ = [
    "CanvasDimensions",
    "GenerateImageRequest",
    "GenerateMarkupRequest",
    "MaterialReferenceItem",
]
