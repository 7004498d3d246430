"""Tests for Pydantic request models."""

import pytest
from pydantic import ValidationError

from core.pydantic_schemas import GenerateImageRequest, GenerateMarkupRequest


def test_image_request_accepts_camel_case_fields():
    """GenerateImageRequest should read the canvas UI's camelCase JSON."""

    request = GenerateImageRequest.model_validate(
        {
            "prompt": "chair",
            "canvasImage": "data:image/png;base64,AAAA",
            "useCanvas": True,
            "outputMode": "preset",
            "outputLongEdge": 1024,
            "outputAspectRatio": "16:9",
            "materialReferences": [{"dataUrl": "data:image/png;base64,BBBB", "weight": 0.4}],
        }
    )

    assert request.use_canvas is True
    assert request.output_long_edge == 1024
    assert request.material_references[0].data_url.endswith("BBBB")
    assert request.material_references[0].weight == 0.4


def test_image_request_defaults():
    """GenerateImageRequest should default to preview quality and canvas sizing."""

    request = GenerateImageRequest()
    assert request.quality == "preview"
    assert request.output_mode == "canvas"
    assert request.use_canvas is False


def test_image_request_rejects_out_of_range_weight():
    with pytest.raises(ValidationError):
        GenerateImageRequest(prompt="x", material_weight=1.5)


def test_markup_request_normalises_model_and_dimensions():
    request = GenerateMarkupRequest.model_validate(
        {"prompt": "form", "model": " Pro ", "canvasDimensions": {"width": 400, "height": 300}}
    )

    assert request.model == "pro"
    assert request.canvas_dimensions.width == 400
    assert request.reference_images == []


def test_markup_request_rejects_strength_above_100():
    with pytest.raises(ValidationError):
        GenerateMarkupRequest(prompt="x", canvas_strength=150)
