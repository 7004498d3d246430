"""Image generation HTTP routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from core.exceptions import ConfigurationError, ProviderError, ServiceError, ValidationError
from core.http.errors import (
    format_configuration_error,
    format_provider_error,
    format_service_error,
    format_validation_error,
)
from core.pydantic_schemas import GenerateImageRequest, GenerateImageResponse
from features.generation.sizing import OutputSizeSpec
from features.image.service import ImageService, normalize_material_references

router = APIRouter(prefix="/api", tags=["image"])
logger = logging.getLogger(__name__)


def _prompt_preview(prompt: str | None) -> str:
    text = (prompt or "").strip().replace("\n", " ")
    return text[:120] + ("..." if len(text) > 120 else "")


@router.post("/generate")
async def generate_image(request: GenerateImageRequest) -> JSONResponse:
    """Generate a product image from a prompt, sketch and material references."""

    service = ImageService()

    logger.info(
        "POST /api/generate received (provider=%s, quality=%s, output_mode=%s, prompt='%s')",
        request.provider,
        request.quality,
        request.output_mode,
        _prompt_preview(request.prompt),
    )

    try:
        materials = normalize_material_references(
            request.material_references,
            material_reference=request.material_reference,
            material_weight=request.material_weight,
        )
        result = await service.generate_image(
            prompt=request.prompt,
            canvas_image=request.canvas_image,
            use_canvas=request.use_canvas,
            quality=request.quality,
            preset=request.preset,
            material_references=materials,
            output_size=OutputSizeSpec(
                mode=request.output_mode,
                width=request.output_width,
                height=request.output_height,
                long_edge=request.output_long_edge,
                aspect_ratio=request.output_aspect_ratio,
            ),
            provider=request.provider,
        )
    except ValidationError as exc:
        logger.warning("Validation error in /api/generate: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_validation_error(exc),
        )
    except ConfigurationError as exc:
        logger.error("Configuration error in /api/generate: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_configuration_error(exc),
        )
    except ProviderError as exc:
        logger.error("Provider error in /api/generate: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_provider_error(exc),
        )
    except ServiceError as exc:
        logger.error("Service error in /api/generate: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_service_error(exc),
        )
    except Exception as exc:  # pragma: no cover - logged and reported as 500
        logger.error("Unexpected error in /api/generate: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error", "type": "internal_error"},
        )

    response = GenerateImageResponse(
        image_url=result.image_url,
        model=result.model,
        enhanced_prompt=result.enhanced_prompt,
        output_width=result.width,
        output_height=result.height,
        source_mime_type=result.source_mime_type,
        provider=result.provider_id,
        message=result.message,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.to_payload())
