"""Markup generation HTTP routes."""

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
from core.pydantic_schemas import GenerateMarkupRequest, GenerateMarkupResponse
from features.markup.service import MarkupService

router = APIRouter(prefix="/api", tags=["markup"])
logger = logging.getLogger(__name__)


def _prompt_preview(prompt: str | None) -> str:
    text = (prompt or "").strip().replace("\n", " ")
    return text[:120] + ("..." if len(text) > 120 else "")


@router.post("/generate-ui")
async def generate_ui(request: GenerateMarkupRequest) -> JSONResponse:
    """Generate a Tailwind CSS markup fragment."""

    service = MarkupService()
    dimensions = request.canvas_dimensions

    logger.info(
        "POST /api/generate-ui received (provider=%s, model=%s, references=%d, prompt='%s')",
        request.provider,
        request.model,
        len(request.reference_images),
        _prompt_preview(request.prompt),
    )

    try:
        result = await service.generate_markup(
            prompt=request.prompt,
            width=dimensions.width if dimensions else None,
            height=dimensions.height if dimensions else None,
            canvas_image=request.canvas_image,
            use_canvas=request.use_canvas,
            model=request.model,
            reference_images=request.reference_images,
            provider=request.provider,
            canvas_strength=request.canvas_strength,
            reference_strength=request.reference_strength,
        )
    except ValidationError as exc:
        logger.warning("Validation error in /api/generate-ui: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_validation_error(exc),
        )
    except ConfigurationError as exc:
        logger.error("Configuration error in /api/generate-ui: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_configuration_error(exc),
        )
    except ProviderError as exc:
        logger.error("Provider error in /api/generate-ui: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_provider_error(exc),
        )
    except ServiceError as exc:
        logger.error("Service error in /api/generate-ui: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_service_error(exc),
        )
    except Exception as exc:  # pragma: no cover - logged and reported as 500
        logger.error("Unexpected error in /api/generate-ui: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error", "type": "internal_error"},
        )

    logger.info(
        "Markup generation successful (provider=%s, model=%s, chars=%d)",
        result.provider_id,
        result.model,
        len(result.ui_code),
    )

    response = GenerateMarkupResponse(
        ui_code=result.ui_code,
        output_width=result.width,
        output_height=result.height,
        provider=result.provider_id,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.to_payload())
