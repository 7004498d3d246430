from __future__ import annotations

"""Sketch Generation Backend - Main Application Entry Point
This is the FastAPI application factory for the sketch-to-image and
sketch-to-markup backend.
Architecture Overview:
    - Provider-agnostic content generation (Gemini, OpenRouter) behind one adapter contract
    - Feature-based modular architecture (see features/ directory)
    - Provider registry pattern for runtime provider resolution
Entry Points:
    - /health - Health check endpoint
    - /api/generate - Image synthesis from prompt, sketch and material references
    - /api/generate-ui - Tailwind markup synthesis from prompt and sketch
    - /api/providers - Providers with configured credentials
"""

import logging
import time

from core.utils.env import is_production
# Track startup time in non-production environments
start_time = time.time() if not is_production() else None

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.exceptions import ConfigurationError, ServiceError
from core.http.errors import format_configuration_error, format_service_error
from core.logging import setup_logging
from core.observability import register_http_request_logging
from features.generation.routes import router as providers_router
from features.image.routes import router as image_router
from features.markup.routes import router as markup_router

APP_VERSION = "1.0.0"

setup_logging()

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request body"


def create_app() -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    app = FastAPI(
        title="Sketch Generation Backend",
        description="Image and Tailwind markup generation from sketches and prompts",
        version=APP_VERSION,
    )

    # Configure CORS based on environment
    if is_production():
        # Production: Allow all origins
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Development: Allow any localhost port (Vite/React dev servers)
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies as 400 with the standard error shape."""

        message = _describe_validation_errors(exc)
        logger.warning("Rejected request to %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message, "type": "validation_error"},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Return a structured payload for configuration errors."""

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_configuration_error(exc),
        )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Return a structured payload for service errors not handled by a route."""

        logger.error("Unhandled service error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_service_error(exc),
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": APP_VERSION}

    register_http_request_logging(app)

    app.include_router(image_router)
    app.include_router(markup_router)
    app.include_router(providers_router)

    # Add timing info for non-production
    timing_info = ""
    if start_time is not None:
        elapsed = time.time() - start_time
        timing_info = f" (loaded in {elapsed:.2f}s)"

    logger.info("Application created with image, markup and providers routers%s", timing_info)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
