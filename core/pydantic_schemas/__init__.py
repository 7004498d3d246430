"""Public pydantic schema exports for FastAPI interfaces."""

from .requests import (
    CanvasDimensions,
    GenerateImageRequest,
    GenerateMarkupRequest,
    MaterialReferenceItem,
)
from .responses import GenerateImageResponse, GenerateMarkupResponse, ProvidersResponse

__all__ = [
    "CanvasDimensions",
    "GenerateImageRequest",
    "GenerateImageResponse",
    "GenerateMarkupRequest",
    "GenerateMarkupResponse",
    "MaterialReferenceItem",
    "ProvidersResponse",
]
