"""Multimodal content provider implementations."""

from .gemini import GeminiContentProvider
from .openrouter import OpenRouterContentProvider

__all__ = [
    "GeminiContentProvider",
    "OpenRouterContentProvider",
]
