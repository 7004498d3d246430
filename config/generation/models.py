"""Model identifiers used by the generation pipeline."""

from __future__ import annotations

import os

# Gemini image synthesis, keyed by the request ``quality`` field
GEMINI_IMAGE_MODELS: dict[str, str] = {
    "preview": "gemini-2.5-flash-image",  # Nano Banana
    "final": "gemini-3-pro-image-preview",  # Nano Banana Pro
}
DEFAULT_IMAGE_QUALITY = "preview"

# Vision model used to fold the canvas sketch into the prompt
GEMINI_VISION_MODEL = "gemini-2.0-flash-exp"

# Gemini markup synthesis, keyed by the request ``model`` field
GEMINI_MARKUP_MODELS: dict[str, str] = {
    "fast": "gemini-3-flash-preview",
    "quality": "gemini-3-pro-preview",
}
MARKUP_MODEL_ALIASES: dict[str, str] = {
    "pro": "quality",
    "flash": "fast",
}
DEFAULT_MARKUP_MODEL = "fast"

DEFAULT_GEMINI_MODEL = GEMINI_VISION_MODEL

# OpenRouter
OPENROUTER_API_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_REFERER = os.getenv("OPENROUTER_REFERER", "https://ai-ui-mockup-creator.vercel.app")
OPENROUTER_TITLE = os.getenv("OPENROUTER_TITLE", "AI UI Mockup Creator")
OPENROUTER_FALLBACK_MODEL = "z-ai/glm-4.6v"
OPENROUTER_MODEL_ALIASES: dict[str, str] = {
    "glm-4.6v": "z-ai/glm-4.6v",
    "qwen3-vl": "qwen/qwen3-vl-235b-a22b-instruct",
}
# OpenRouter models that cannot read images; image parts are replaced by text
OPENROUTER_TEXT_ONLY_MODELS: frozenset[str] = frozenset(
    {
        "z-ai/glm-4.6",
        "deepseek/deepseek-chat",
    }
)
OPENROUTER_TIMEOUT_SECONDS = float(os.getenv("OPENROUTER_TIMEOUT_SECONDS", "120"))


def openrouter_default_model() -> str:
    return os.getenv("OPENROUTER_DEFAULT_MODEL") or OPENROUTER_FALLBACK_MODEL


def gemini_model_outputs_images(model: str) -> bool:
    """Return ``True`` for Gemini models that answer with inline images."""

    return "-image" in (model or "").lower()


__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_IMAGE_QUALITY",
    "DEFAULT_MARKUP_MODEL",
    "GEMINI_IMAGE_MODELS",
    "GEMINI_MARKUP_MODELS",
    "GEMINI_VISION_MODEL",
    "MARKUP_MODEL_ALIASES",
    "OPENROUTER_API_URL",
    "OPENROUTER_FALLBACK_MODEL",
    "OPENROUTER_MODEL_ALIASES",
    "OPENROUTER_REFERER",
    "OPENROUTER_TEXT_ONLY_MODELS",
    "OPENROUTER_TIMEOUT_SECONDS",
    "OPENROUTER_TITLE",
    "gemini_model_outputs_images",
    "openrouter_default_model",
]
