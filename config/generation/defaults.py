"""Generation pipeline defaults and limits."""

from __future__ import annotations

# Provider identifiers accepted on the wire, mapped to provider kinds
DEFAULT_PROVIDER_ID = "primary"
PROVIDER_IDS: dict[str, str] = {
    "primary": "gemini",
    "secondary": "openrouter",
}
PROVIDER_ID_ALIASES: dict[str, str] = {
    "gemini": "primary",
    "openrouter": "secondary",
}

# Output sizing
MIN_EDGE = 64
MAX_LONG_EDGE = 4096
RESOLUTION_LONG_EDGES = (1024, 2048, 4096)
DEFAULT_LONG_EDGE = 2048
ASPECT_RATIOS = ("1:1", "4:3", "3:4", "16:9", "9:16")
DEFAULT_ASPECT_RATIO = "1:1"

# Reference image limits
MAX_MATERIAL_REFERENCES = 8
MAX_REFERENCE_IMAGES = 5
DEFAULT_MATERIAL_WEIGHT = 0.7

# Strength settings (0-100)
DEFAULT_STRENGTH = 50
STRENGTH_LOW_THRESHOLD = 40
STRENGTH_HIGH_THRESHOLD = 70

# Sampling extras sent alongside the mapped temperature
IMAGE_TOP_P = 0.95
IMAGE_TOP_K = 40
MARKUP_MAX_OUTPUT_TOKENS = 16384

# Canonical encoding of every returned image
OUTPUT_IMAGE_FORMAT = "PNG"
OUTPUT_IMAGE_MIME_TYPE = "image/png"

__all__ = [
    "ASPECT_RATIOS",
    "DEFAULT_ASPECT_RATIO",
    "DEFAULT_LONG_EDGE",
    "DEFAULT_MATERIAL_WEIGHT",
    "DEFAULT_PROVIDER_ID",
    "DEFAULT_STRENGTH",
    "IMAGE_TOP_K",
    "IMAGE_TOP_P",
    "MARKUP_MAX_OUTPUT_TOKENS",
    "MAX_LONG_EDGE",
    "MAX_MATERIAL_REFERENCES",
    "MAX_REFERENCE_IMAGES",
    "MIN_EDGE",
    "OUTPUT_IMAGE_FORMAT",
    "OUTPUT_IMAGE_MIME_TYPE",
    "PROVIDER_IDS",
    "PROVIDER_ID_ALIASES",
    "RESOLUTION_LONG_EDGES",
    "STRENGTH_HIGH_THRESHOLD",
    "STRENGTH_LOW_THRESHOLD",
]
