"""Post-processing of raw model output."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
import re
from io import BytesIO

from PIL import Image, ImageOps, UnidentifiedImageError

from config.generation.defaults import OUTPUT_IMAGE_FORMAT
from core.exceptions import NoImageDataError
from core.providers.types import GenerateContentResult, ImagePart

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(
    r"^```(?:[\w+.#-]*[^\S\r\n]*\r?\n)?(?P<body>.*?)\r?\n?```$",
    re.DOTALL,
)


def strip_code_fences(text: str) -> str:
    """Trim ``text`` and unwrap a markdown code fence.

    The fence is removed only when both the opening (with optional language
    tag) and the closing backticks are present. Unwrapping repeats until the
    text no longer looks fenced, so applying this twice is a no-op.
    """

    result = (text or "").strip()
    while True:
        match = _FENCE_RE.match(result)
        if match is None:
            return result
        result = match.group("body").strip()


def find_image_part(result: GenerateContentResult, provider: str | None = None) -> ImagePart:
    """Return the first image part of ``result`` or raise ``NoImageDataError``."""

    image = result.first_image()
    if image is None:
        preview = result.text.strip()[:200]
        if preview:
            logger.warning("Provider returned text instead of image: %s", preview)
        raise NoImageDataError(
            "No image data in response" + (f": {preview}" if preview else ""),
            provider=provider,
        )
    return image


def decode_image_part(image: ImagePart, provider: str | None = None) -> bytes:
    try:
        return base64.b64decode(image.data, validate=False)
    except (binascii.Error, ValueError) as exc:
        raise NoImageDataError(
            f"Image payload is not valid base64: {exc}",
            provider=provider,
            original_error=exc,
        ) from exc


def resize_cover_sync(image_bytes: bytes, width: int, height: int) -> bytes:
    """Scale to fill ``width`` x ``height``, crop the overflow centred, encode as PNG."""

    try:
        with Image.open(BytesIO(image_bytes)) as source:
            source.load()
            image = _normalise_mode(source)
    except (UnidentifiedImageError, OSError) as exc:
        raise NoImageDataError(
            f"Provider returned image data that could not be decoded: {exc}",
            original_error=exc,
        ) from exc

    fitted = ImageOps.fit(
        image,
        (width, height),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )

    buffer = BytesIO()
    fitted.save(buffer, format=OUTPUT_IMAGE_FORMAT)
    logger.debug(
        "Resized image %sx%s -> %sx%s (%d bytes)",
        image.width,
        image.height,
        width,
        height,
        buffer.tell(),
    )
    return buffer.getvalue()


async def resize_cover(image_bytes: bytes, width: int, height: int) -> bytes:
    return await asyncio.to_thread(resize_cover_sync, image_bytes, width, height)


def _normalise_mode(image: Image.Image) -> Image.Image:
    has_alpha = image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info
    target = "RGBA" if has_alpha else "RGB"
    if image.mode == target:
        return image.copy()
    return image.convert(target)


__all__ = [
    "decode_image_part",
    "find_image_part",
    "resize_cover",
    "resize_cover_sync",
    "strip_code_fences",
]
