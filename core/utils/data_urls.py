"""Helpers for the base64 data URLs exchanged with the canvas UI."""

from __future__ import annotations

import base64
from dataclasses import dataclass

DEFAULT_MIME_TYPE = "image/png"


@dataclass(frozen=True, slots=True)
class DataUrl:
    """A decoded ``data:`` URL header with its still-encoded payload."""

    mime_type: str
    data: str


def parse_data_url(value: str, default_mime_type: str = DEFAULT_MIME_TYPE) -> DataUrl:
    """Split a ``data:<mime>;base64,<payload>`` string into its parts.

    Bare base64 strings (no ``data:`` header) are accepted and tagged with
    ``default_mime_type``. The payload is returned untouched; callers decide
    whether to decode it.
    """

    text = (value or "").strip()
    if not text.startswith("data:") or "," not in text:
        return DataUrl(mime_type=default_mime_type, data=text)

    header, payload = text.split(",", 1)
    mime_type = header[5:].split(";", 1)[0].strip() or default_mime_type
    return DataUrl(mime_type=mime_type, data=payload.strip())


def build_data_url(mime_type: str, data: bytes | str) -> str:
    """Return a ``data:`` URL for raw bytes or an already encoded payload."""

    if isinstance(data, bytes):
        data = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{data}"


__all__ = ["DEFAULT_MIME_TYPE", "DataUrl", "build_data_url", "parse_data_url"]
