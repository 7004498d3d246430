"""Provider capability declarations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProviderCapabilities:
    """Capabilities supported by a content provider.

    ``image_input`` False means image parts are degraded into text placeholders
    before they reach the backend. ``image_output`` False means the backend never
    returns inline image parts.
    """

    image_input: bool = False
    image_output: bool = False


__all__ = ["ProviderCapabilities"]
