"""Strength-to-sampling mapping."""

from __future__ import annotations

from typing import Mapping, Optional

from config.generation.defaults import STRENGTH_HIGH_THRESHOLD, STRENGTH_LOW_THRESHOLD
from config.generation.sampling import (
    DEFAULT_MODEL_KEY,
    GLOBAL_DEFAULT_BANDS,
    TEMPERATURE_TABLE,
    TemperatureBands,
)

TemperatureTable = Mapping[str, Mapping[str, TemperatureBands]]


def strength_band(strength: float) -> str:
    """Return ``strong`` (>70), ``medium`` (41-70) or ``weak`` (<=40)."""

    value = clamp_strength(strength)
    if value > STRENGTH_HIGH_THRESHOLD:
        return "strong"
    if value > STRENGTH_LOW_THRESHOLD:
        return "medium"
    return "weak"


def clamp_strength(strength: Optional[float]) -> float:
    if strength is None:
        return 0.0
    return max(0.0, min(100.0, float(strength)))


def lookup_bands(
    provider: str,
    model: Optional[str],
    table: TemperatureTable = TEMPERATURE_TABLE,
) -> TemperatureBands:
    """Return the bands for ``(provider, model)``.

    Unknown models use the provider's default row; unknown providers use
    :data:`GLOBAL_DEFAULT_BANDS`.
    """

    provider_rows = table.get((provider or "").lower())
    if not provider_rows:
        return GLOBAL_DEFAULT_BANDS
    if model and model in provider_rows:
        return provider_rows[model]
    return provider_rows.get(DEFAULT_MODEL_KEY, GLOBAL_DEFAULT_BANDS)


def map_strength_to_temperature(
    provider: str,
    model: Optional[str],
    strength: float,
    table: TemperatureTable = TEMPERATURE_TABLE,
) -> float:
    """Return the sampling temperature for a strength setting (0-100)."""

    bands = lookup_bands(provider, model, table)
    return getattr(bands, strength_band(strength))


__all__ = [
    "TemperatureTable",
    "clamp_strength",
    "lookup_bands",
    "map_strength_to_temperature",
    "strength_band",
]
