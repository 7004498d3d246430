"""Strength-to-temperature lookup table.

Each entry lists the temperature used for the strong (>70), medium (41-70)
and weak (<=40) strength bands. Every row satisfies
``0 < strong <= medium <= weak <= 1``.
"""

from __future__ import annotations

from typing import Dict, NamedTuple


class TemperatureBands(NamedTuple):
    strong: float
    medium: float
    weak: float


DEFAULT_MODEL_KEY = "default"

GLOBAL_DEFAULT_BANDS = TemperatureBands(strong=0.3, medium=0.5, weak=0.7)

TEMPERATURE_TABLE: Dict[str, Dict[str, TemperatureBands]] = {
    "gemini": {
        DEFAULT_MODEL_KEY: TemperatureBands(strong=0.2, medium=0.4, weak=0.7),
        "gemini-2.5-flash-image": TemperatureBands(strong=0.3, medium=0.4, weak=0.6),
        "gemini-3-pro-image-preview": TemperatureBands(strong=0.6, medium=0.8, weak=1.0),
        "gemini-3-flash-preview": TemperatureBands(strong=0.7, medium=0.85, weak=1.0),
        "gemini-3-pro-preview": TemperatureBands(strong=0.7, medium=0.85, weak=1.0),
    },
    "openrouter": {
        DEFAULT_MODEL_KEY: TemperatureBands(strong=0.3, medium=0.5, weak=0.7),
        "z-ai/glm-4.6v": TemperatureBands(strong=0.4, medium=0.6, weak=0.8),
        "qwen/qwen3-vl-235b-a22b-instruct": TemperatureBands(strong=0.2, medium=0.4, weak=0.6),
    },
}

__all__ = [
    "DEFAULT_MODEL_KEY",
    "GLOBAL_DEFAULT_BANDS",
    "TEMPERATURE_TABLE",
    "TemperatureBands",
]
