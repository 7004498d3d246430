"""Lighting presets appended to image prompts as an environment clause."""

from __future__ import annotations

from typing import Dict, TypedDict


class LightingPreset(TypedDict):
    name: str
    description: str
    prompt: str


NO_PRESET = "none"

LIGHTING_PRESETS: Dict[str, LightingPreset] = {
    "studio": {
        "name": "Studio",
        "description": "Neutral softbox lighting on a seamless backdrop",
        "prompt": "professional studio lighting, large softboxes, seamless light grey backdrop, soft shadows",
    },
    "golden_hour": {
        "name": "Golden Hour",
        "description": "Warm low sun with long soft shadows",
        "prompt": "outdoor golden hour sunlight, warm tones, long soft shadows, gentle rim light",
    },
    "overcast": {
        "name": "Overcast",
        "description": "Diffuse daylight with minimal shadows",
        "prompt": "diffuse overcast daylight, even illumination, minimal shadows, natural colours",
    },
    "dramatic": {
        "name": "Dramatic",
        "description": "High contrast single key light on a dark background",
        "prompt": "dramatic low-key lighting, single hard key light, deep shadows, dark background",
    },
    "neon": {
        "name": "Neon",
        "description": "Coloured neon accents in a night setting",
        "prompt": "night scene with magenta and cyan neon accent lights, glossy reflections",
    },
}


def get_lighting_prompt(preset: str | None) -> str | None:
    """Return the prompt fragment for ``preset`` or ``None`` when unset/unknown."""

    if not preset or preset == NO_PRESET:
        return None
    entry = LIGHTING_PRESETS.get(preset)
    return entry["prompt"] if entry else None


__all__ = ["LIGHTING_PRESETS", "LightingPreset", "NO_PRESET", "get_lighting_prompt"]
