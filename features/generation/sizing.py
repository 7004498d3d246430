"""Output size resolution for generated images.

Two modes:
    - ``canvas``: the caller's pixel size, rounded, long edge capped at
      ``MAX_LONG_EDGE`` with the aspect ratio preserved.
    - ``preset``: a long edge plus an aspect ratio preset. The long edge is
      clamped into ``[MIN_EDGE, MAX_LONG_EDGE]`` before the short edge is
      derived.

Both modes finish by raising each side to ``MIN_EDGE`` and then rounding
each side down to an even number. Rounding down after clamping never
pushes a side above ``MAX_LONG_EDGE`` since the bounds are even.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from config.generation.defaults import (
    ASPECT_RATIOS,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_LONG_EDGE,
    MAX_LONG_EDGE,
    MIN_EDGE,
)

logger = logging.getLogger(__name__)

OutputMode = Literal["canvas", "preset"]


@dataclass(frozen=True, slots=True)
class OutputSize:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class OutputSizeSpec:
    """Requested output size; which fields matter depends on ``mode``."""

    mode: OutputMode = "canvas"
    width: Optional[float] = None
    height: Optional[float] = None
    long_edge: Optional[int] = None
    aspect_ratio: Optional[str] = None


def parse_aspect_ratio(aspect_ratio: str) -> float:
    """Return width / height for an ``"W:H"`` string."""

    width, height = (float(value) for value in aspect_ratio.split(":", 1))
    return width / height


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def compute_target_from_long_edge(long_edge: int, aspect_ratio: str) -> Tuple[int, int]:
    """Derive width and height from a long edge and an aspect ratio preset."""

    ratio = parse_aspect_ratio(aspect_ratio)
    if ratio >= 1:
        width = long_edge
        height = round(long_edge / ratio)
    else:
        height = long_edge
        width = round(long_edge * ratio)
    return max(1, int(width)), max(1, int(height))


def make_even(width: int, height: int) -> Tuple[int, int]:
    """Round each side down to an even number (minimum 2)."""

    width = max(2, int(width))
    height = max(2, int(height))
    return width - width % 2, height - height % 2


def _resolve_preset(long_edge: Optional[int], aspect_ratio: Optional[str]) -> Tuple[int, int]:
    edge = int(_clamp(round(long_edge or DEFAULT_LONG_EDGE), MIN_EDGE, MAX_LONG_EDGE))
    aspect = aspect_ratio if aspect_ratio in ASPECT_RATIOS else None
    if aspect is None:
        if aspect_ratio:
            logger.warning(
                "Unknown aspect ratio '%s'; using %s", aspect_ratio, DEFAULT_ASPECT_RATIO
            )
        aspect = DEFAULT_ASPECT_RATIO
    return compute_target_from_long_edge(edge, aspect)


def _resolve_canvas(width: float, height: float) -> Tuple[int, int]:
    target_width = max(1, round(width))
    target_height = max(1, round(height))

    current_long_edge = max(target_width, target_height)
    if current_long_edge > MAX_LONG_EDGE:
        scale = MAX_LONG_EDGE / current_long_edge
        target_width = round(target_width * scale)
        target_height = round(target_height * scale)
    return target_width, target_height


def resolve_output_size(spec: OutputSizeSpec) -> OutputSize:
    """Return the final even, bounded output size for ``spec``.

    Canvas mode without both dimensions falls back to the preset path.
    """

    has_canvas_size = (
        spec.width is not None
        and spec.height is not None
        and spec.width > 0
        and spec.height > 0
    )
    if spec.mode == "canvas" and has_canvas_size:
        width, height = _resolve_canvas(float(spec.width), float(spec.height))
    else:
        width, height = _resolve_preset(spec.long_edge, spec.aspect_ratio)

    width = int(_clamp(width, MIN_EDGE, MAX_LONG_EDGE))
    height = int(_clamp(height, MIN_EDGE, MAX_LONG_EDGE))
    width, height = make_even(width, height)
    return OutputSize(width=width, height=height)


__all__ = [
    "OutputMode",
    "OutputSize",
    "OutputSizeSpec",
    "compute_target_from_long_edge",
    "make_even",
    "parse_aspect_ratio",
    "resolve_output_size",
]
