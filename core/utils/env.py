"""Common environment helpers used across the backend."""

from __future__ import annotations

import os
from typing import Callable, Optional

from core.exceptions import ConfigurationError

__all__ = ["EnvLookup", "get_env", "get_node_env", "is_production"]

# Signature of the environment lookup injected into the provider selector.
EnvLookup = Callable[[str], Optional[str]]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence.

    Empty strings count as missing when ``required`` is set.
    """

    value = os.getenv(key, default)
    if required and not value:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_node_env() -> str:
    """Return the current runtime environment label."""

    return (get_env("NODE_ENV", default="local") or "local").strip()


def is_production() -> bool:
    """True when running in production."""

    return get_node_env() == "production"

