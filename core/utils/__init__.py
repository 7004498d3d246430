"""Utility helpers shared across core packages.

Kept limited to environment and data URL helpers so importing ``core.utils``
never pulls in provider or feature modules.
"""

from .data_urls import DataUrl, build_data_url, parse_data_url
from .env import EnvLookup, get_env, get_node_env, is_production

__all__ = [
    "DataUrl",
    "EnvLookup",
    "build_data_url",
    "get_env",
    "get_node_env",
    "is_production",
    "parse_data_url",
]
