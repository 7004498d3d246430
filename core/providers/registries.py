"""Provider Registries - Global registry for content providers."""

from __future__ import annotations

from typing import Dict, Type

from core.providers.base import BaseContentProvider

_content_providers: Dict[str, Type[BaseContentProvider]] = {}


def register_content_provider(name: str, provider_class: Type[BaseContentProvider]) -> None:
    """Register a content provider implementation under its provider kind."""
    _content_providers[name] = provider_class


def registered_content_providers() -> Dict[str, Type[BaseContentProvider]]:
    """Return a copy of the registry."""
    return dict(_content_providers)
