"""Provider Factory - Public entry points for content provider resolution.

Services import from here rather than from the registry internals:

    provider = get_content_provider(request.provider, model_name)

Registration happens in ``core/providers/__init__.py``.
"""

from __future__ import annotations

import logging

from core.providers.registries import register_content_provider
from core.providers.resolvers import (
    get_content_provider,
    list_available_providers,
    resolve_provider_id,
)

logger = logging.getLogger(__name__)

__all__ = [
    "get_content_provider",
    "list_available_providers",
    "register_content_provider",
    "resolve_provider_id",
]
