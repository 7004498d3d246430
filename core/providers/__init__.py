"""Provider Registry - Import-Time Registration of Content Providers
Importing this package registers every content adapter so the selector in
``core.providers.resolvers`` can construct them by provider kind.

Usage Example:
    from core.providers.factory import get_content_provider
    provider = get_content_provider("primary", "gemini-2.5-flash-image")
    result = await provider.generate_content(contents, config)

See Also:
    - core/providers/factory.py: Public factory entry points
    - core/providers/base.py: Adapter contract
    - core/providers/types.py: Content model
"""

import logging

from core.providers import factory  # re-export for convenience
from core.providers.content.gemini import GeminiContentProvider
from core.providers.content.openrouter import OpenRouterContentProvider
from core.providers.registries import register_content_provider
from core.providers.resolvers import get_content_provider, list_available_providers

register_content_provider("gemini", GeminiContentProvider)
register_content_provider("openrouter", OpenRouterContentProvider)

logger = logging.getLogger(__name__)
logger.debug("Content provider registry initialised")

__all__ = [
    "GeminiContentProvider",
    "OpenRouterContentProvider",
    "factory",
    "get_content_provider",
    "list_available_providers",
    "register_content_provider",
]
