"""Base Provider Interface - Contract for Multimodal Content Providers
Every backend AI service is wrapped by one adapter implementing
:class:`BaseContentProvider`. Adapters are siblings; none inherits behaviour
from another.

Adapter contract:
    - ``generate_content(contents, config)`` translates the provider-agnostic
      content model (core/providers/types.py) into the backend wire format,
      performs exactly one call and translates the answer back into a
      :class:`GenerateContentResult`.
    - Only fields present in :class:`GenerationConfig` are sent.
    - Non-2xx answers raise ``ProviderError`` carrying status and raw body.
    - Answers without candidates raise ``NoContentError``.
    - No retries.
    - ``capabilities`` declares which part types survive the translation.

See Also:
    - core/providers/content/: Concrete adapters
    - core/providers/resolvers.py: Provider selection
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from core.providers.capabilities import ProviderCapabilities
from core.providers.types import Content, GenerateContentResult, GenerationConfig

logger = logging.getLogger(__name__)


class BaseContentProvider(ABC):
    """Base interface for multimodal content generation providers."""

    provider_name: str
    model: str
    capabilities: ProviderCapabilities

    @abstractmethod
    async def generate_content(
        self,
        contents: Sequence[Content],
        config: Optional[GenerationConfig] = None,
    ) -> GenerateContentResult:
        """Send ``contents`` to the backend and return the normalised result."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={getattr(self, 'model', None)!r})"


__all__ = ["BaseContentProvider"]
