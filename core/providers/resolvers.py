"""Provider Resolvers - Selection of Content Providers at Runtime

Maps a public provider identifier (``primary`` / ``secondary``, or the kind
aliases ``gemini`` / ``openrouter``) plus an optional model hint to a ready
adapter. Selection is pure apart from the credential check, which goes
through an injectable ``env_lookup`` callable.

Unknown identifiers resolve to the default provider. The fallback is logged
at WARNING level and the resolved identifier is what callers must echo back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from config.api_keys import PROVIDER_API_KEY_ENV
from config.generation.defaults import DEFAULT_PROVIDER_ID, PROVIDER_ID_ALIASES, PROVIDER_IDS
from config.generation.models import OPENROUTER_MODEL_ALIASES, openrouter_default_model
from core.exceptions import ConfigurationError
from core.providers.base import BaseContentProvider
from core.providers.registries import registered_content_providers
from core.utils.env import EnvLookup, get_env

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedProvider:
    """Public identifier and provider kind."""

    provider_id: str
    kind: str


def resolve_provider_id(requested: Optional[str]) -> ResolvedProvider:
    """Normalise a requested provider identifier."""

    normalized = (requested or "").strip().lower()
    if not normalized:
        return ResolvedProvider(DEFAULT_PROVIDER_ID, PROVIDER_IDS[DEFAULT_PROVIDER_ID])

    provider_id = PROVIDER_ID_ALIASES.get(normalized, normalized)
    if provider_id in PROVIDER_IDS:
        return ResolvedProvider(provider_id, PROVIDER_IDS[provider_id])

    logger.warning(
        "Unknown provider identifier '%s'; falling back to default provider '%s'",
        requested,
        DEFAULT_PROVIDER_ID,
    )
    return ResolvedProvider(DEFAULT_PROVIDER_ID, PROVIDER_IDS[DEFAULT_PROVIDER_ID])


def resolve_openrouter_model(model: Optional[str]) -> str:
    """Return the OpenRouter model id for a hint.

    Known aliases are expanded, ``vendor/model`` ids pass through and every
    other hint (tier names, Gemini model names) maps to the default model.
    """

    normalized = (model or "").strip()
    if not normalized:
        return openrouter_default_model()
    alias = OPENROUTER_MODEL_ALIASES.get(normalized.lower())
    if alias:
        return alias
    if "/" in normalized:
        return normalized
    return openrouter_default_model()


def resolve_model(kind: str, model: Optional[str]) -> Optional[str]:
    """Return the concrete model identifier for ``kind``."""

    if kind == "openrouter":
        return resolve_openrouter_model(model)
    return (model or "").strip() or None


def get_content_provider(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    *,
    env_lookup: EnvLookup = get_env,
) -> BaseContentProvider:
    """Return a ready-to-use content provider.

    Raises:
        ConfigurationError: when the provider's API key is not configured, or
            when the provider kind has no registered implementation.
    """

    resolved = resolve_provider_id(provider)
    kind = resolved.kind
    providers = registered_content_providers()

    if kind not in providers:
        raise ConfigurationError(
            f"Provider {kind} not registered. Available: {list(providers)}",
            key=f"provider.{kind}",
        )

    key_name = PROVIDER_API_KEY_ENV[kind]
    api_key = env_lookup(key_name)
    if not api_key:
        raise ConfigurationError(
            f"{key_name} is not configured; it is required for provider '{resolved.provider_id}' ({kind})",
            key=key_name,
        )

    model_name = resolve_model(kind, model)
    provider_class = providers[kind]
    instance = provider_class(api_key, model_name)
    logger.debug(
        "Resolved content provider %s for provider id %s (model=%s)",
        provider_class.__name__,
        resolved.provider_id,
        instance.model,
    )
    return instance


def list_available_providers(env_lookup: EnvLookup = get_env) -> List[str]:
    """Return the public identifiers whose credentials are configured."""

    available: List[str] = []
    for provider_id, kind in PROVIDER_IDS.items():
        if env_lookup(PROVIDER_API_KEY_ENV[kind]):
            available.append(provider_id)
    return available


__all__ = [
    "ResolvedProvider",
    "get_content_provider",
    "list_available_providers",
    "resolve_model",
    "resolve_openrouter_model",
    "resolve_provider_id",
]
