"""Environment variable names holding provider credentials.

Keys are read at request time through ``core.utils.env.get_env`` so a missing
credential only fails the requests that need it.
"""

from __future__ import annotations

from typing import Dict

GEMINI_API_KEY_ENV = "GOOGLE_GEMINI_API_KEY"
OPENROUTER_API_KEY_ENV = "OPENROUTER_API_KEY"

# Provider kind -> environment variable checked by the provider selector
PROVIDER_API_KEY_ENV: Dict[str, str] = {
    "gemini": GEMINI_API_KEY_ENV,
    "openrouter": OPENROUTER_API_KEY_ENV,
}

__all__ = [
    "GEMINI_API_KEY_ENV",
    "OPENROUTER_API_KEY_ENV",
    "PROVIDER_API_KEY_ENV",
]
