"""Tests for provider capability declarations."""

from __future__ import annotations

from dataclasses import fields
from types import SimpleNamespace

from core.providers.capabilities import ProviderCapabilities
from core.providers.content.gemini import GeminiContentProvider
from core.providers.content.openrouter import OpenRouterContentProvider


def test_capabilities_only_declare_image_flags() -> None:
    assert [field.name for field in fields(ProviderCapabilities)] == ["image_input", "image_output"]
    assert ProviderCapabilities() == ProviderCapabilities(image_input=False, image_output=False)


def test_adapters_declare_image_capabilities() -> None:
    gemini = GeminiContentProvider("key", "gemini-2.5-flash-image", client=SimpleNamespace(models=None))
    openrouter = OpenRouterContentProvider("key", "openai/gpt-4o")

    assert gemini.capabilities == ProviderCapabilities(image_input=True, image_output=True)
    assert openrouter.capabilities == ProviderCapabilities(image_input=True, image_output=False)
