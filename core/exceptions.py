"""Custom Exception Hierarchy for the Sketch Generation Backend
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. Service layer or provider adapter raises typed exception
    2. Route (or the FastAPI exception handler in main.py) catches it
    3. Handler converts it to a structured JSON payload (core/http/errors.py)
    4. Client receives ``{"error": <message>, "type": <kind>, ...}``

Only :class:`EnhancementError` is recovered below the HTTP boundary; the
image service falls back to the original prompt when it is raised.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when an external provider (AI API) fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        original_error: Exception | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)


class NoContentError(ProviderError):
    """Raised when a provider answers successfully but with no candidates."""


class NoImageDataError(ProviderError):
    """Raised when a provider response carries no inline image part."""


class EnhancementError(ServiceError):
    """Raised when the optional prompt enhancement step fails."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


__all__ = [
    "ConfigurationError",
    "EnhancementError",
    "NoContentError",
    "NoImageDataError",
    "ProviderError",
    "ServiceError",
    "ValidationError",
]
