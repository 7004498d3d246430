"""Provider discovery route."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from config.generation.defaults import DEFAULT_PROVIDER_ID
from core.providers.factory import list_available_providers
from core.pydantic_schemas import ProvidersResponse

router = APIRouter(prefix="/api", tags=["providers"])
logger = logging.getLogger(__name__)


@router.get("/providers")
async def list_providers() -> dict:
    """Report which provider identifiers have credentials configured."""

    providers = list_available_providers()
    logger.debug("Configured providers: %s", providers)
    return ProvidersResponse(providers=providers, default=DEFAULT_PROVIDER_ID).to_payload()
