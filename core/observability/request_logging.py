"""Request logging helpers for HTTP traffic."""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PAYLOAD_PREVIEW_LIMIT = 2048
_INLINE_DATA_PREVIEW = 48
_QUIET_PATHS = ("/health",)


def _format_client_address(client: tuple[str, int] | None) -> str:
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}" if port is not None else host


def _summarise_string(value: str) -> str:
    """Replace data URLs and very long strings with a short description."""

    if value.startswith("data:") and "," in value:
        header = value.split(",", 1)[0]
        return f"<{header}, {len(value)} chars>"
    if len(value) > 512:
        return f"{value[:_INLINE_DATA_PREVIEW]}... <{len(value)} chars>"
    return value


def _summarise_payload(value: Any, *, depth: int = 8) -> Any:
    if depth <= 0:
        return "<max depth reached>"

    if isinstance(value, Mapping):
        return {key: _summarise_payload(item, depth=depth - 1) for key, item in value.items()}
    if isinstance(value, list):
        return [_summarise_payload(item, depth=depth - 1) for item in value]
    if isinstance(value, str):
        return _summarise_string(value)
    return value


def render_payload_preview(body: bytes) -> str:
    """Return a length-limited preview of a JSON body with inline images collapsed."""

    if not body:
        return "<empty>"

    try:
        parsed = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return f"<non-json {len(body)} bytes>"

    text = json.dumps(_summarise_payload(parsed), ensure_ascii=False, separators=(",", ":"))
    if len(text) > _PAYLOAD_PREVIEW_LIMIT:
        return f"{text[:_PAYLOAD_PREVIEW_LIMIT]}... ({len(body)} bytes)"
    return text


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request and its outcome."""

    if getattr(app.state, "_http_request_logging_installed", False):  # pragma: no cover - idempotence
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        if path in _QUIET_PATHS:
            return await call_next(request)

        client = request.client
        client_addr = _format_client_address((client.host, client.port) if client else None)
        logger.info("HTTP %s %s from %s", request.method, path, client_addr)

        if logger.isEnabledFor(logging.DEBUG):
            body = await request.body()
            logger.debug("HTTP %s %s payload %s", request.method, path, render_payload_preview(body))

        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "HTTP %s %s -> %s (%.0f ms)",
            request.method,
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    app.state._http_request_logging_installed = True
