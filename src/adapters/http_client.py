"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, headers y timeout para el cliente síncrono y el async.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin retries ni caché: los errores salen tal cual de httpx.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings


def _client_options(
    settings: AppSettings,
    extra_headers: dict[str, str] | None,
) -> dict[str, Any]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)

    options: dict[str, Any] = {
        "base_url": settings.api_base_url,
        "headers": headers,
        "follow_redirects": True,
    }
    # Sin timeout configurado aplica el default de httpx.
    if settings.http_timeout_seconds is not None:
        options["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    return options


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando a la API de contenidos."""

    settings = settings or AppSettings()
    return httpx.Client(transport=transport, **_client_options(settings, extra_headers))


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los mismos defaults que `build_client`.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambos modos de fetch se comporten igual.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(transport=transport, **_client_options(settings, extra_headers))
