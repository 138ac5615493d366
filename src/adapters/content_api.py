"""Cliente de la API de contenidos: listado de medios.

Implementación:
- Construye la query con `core.services.list_query.build_list_query`.
- GET `<api_base_url>/list` con httpx (síncrono o async).
- Valida el cuerpo como `ListResponse`.

Notas:
- Una sola petición por llamada; sin retries, sin caché.
- `httpx.TransportError` y `httpx.HTTPStatusError` se propagan al llamador.
"""

from __future__ import annotations

from collections.abc import Coroutine
from typing import Any

import httpx

from adapters.http_client import build_async_client, build_client
from core.config import AppSettings
from core.domain.models import ListRequestParams, ListResponse
from core.interfaces.list_source import MediaListSource
from core.log import get_logger
from core.services.list_query import QueryParameterMap, build_list_query

LIST_PATH = "/list"

logger = get_logger(__name__)


class ContentAPIClient(MediaListSource):
    """Obtiene páginas del listado de la API de contenidos."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        include_video: bool = True,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._include_video = include_video
        # `httpx.MockTransport` sirve para ambos clientes.
        self._transport = transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def build_query(self, params: ListRequestParams | None = None) -> QueryParameterMap:
        return build_list_query(params, include_video=self._include_video)

    def fetch_list(self, params: ListRequestParams | None = None) -> ListResponse:
        query = self.build_query(params)
        logger.debug("GET %s%s params=%s", self._settings.api_base_url, LIST_PATH, query)

        with build_client(self._settings, transport=self._transport) as client:
            try:
                response = client.get(LIST_PATH, params=query)
            except httpx.TransportError as exc:
                self._log_transport_error(exc)
                raise

        return self._parse(response)

    async def afetch_list(self, params: ListRequestParams | None = None) -> ListResponse:
        query = self.build_query(params)
        logger.debug("GET %s%s params=%s (async)", self._settings.api_base_url, LIST_PATH, query)

        async with build_async_client(self._settings, transport=self._transport) as client:
            try:
                response = await client.get(LIST_PATH, params=query)
            except httpx.TransportError as exc:
                self._log_transport_error(exc)
                raise

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> ListResponse:
        logger.debug("HTTP %s <- %s", response.status_code, response.url)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.warning("Content API returned HTTP %s for %s", response.status_code, response.url)
            raise
        # Un cuerpo que no es JSON también sale como ValidationError.
        return ListResponse.model_validate_json(response.content)

    def _log_transport_error(self, exc: httpx.TransportError) -> None:
        logger.warning(
            "Content API request failed (%s) for %s%s: %s",
            type(exc).__name__,
            self._settings.api_base_url,
            LIST_PATH,
            exc,
        )


def fetch_list(
    params: ListRequestParams | None = None,
    prefer_suspendable: bool = False,
    *,
    client: MediaListSource | None = None,
) -> ListResponse | Coroutine[Any, Any, ListResponse]:
    """Obtiene una página del listado.

    - `prefer_suspendable=False`: hace la petición y devuelve `ListResponse`.
    - `prefer_suspendable=True`: devuelve una corrutina; la petición ocurre
      solo cuando el llamador hace `await`.
    """

    client = client or ContentAPIClient()
    if prefer_suspendable:
        return client.afetch_list(params)
    return client.fetch_list(params)
