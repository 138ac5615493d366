"""Contrato de las fuentes de listado.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI depende de esta abstracción; los tests pueden pasar un doble.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ListRequestParams, ListResponse


@runtime_checkable
class MediaListSource(Protocol):
    """Contrato mínimo para obtener una página del listado.

    Reglas de diseño:
    - `fetch_list` bloquea hasta tener la respuesta.
    - `afetch_list` hace la misma petición bajo `await`.
    - Los errores HTTP/transporte se propagan sin traducir.
    """

    def fetch_list(self, params: ListRequestParams | None = None) -> ListResponse:
        ...

    async def afetch_list(self, params: ListRequestParams | None = None) -> ListResponse:
        ...
