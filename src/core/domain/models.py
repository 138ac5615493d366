"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (parámetros de entrada) y tolerante
  con la respuesta de la API (campos extra se ignoran).
- Facilita la serialización del listado para exportarlo a JSON.

Nota:
- La forma de la respuesta es un contrato externo de la API de contenidos;
  estos modelos la describen, no la definen.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SortDirection(str, Enum):
    """Direcciones de orden aceptadas por la API para `sort`."""

    ASC = "asc"
    DESC = "desc"


class ListRequestParams(BaseModel):
    """Preferencias de paginación, filtro y orden para `/list`.

    Por qué un modelo y no kwargs sueltos:
    - Valida `start`/`limit` antes de construir la query.
    - Es inmutable: cada llamada construye el suyo.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(
        default=1,
        ge=1,
        description="Número de página (1-based).",
    )
    limit: int = Field(
        default=3,
        ge=1,
        description="Tamaño de página.",
    )
    category: str | None = Field(
        default=None,
        description="Nombre exacto de categoría para filtrar (opcional).",
    )
    like: str | None = Field(
        default=None,
        description="Dirección de orden por likes, p.ej. 'asc' o 'desc' (opcional).",
    )

    def next_page(self) -> ListRequestParams:
        """Mismos filtros, página siguiente."""

        return self.model_copy(update={"start": self.start + 1})


class MediaAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str


class CoverImage(MediaAsset):
    width: int | None = None
    height: int | None = None


class Author(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    avatar: MediaAsset


class Category(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class ListResponseItem(BaseModel):
    """Elemento del listado (imagen o vídeo) con relaciones pobladas."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | None = Field(
        default=None,
        description="Id numérico del registro si la API lo devuelve.",
    )
    document_id: str | None = Field(
        default=None,
        alias="documentId",
        description="Id de documento si la API lo devuelve.",
    )
    type: Literal["image", "video"]
    title: str
    desc: str
    author: Author
    like: int = Field(
        default=0,
        description="Número de likes.",
    )
    cover: CoverImage
    video: MediaAsset | None = None
    categories: list[Category] = Field(default_factory=list)


class Pagination(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    page: int
    page_size: int = Field(..., alias="pageSize")
    page_count: int | None = Field(default=None, alias="pageCount")
    total: int | None = None

    @property
    def has_next(self) -> bool:
        if self.page_count is None:
            return False
        return self.page < self.page_count


class ListMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pagination: Pagination | None = None


class ListResponse(BaseModel):
    """Sobre de la respuesta de `/list`: `data` + `meta`."""

    model_config = ConfigDict(extra="ignore")

    data: list[ListResponseItem]
    meta: ListMeta = Field(default_factory=ListMeta)

    @property
    def has_next(self) -> bool:
        return self.meta.pagination is not None and self.meta.pagination.has_next
