"""Construcción de la query de `/list`.

La API usa la convención de parámetros con corchetes de Strapi
(`populate[0]`, `pagination[page]`, `filters[...][$eq]`, `sort[0]`).
Esta función es pura: mismos parámetros, mismo mapa.
"""

from __future__ import annotations

from core.domain.models import ListRequestParams

QueryParameterMap = dict[str, str | int]

BASE_POPULATE: tuple[str, ...] = ("author.avatar", "categories", "cover")
VIDEO_POPULATE = "video"

CATEGORY_FILTER_KEY = "filters[categories][name][$eq]"
LIKE_SORT_KEY = "sort[0]"
PAGE_KEY = "pagination[page]"
PAGE_SIZE_KEY = "pagination[pageSize]"


def populate_directives(*, include_video: bool = True) -> list[str]:
    fields = list(BASE_POPULATE)
    if include_video:
        fields.append(VIDEO_POPULATE)
    return fields


def build_list_query(
    params: ListRequestParams | None = None,
    *,
    include_video: bool = True,
) -> QueryParameterMap:
    """Convierte `ListRequestParams` en el mapa de parámetros de URL.

    Reglas:
    - `populate[i]` siempre presentes, con índices contiguos desde 0.
    - `pagination[page]`/`pagination[pageSize]` como enteros.
    - El filtro por categoría y el sort por likes solo si su valor no es vacío.
    """

    params = params or ListRequestParams()

    query: QueryParameterMap = {}
    for index, field in enumerate(populate_directives(include_video=include_video)):
        query[f"populate[{index}]"] = field

    query[PAGE_KEY] = params.start
    query[PAGE_SIZE_KEY] = params.limit

    if params.category:
        query[CATEGORY_FILTER_KEY] = params.category
    if params.like:
        query[LIKE_SORT_KEY] = f"like:{params.like}"

    return query
