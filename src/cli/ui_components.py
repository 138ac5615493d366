"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ListResponse, ListResponseItem, Pagination


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("media-feed", style="bold cyan")
    subtitle = Text("Imágenes • Vídeos • Categorías", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_items_table(items: list[ListResponseItem], *, title: str = "Media") -> Table:
    """Tabla Rich con una fila por elemento del listado."""

    table = Table(title=title)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="green")
    table.add_column("Likes", style="yellow", justify="right")
    table.add_column("Categories", style="magenta")
    table.add_column("Cover", style="dim")

    for item in items:
        categories = ", ".join(c.name for c in item.categories)
        table.add_row(
            item.type,
            item.title,
            item.author.name,
            str(item.like),
            categories or "-",
            item.cover.url,
        )
    return table


def format_pagination(pagination: Pagination | None) -> str:
    if pagination is None:
        return "No pagination metadata"
    pages = pagination.page_count if pagination.page_count is not None else "?"
    total = pagination.total if pagination.total is not None else "?"
    return f"Page {pagination.page}/{pages} • {pagination.page_size} per page • {total} total"


def build_page_panel(response: ListResponse) -> Panel:
    """Panel con la tabla de una página y su paginación como subtítulo."""

    table = build_items_table(response.data)
    return Panel(
        table,
        subtitle=Text(format_pagination(response.meta.pagination), style="dim"),
        border_style="cyan",
    )
