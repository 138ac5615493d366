"""CLI principal (Typer).

Por qué Typer:
- Declaración tipada de opciones, ayuda autogenerada.
- Los comandos solo orquestan: la lógica vive en `core`/`adapters`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.content_api import ContentAPIClient, fetch_list
from adapters.json_exporter import export_list_json
from cli import doctor
from cli.ui_components import build_page_panel, print_banner
from core.config import AppSettings
from core.domain.models import ListRequestParams, ListResponse, SortDirection
from core.interfaces.list_source import MediaListSource
from core.log import get_logger, setup_logging

app = typer.Typer(no_args_is_help=True, help="Browse the media list of the content API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = get_logger(__name__)


def build_content_client(settings: AppSettings, *, include_video: bool = True) -> MediaListSource:
    return ContentAPIClient(settings, include_video=include_video)


def _fetch_pages(
    client: MediaListSource,
    params: ListRequestParams,
    *,
    pages: int,
    use_async: bool,
) -> list[ListResponse]:
    results: list[ListResponse] = []
    current = params
    for _ in range(pages):
        if use_async:
            response = asyncio.run(fetch_list(current, True, client=client))
        else:
            response = fetch_list(current, False, client=client)
        results.append(response)
        if not response.has_next:
            break
        current = current.next_page()
    return results


@app.command(name="list")
def list_media(
    start: int = typer.Option(1, "--start", min=1, help="Page number (1-based)."),
    limit: int | None = typer.Option(None, "--limit", min=1, help="Page size (default from config)."),
    category: str | None = typer.Option(None, "--category", "-c", help="Exact category name."),
    like: SortDirection | None = typer.Option(None, "--like", help="Sort by likes."),
    no_video: bool = typer.Option(False, "--no-video", help="Do not populate the video relation."),
    use_async: bool = typer.Option(False, "--async", help="Fetch through the async client."),
    pages: int = typer.Option(1, "--pages", min=1, help="Consecutive pages to fetch."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of tables."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the last page to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Fetch one or more pages of the media list."""

    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    params = ListRequestParams(
        start=start,
        limit=limit or settings.default_page_size,
        category=category,
        like=like.value if like else None,
    )
    client = build_content_client(settings, include_video=not no_video)

    try:
        results = _fetch_pages(client, params, pages=pages, use_async=use_async)
    except httpx.HTTPStatusError as exc:
        _console.print(f"[red]HTTP {exc.response.status_code}[/red] from {exc.request.url}")
        raise typer.Exit(code=1) from exc
    except httpx.TransportError as exc:
        _console.print(f"[red]Transport error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        _console.print(f"[red]Unexpected response shape:[/red] {exc.error_count()} error(s)")
        raise typer.Exit(code=1) from exc

    if as_json:
        payload = [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in results]
        typer.echo(json.dumps(payload if pages > 1 else payload[0], ensure_ascii=False, indent=2))
    else:
        print_banner(_console)
        for response in results:
            _console.print(build_page_panel(response))

    if output is not None:
        path = export_list_json(response=results[-1], output_path=output)
        logger.info("Saved page to %s", path)
        if not as_json:
            _console.print(f"[green]Saved:[/green] {path}")


def run() -> None:
    app()
