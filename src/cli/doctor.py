"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.content_api import ContentAPIClient
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import ListRequestParams

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_list_endpoint(settings: AppSettings) -> tuple[bool, str]:
    """Probe `/list` with a one-item page."""

    client = ContentAPIClient(settings)
    try:
        response = client.fetch_list(ListRequestParams(start=1, limit=1))
    except httpx.HTTPStatusError as exc:
        return False, f"HTTP {exc.response.status_code}"
    except (httpx.TransportError, ValidationError) as exc:
        return False, str(exc)

    pagination = response.meta.pagination
    total = pagination.total if pagination and pagination.total is not None else "?"
    return True, f"{len(response.data)} item(s), total={total}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="media-feed Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> public access only")
    timeout = f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "httpx default"
    table.add_row("HTTP timeout", "OK", timeout)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    ok_api, detail_api = _check_list_endpoint(settings)
    table.add_row("List endpoint", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `media-feed doctor setup-api` to point at another content API."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-api")
def setup_api() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    api_token = typer.prompt(
        "API token (empty for none)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "MEDIA_FEED_API_BASE_URL": base_url.rstrip("/"),
            "MEDIA_FEED_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
