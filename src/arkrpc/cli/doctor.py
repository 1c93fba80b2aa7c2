"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from arkrpc.adapters.http_client import build_async_client
from arkrpc.core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective settings and check that the base URL answers."""

    settings = AppSettings()

    table = Table(title="arkrpc Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User config", "OK", str(get_user_env_file()))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Error policy", "OK", settings.error_policy.value)
    table.add_row("Validate responses", "OK", "yes" if settings.validate_responses else "no")

    ok_http = False
    if settings.base_url:
        table.add_row("Base URL", "OK", settings.base_url)
        # Cualquier status cuenta: solo interesa que el host responda.
        ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
    else:
        table.add_row("Base URL", "MISSING", "Set ARKRPC_BASE_URL or run `arkrpc doctor setup`")

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    base_url = typer.prompt("Base URL", default=current.base_url or "", show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=current.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not base_url:
        raise typer.BadParameter("base URL is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be greater than 0")

    env_path = write_user_env_vars(
        {
            "ARKRPC_BASE_URL": base_url,
            "ARKRPC_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
