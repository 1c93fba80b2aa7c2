"""CLI principal (Typer).

Comandos:
- `catalog`: tabla con las operaciones disponibles.
- `call`: valida argumentos contra el shape de request e invoca la operación.
- `schema`: exporta el catálogo como JSON Schema.
- `doctor`: diagnósticos y configuración.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from arkrpc.adapters.json_exporter import export_catalog_json
from arkrpc.adapters.rpc_client import RpcClient
from arkrpc.cli import doctor
from arkrpc.cli.ui_components import build_catalog_table, build_error_panel
from arkrpc.core.config import AppSettings, ErrorPolicy
from arkrpc.core.observability import setup_logging
from arkrpc.core.registry import OPERATIONS, UnknownOperationError, get_operation

app = typer.Typer(no_args_is_help=True, help="Typed JSON-over-HTTP RPC client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def _main() -> None:
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)


@app.command()
def catalog() -> None:
    """List every operation with its path and request/response fields."""

    _console.print(build_catalog_table(OPERATIONS))


@app.command()
def call(
    name: str = typer.Argument(..., help="Operation name, e.g. `eins`."),
    arg_json: str = typer.Option("{}", "--arg-json", "-a", help="Arguments as a JSON object."),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-b", help="Overrides ARKRPC_BASE_URL."),
    validate: Optional[bool] = typer.Option(
        None,
        "--validate/--no-validate",
        help="Validate the response body against its schema.",
    ),
    status_line_errors: bool = typer.Option(
        False,
        "--status-line-errors",
        help="Report non-2xx responses as 'Fetch error: <status> <reason>'.",
    ),
) -> None:
    """Invoke one operation and print the result as JSON."""

    settings = AppSettings()
    updates: dict[str, object] = {}
    if validate is not None:
        updates["validate_responses"] = validate
    if status_line_errors:
        updates["error_policy"] = ErrorPolicy.STATUS_LINE
    if updates:
        settings = settings.model_copy(update=updates)

    target = base_url or settings.base_url
    if not target:
        raise typer.BadParameter("no base URL configured", param_hint="--base-url")

    try:
        operation = get_operation(name)
    except UnknownOperationError as exc:
        _console.print(build_error_panel(str(exc), title="Unknown operation"))
        raise typer.Exit(code=2)

    try:
        args = operation.request_model.model_validate(json.loads(arg_json))
    except json.JSONDecodeError as exc:
        _console.print(build_error_panel(f"--arg-json is not valid JSON: {exc}", title="Invalid arguments"))
        raise typer.Exit(code=2)
    except ValidationError as exc:
        _console.print(build_error_panel(str(exc), title="Invalid arguments"))
        raise typer.Exit(code=2)

    client = RpcClient(target, settings=settings)
    result = asyncio.run(client.call(operation.name, args))

    if result.error is not None:
        _console.print(build_error_panel(result.error))
        raise typer.Exit(code=1)

    value = result.value
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True)
    _console.print_json(data=value)


@app.command()
def schema(
    output: Path = typer.Option(Path("rpc_catalog.json"), "--output", "-o", help="Target JSON file."),
) -> None:
    """Export every DTO and operation schema as one JSON document."""

    path = export_catalog_json(output_path=output)
    _console.print(f"[green]Catalog written to:[/green] {path}")


def run() -> None:
    app()
