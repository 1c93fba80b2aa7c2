"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from arkrpc.core.registry import Operation


def describe_fields(model: type[BaseModel]) -> str:
    """Lista los campos con su nombre de wire; `?` marca los opcionales."""

    parts: list[str] = []
    for name, info in model.model_fields.items():
        wire_name = info.alias or name
        parts.append(wire_name if info.is_required() else f"{wire_name}?")
    return ", ".join(parts) or "-"


def build_catalog_table(operations: Iterable[Operation]) -> Table:
    table = Table(title="RPC Operations")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Path", style="magenta", no_wrap=True)
    table.add_column("Request", style="white")
    table.add_column("Response", style="green")
    for op in operations:
        table.add_row(
            op.name,
            op.path,
            describe_fields(op.request_model),
            describe_fields(op.response_model),
        )
    return table


def build_error_panel(message: str, *, title: str = "RPC error") -> Panel:
    return Panel(Text(message), title=Text(title, style="bold red"), border_style="red")
