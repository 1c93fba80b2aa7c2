"""Exportación JSON del catálogo RPC.

Por qué JSON Schema:
- Otros lenguajes/clientes pueden generar sus tipos a partir del mismo
  catálogo que usa este cliente.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel

from arkrpc.core.registry import DTOS, OPERATIONS, Operation


def build_catalog_document(
    operations: Iterable[Operation] = OPERATIONS,
    dtos: Iterable[type[BaseModel]] = DTOS,
) -> dict[str, Any]:
    return {
        "dtos": {dto.__name__: dto.model_json_schema(by_alias=True) for dto in dtos},
        "operations": {op.name: op.describe() for op in operations},
    }


def export_catalog_json(*, output_path: Path) -> Path:
    """Exporta el catálogo a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = build_catalog_document()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
