"""Catálogo de operaciones RPC.

Arma la tabla de operaciones a partir de las declaraciones de
`core.domain.schemas`:
- `<NOMBRE>_PATH` (str) define el path de una operación.
- `<Nombre>Request` y `<Nombre>Response` son sus shapes; `<Nombre>` es el
  CamelCase de `<NOMBRE>` (`A_NAME` -> `AName`).
- Clases `*DTO` no son operaciones.
- Sin path o sin request, la declaración se ignora. Sin response se usa un
  shape vacío.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any, Mapping

from pydantic import BaseModel

from arkrpc.core.domain import schemas
from arkrpc.core.domain.schemas import RpcShape

_PATH_SUFFIX = "_PATH"


class UnknownOperationError(KeyError):
    """No existe una operación con ese nombre en el catálogo."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown operation {self.name!r}"


class EmptyResponse(RpcShape):
    pass


@dataclass(frozen=True)
class Operation:
    name: str
    path: str
    request_model: type[BaseModel]
    response_model: type[BaseModel]

    def describe(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "request": self.request_model.model_json_schema(by_alias=True),
            "response": self.response_model.model_json_schema(by_alias=True),
        }


def _camel_case(const_prefix: str) -> str:
    return "".join(part.capitalize() for part in const_prefix.split("_") if part)


def _is_model(obj: object) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseModel)


def collect_operations(namespace: ModuleType | Mapping[str, Any]) -> tuple[Operation, ...]:
    """Empareja paths y shapes declarados en `namespace`.

    Acepta un módulo o un mapping nombre -> objeto. El resultado va ordenado
    por nombre del modelo de request.
    """

    items = vars(namespace) if isinstance(namespace, ModuleType) else namespace

    operations: list[Operation] = []
    seen_paths: set[str] = set()
    for const_name, value in items.items():
        if not const_name.endswith(_PATH_SUFFIX) or not isinstance(value, str):
            continue
        prefix = const_name[: -len(_PATH_SUFFIX)]
        if not prefix:
            continue

        base = _camel_case(prefix)
        request_model = items.get(f"{base}Request")
        if not _is_model(request_model):
            continue
        response_model = items.get(f"{base}Response")
        if not _is_model(response_model):
            response_model = EmptyResponse

        if value in seen_paths:
            raise ValueError(f"duplicate RPC path {value!r} ({const_name})")
        seen_paths.add(value)

        operations.append(
            Operation(
                name=prefix.lower(),
                path=value,
                request_model=request_model,
                response_model=response_model,
            )
        )

    operations.sort(key=lambda op: op.request_model.__name__)
    return tuple(operations)


def collect_dtos(namespace: ModuleType | Mapping[str, Any]) -> tuple[type[BaseModel], ...]:
    items = vars(namespace) if isinstance(namespace, ModuleType) else namespace
    dtos = [obj for name, obj in items.items() if name.endswith("DTO") and _is_model(obj)]
    return tuple(sorted(dtos, key=lambda m: m.__name__))


OPERATIONS: tuple[Operation, ...] = collect_operations(schemas)
DTOS: tuple[type[BaseModel], ...] = collect_dtos(schemas)

_BY_NAME: dict[str, Operation] = {op.name: op for op in OPERATIONS}


def get_operation(name: str) -> Operation:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def validate_request(name: str, data: Any) -> BaseModel:
    """Valida `data` contra el shape de request. Lanza `pydantic.ValidationError`."""

    return get_operation(name).request_model.model_validate(data)


def validate_response(name: str, data: Any) -> BaseModel:
    """Valida `data` contra el shape de response. Lanza `pydantic.ValidationError`."""

    return get_operation(name).response_model.model_validate(data)
