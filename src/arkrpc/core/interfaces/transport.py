"""Contratos de los puntos de extensión del cliente RPC.

Por qué Protocol:
- El caller puede pasar cualquier callable compatible (función, lambda,
  AsyncMock) sin heredar de nada.
"""

from __future__ import annotations

from typing import Any, Awaitable, Protocol, runtime_checkable

import httpx

from arkrpc.core.domain.result import RpcResult


@runtime_checkable
class OverrideCall(Protocol):
    """Reemplaza por completo el paso de transporte.

    Recibe el path de la operación y los argumentos tal como los pasó el
    caller, y devuelve el `RpcResult` que verá el caller sin modificaciones.
    """

    def __call__(self, path: str, args: Any) -> Awaitable[RpcResult[Any]]:
        ...


@runtime_checkable
class ErrorHook(Protocol):
    """Observa la respuesta cruda de un status no-2xx. No altera el resultado."""

    def __call__(self, response: httpx.Response) -> None:
        ...
