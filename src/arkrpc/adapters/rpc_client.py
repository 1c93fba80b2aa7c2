"""Cliente RPC sobre HTTP + JSON.

Responsabilidad:
- Exponer un método async por operación del catálogo.
- Hacer un único POST por llamada y normalizar el resultado en `RpcResult`.
- Nunca propagar errores de red/parsing al caller: todo termina en `error`.

Sin reintentos, sin pool compartido y sin autenticación.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, TypeVar, cast
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel

from arkrpc.adapters.http_client import JSON_CONTENT_TYPE, build_async_client
from arkrpc.core.config import AppSettings, ErrorPolicy
from arkrpc.core.domain.result import UNKNOWN_ERROR, RpcResult
from arkrpc.core.domain.schemas import (
    A_NAME_PATH,
    EINS_PATH,
    LISTEN_PATH,
    ZWEI_PATH,
    ANameRequest,
    ANameResponse,
    EinsRequest,
    EinsResponse,
    ListenRequest,
    ListenResponse,
    ZweiRequest,
    ZweiResponse,
)
from arkrpc.core.interfaces.transport import ErrorHook, OverrideCall
from arkrpc.core.registry import get_operation

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class ClientOptions:
    """Puntos de extensión opcionales del cliente.

    - `override_call`: reemplaza el transporte; sus excepciones se propagan.
    - `handle_error`: observa respuestas no-2xx; si lanza, se registra y se ignora.
    """

    override_call: OverrideCall | None = None
    handle_error: ErrorHook | None = None


def serialize_args(args: Any) -> str:
    """Texto JSON del body. Los modelos viajan con alias y sin campos ausentes."""

    if isinstance(args, BaseModel):
        payload: Any = args.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif isinstance(args, Mapping):
        payload = dict(args)
    else:
        payload = args
    return json.dumps(payload, allow_nan=False)


def _args_for_log(args: Any) -> str:
    try:
        return serialize_args(args)
    except (TypeError, ValueError):
        return repr(args)


def extract_error_message(response: httpx.Response, policy: ErrorPolicy) -> str:
    """Texto de error para una respuesta no-2xx según la política configurada."""

    if policy is ErrorPolicy.STATUS_LINE:
        return f"Fetch error: {response.status_code} {response.reason_phrase}"

    try:
        payload = response.json()
    except ValueError:
        return UNKNOWN_ERROR

    if isinstance(payload, dict):
        message = payload.get("message")
        if message is not None:
            return message if isinstance(message, str) else json.dumps(message)
    return UNKNOWN_ERROR


class RpcClient:
    """Cliente para el catálogo RPC.

    Se construye una vez por dirección base y se reutiliza. No guarda estado
    entre llamadas, así que varias corutinas pueden usar la misma instancia.
    """

    def __init__(
        self,
        base_url: str,
        options: ClientOptions | None = None,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url
        self._options = options or ClientOptions()
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def resolve(self, path: str) -> str:
        return urljoin(self._base_url, path)

    def _notify_error_hook(self, response: httpx.Response, path: str) -> None:
        hook = self._options.handle_error
        if hook is None:
            return
        try:
            hook(response)
        except Exception:
            # El hook solo observa: su fallo no cambia el resultado.
            logger.warning("handle_error hook failed for %s", path, exc_info=True, extra={"path": path})

    async def _call(
        self,
        path: str,
        args: Any,
        response_model: type[ResponseT],
    ) -> RpcResult[ResponseT]:
        override = self._options.override_call
        if override is not None:
            return await override(path, args)

        try:
            body = serialize_args(args)
            async with build_async_client(
                self._settings,
                extra_headers={"Content-Type": JSON_CONTENT_TYPE},
                transport=self._transport,
            ) as client:
                response = await client.post(self.resolve(path), content=body)

            if not response.is_success:
                logger.error(
                    "Fetch error: %s %s for %s",
                    response.status_code,
                    response.reason_phrase,
                    path,
                    extra={"path": path, "status_code": response.status_code},
                )
                self._notify_error_hook(response, path)
                return RpcResult.failure(extract_error_message(response, self._settings.error_policy))

            data = response.json()
            if self._settings.validate_responses:
                return RpcResult.success(response_model.model_validate(data))
            # Sin validación: el payload se entrega tal cual, tipado como la response.
            return RpcResult.success(cast(ResponseT, data))
        except Exception as exc:
            logger.error(
                "RPC call failed for %s",
                path,
                exc_info=True,
                extra={"path": path, "rpc_args": _args_for_log(args), "error": str(exc)},
            )
            return RpcResult.failure(str(exc) or UNKNOWN_ERROR)

    async def call(self, name: str, args: Any) -> RpcResult[Any]:
        """Invoca una operación por nombre (`a_name`, `eins`, ...).

        Lanza `UnknownOperationError` antes de cualquier I/O si el nombre no existe.
        """

        operation = get_operation(name)
        return await self._call(operation.path, args, operation.response_model)

    async def a_name(self, args: ANameRequest | Mapping[str, Any]) -> RpcResult[ANameResponse]:
        return await self._call(A_NAME_PATH, args, ANameResponse)

    async def eins(self, args: EinsRequest | Mapping[str, Any]) -> RpcResult[EinsResponse]:
        return await self._call(EINS_PATH, args, EinsResponse)

    async def listen(self, args: ListenRequest | Mapping[str, Any]) -> RpcResult[ListenResponse]:
        return await self._call(LISTEN_PATH, args, ListenResponse)

    async def zwei(self, args: ZweiRequest | Mapping[str, Any]) -> RpcResult[ZweiResponse]:
        return await self._call(ZWEI_PATH, args, ZweiResponse)
