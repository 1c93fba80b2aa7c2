"""Resultado uniforme de una llamada RPC.

Toda operación devuelve un `RpcResult`: o bien `value` (éxito) o bien
`error` (fallo), nunca ambos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

ResponseT = TypeVar("ResponseT")

UNKNOWN_ERROR = "Unknown error"


class RpcCallError(Exception):
    """Raised by `RpcResult.unwrap()` when the call failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class RpcResult(Generic[ResponseT]):
    value: ResponseT | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("RpcResult cannot carry both a value and an error")

    @classmethod
    def success(cls, value: ResponseT) -> RpcResult[ResponseT]:
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, message: str | None) -> RpcResult[ResponseT]:
        return cls(value=None, error=UNKNOWN_ERROR if message is None else message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ResponseT | None:
        """Devuelve `value` o lanza `RpcCallError` con el mensaje de error."""

        if self.error is not None:
            raise RpcCallError(self.error)
        return self.value

    def as_dict(self) -> dict[str, object]:
        return {"value": self.value, "error": self.error}
