"""arkrpc: schemas tipados y cliente async para el catálogo RPC sobre HTTP + JSON."""

from arkrpc.adapters.rpc_client import ClientOptions, RpcClient
from arkrpc.core.config import AppSettings, ErrorPolicy
from arkrpc.core.domain.result import RpcCallError, RpcResult
from arkrpc.core.registry import OPERATIONS, Operation, UnknownOperationError, get_operation

__all__ = [
    "AppSettings",
    "ClientOptions",
    "ErrorPolicy",
    "OPERATIONS",
    "Operation",
    "RpcCallError",
    "RpcClient",
    "RpcResult",
    "UnknownOperationError",
    "get_operation",
]
