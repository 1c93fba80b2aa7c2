"""Adaptadores de I/O: transporte HTTP y exportación del catálogo."""

from arkrpc.adapters.rpc_client import ClientOptions, RpcClient

__all__ = [
    "ClientOptions",
    "RpcClient",
]
