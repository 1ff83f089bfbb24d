"""
rpcstub — callable bindings over an RPC endpoint.
defrpc(...) builds a caller; checked callers validate method names against system.listMethods.
"""
from rpcstub.core import TransportConfig, get_logging_config
from rpcstub.rpc import (
    Call,
    CheckedCaller,
    ConfigurationError,
    EndpointDescriptor,
    Introspect,
    IntrospectKind,
    JsonRpcTransport,
    RpcError,
    RpcTransport,
    TransportError,
    UnsupportedMethodError,
    XmlRpcTransport,
    defrpc,
)

__all__ = [
    "Call",
    "CheckedCaller",
    "ConfigurationError",
    "EndpointDescriptor",
    "Introspect",
    "IntrospectKind",
    "JsonRpcTransport",
    "RpcError",
    "RpcTransport",
    "TransportConfig",
    "TransportError",
    "UnsupportedMethodError",
    "XmlRpcTransport",
    "defrpc",
    "get_logging_config",
]
