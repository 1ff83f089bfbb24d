from rpcstub.rpc.caller import Call, CheckedCaller, Introspect, IntrospectKind, defrpc
from rpcstub.rpc.endpoint import EndpointDescriptor
from rpcstub.rpc.protocol import (
    ConfigurationError,
    RpcError,
    RpcTransport,
    TransportError,
    UnsupportedMethodError,
)
from rpcstub.rpc.transports import JsonRpcTransport, XmlRpcTransport

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
    "TransportError",
    "UnsupportedMethodError",
    "XmlRpcTransport",
    "defrpc",
]
