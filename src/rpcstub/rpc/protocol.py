"""RPC protocols and errors: call by address and method; wire format belongs to the transport."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class RpcError(Exception):
    """Base error: code + human-readable message."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class TransportError(RpcError):
    """Transport failed: network, protocol or remote-side fault. Never intercepted by callers."""

    def __init__(self, code: str, message: str, fault_code: Any = None) -> None:
        self.fault_code = fault_code
        super().__init__(code, message)


class UnsupportedMethodError(RpcError):
    """Checked call rejected locally: the endpoint does not report this method."""

    def __init__(self, method: str, address: str | None = None) -> None:
        self.method = method
        self.address = address
        where = f" by {address}" if address else ""
        super().__init__("UNSUPPORTED_METHOD", f"method {method!r} is not supported{where}")


class ConfigurationError(RpcError):
    """Invalid arguments when building a descriptor or caller."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION", message)


@runtime_checkable
class RpcTransport(Protocol):
    """RPC transport: send one call, get the decoded result. User implements or uses a bundled one."""

    def call(self, address: str, method: str, *params: Any) -> Any:
        ...
