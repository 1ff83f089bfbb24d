"""
EndpointDescriptor — one remote service: address, docs, transport, capability cache.
The cache is filled lazily from system.listMethods and replaced only on explicit refresh.
"""
from __future__ import annotations

import logging
import threading
from typing import Any

from rpcstub.rpc.protocol import ConfigurationError, RpcTransport, TransportError
from rpcstub.rpc.transports import XmlRpcTransport

logger = logging.getLogger("rpcstub.endpoint")

LIST_METHODS = "system.listMethods"
METHOD_HELP = "system.methodHelp"
METHOD_SIGNATURE = "system.methodSignature"


class EndpointDescriptor:
    """
    Describes a remote endpoint. Address, documentation and transport are fixed at construction;
    the capability cache is None until the first discovery, then a frozenset of method names.
    """

    def __init__(
        self,
        address: str,
        documentation: str | None = None,
        transport: RpcTransport | None = None,
    ) -> None:
        if not isinstance(address, str) or not address.strip():
            raise ConfigurationError(f"address must be a non-empty string, got {address!r}")
        if transport is None:
            transport = XmlRpcTransport()
        elif not isinstance(transport, RpcTransport):
            raise ConfigurationError(
                f"transport must implement call(address, method, *params), got {type(transport).__name__}"
            )
        self._address = address
        self._documentation = documentation
        self._transport = transport
        self._methods: frozenset[str] | None = None
        self._lock = threading.Lock()

    @property
    def address(self) -> str:
        return self._address

    @property
    def documentation(self) -> str | None:
        return self._documentation

    @property
    def transport(self) -> RpcTransport:
        return self._transport

    @property
    def is_populated(self) -> bool:
        """True once a discovery result has been cached (even an empty one)."""
        return self._methods is not None

    def discover_methods(self) -> frozenset[str]:
        """Ask the endpoint for its method list. Does not touch the cache."""
        reply = self._transport.call(self._address, LIST_METHODS)
        if not isinstance(reply, (list, tuple)) or not all(isinstance(m, str) for m in reply):
            raise TransportError(
                "INVALID_RESPONSE",
                f"{LIST_METHODS} on {self._address} returned {type(reply).__name__}, expected a list of names",
            )
        return frozenset(reply)

    def method_table(self, refresh: bool = False) -> frozenset[str]:
        """Cached method names; discover (and fully replace the cache) when empty or refresh=True."""
        with self._lock:
            if self._methods is None or refresh:
                methods = self.discover_methods()
                self._methods = methods
                logger.info(f"Discovered {len(methods)} methods on {self._address}")
            return self._methods

    def refresh(self) -> frozenset[str]:
        return self.method_table(refresh=True)

    def supports_method(self, method: str) -> bool:
        return method in self.method_table()

    def method_help(self, method: str) -> str:
        """system.methodHelp for one method. Not cached, not checked."""
        return self._transport.call(self._address, METHOD_HELP, method)

    def method_signature(self, method: str) -> Any:
        """system.methodSignature for one method (list of [return, *params] type lists, or a string)."""
        return self._transport.call(self._address, METHOD_SIGNATURE, method)

    def __repr__(self) -> str:
        state = "unpopulated" if self._methods is None else f"{len(self._methods)} methods"
        return f"EndpointDescriptor({self._address!r}, {state})"
