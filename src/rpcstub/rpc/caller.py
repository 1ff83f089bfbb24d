"""
CheckedCaller — a plain callable bound to one endpoint.
Requests are Call (remote method) or Introspect (query the caller); checked callers
reject methods the endpoint does not list before anything reaches the transport.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Union

from rpcstub.rpc.endpoint import EndpointDescriptor
from rpcstub.rpc.protocol import ConfigurationError, RpcTransport, UnsupportedMethodError

logger = logging.getLogger("rpcstub.caller")


class IntrospectKind(enum.Enum):
    ENDPOINT = "endpoint"
    CHECKED = "checked"


@dataclass(frozen=True)
class Call:
    """Remote call: method name + positional args."""
    method: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Introspect:
    """Local query about the caller; never reaches the transport."""
    kind: IntrospectKind


Request = Union[Call, Introspect]


class CheckedCaller:
    """
    Callable over an EndpointDescriptor: caller("method", *args).
    With checked=True every method is looked up in the endpoint's method table first.
    """

    def __init__(self, endpoint: EndpointDescriptor, checked: bool = False, name: str | None = None) -> None:
        if not isinstance(endpoint, EndpointDescriptor):
            raise ConfigurationError(f"endpoint must be an EndpointDescriptor, got {type(endpoint).__name__}")
        if not isinstance(checked, bool):
            raise ConfigurationError(f"checked must be a bool, got {checked!r}")
        self._endpoint = endpoint
        self._checked = checked
        self.__name__ = name or "rpc"
        self.__doc__ = endpoint.documentation

    def dispatch(self, request: Request) -> Any:
        if isinstance(request, Introspect):
            return self._introspect(request.kind)
        if isinstance(request, Call):
            return self._call(request.method, request.args)
        raise TypeError(f"expected Call or Introspect, got {type(request).__name__}")

    def __call__(self, method: str, *args: Any) -> Any:
        return self.dispatch(Call(method, args))

    @property
    def endpoint(self) -> EndpointDescriptor:
        return self.dispatch(Introspect(IntrospectKind.ENDPOINT))

    @property
    def checked(self) -> bool:
        return self.dispatch(Introspect(IntrospectKind.CHECKED))

    def _introspect(self, kind: IntrospectKind) -> Any:
        if kind is IntrospectKind.ENDPOINT:
            return self._endpoint
        if kind is IntrospectKind.CHECKED:
            return self._checked
        raise TypeError(f"unknown introspection kind {kind!r}")

    def _call(self, method: str, args: tuple[Any, ...]) -> Any:
        endpoint = self._endpoint
        if self._checked and not endpoint.supports_method(method):
            logger.warning(f"{self.__name__}: rejected {method!r}, not listed by {endpoint.address}")
            raise UnsupportedMethodError(method, endpoint.address)
        logger.debug(f"{self.__name__}: {method}{args!r} -> {endpoint.address}")
        return endpoint.transport.call(endpoint.address, method, *args)

    def __repr__(self) -> str:
        mode = "checked" if self._checked else "unchecked"
        return f"<CheckedCaller {self.__name__} {mode} {self._endpoint.address!r}>"


def defrpc(
    name: str | None = None,
    endpoint: EndpointDescriptor | None = None,
    *,
    address: str | None = None,
    documentation: str | None = None,
    checked: bool = False,
    transport: RpcTransport | None = None,
) -> CheckedCaller:
    """
    Build a caller from an existing descriptor or from descriptor params (address, documentation, transport).

        wiki = defrpc("wiki", address="http://wiki.local/rpc", checked=True)
        wiki("wiki.getPage", "Home")
    """
    if endpoint is not None:
        if address is not None or documentation is not None or transport is not None:
            raise ConfigurationError("pass either endpoint or address/documentation/transport, not both")
    elif address is None:
        raise ConfigurationError("either endpoint or address is required")
    else:
        endpoint = EndpointDescriptor(address, documentation=documentation, transport=transport)
    return CheckedCaller(endpoint, checked=checked, name=name)
