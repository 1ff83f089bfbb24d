"""
Bundled transports: XML-RPC and JSON-RPC over HTTP via httpx.
Marshalling is done by xmlrpc.client and json; these classes only glue them to HTTP
and map failures onto TransportError.
"""
from __future__ import annotations

import itertools
import json
import logging
import xmlrpc.client
from typing import Any
from xml.parsers.expat import ExpatError

import httpx

from rpcstub.core.config import TransportConfig
from rpcstub.rpc.protocol import TransportError

logger = logging.getLogger("rpcstub.transports")


class _HttpTransport:
    """POST a body to the address; one httpx.Client per call."""

    content_type = "application/octet-stream"

    def __init__(
        self,
        config: TransportConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._http_transport = http_transport

    @property
    def config(self) -> TransportConfig:
        return self._config

    def _post(self, address: str, content: bytes) -> bytes:
        headers = {"Content-Type": self.content_type, **self._config.headers}
        logger.debug(f"POST {address} ({len(content)} bytes)")
        try:
            with httpx.Client(
                timeout=self._config.timeout,
                verify=self._config.verify,
                transport=self._http_transport,
            ) as client:
                response = client.post(address, content=content, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                "HTTP_ERROR",
                f"{address} answered {e.response.status_code} {e.response.reason_phrase}",
            ) from e
        except httpx.HTTPError as e:
            raise TransportError("HTTP_ERROR", f"{address}: {e}") from e
        return response.content


class XmlRpcTransport(_HttpTransport):
    """XML-RPC over HTTP. Faults become TransportError("FAULT") with the fault code kept."""

    content_type = "text/xml"

    def call(self, address: str, method: str, *params: Any) -> Any:
        encoding = self._config.encoding
        try:
            body = xmlrpc.client.dumps(
                params,
                methodname=method,
                encoding=encoding,
                allow_none=self._config.allow_none,
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise TransportError("INVALID_REQUEST", f"cannot marshal params for {method!r}: {e}") from e

        content = self._post(address, body.encode(encoding))
        try:
            result, _ = xmlrpc.client.loads(content, use_builtin_types=True)
        except xmlrpc.client.Fault as e:
            raise TransportError("FAULT", e.faultString, fault_code=e.faultCode) from e
        except (ExpatError, xmlrpc.client.ResponseError, ValueError) as e:
            raise TransportError("INVALID_RESPONSE", f"malformed XML-RPC reply from {address}: {e}") from e
        if len(result) != 1:
            raise TransportError("INVALID_RESPONSE", f"expected one value from {method!r}, got {len(result)}")
        return result[0]


# JSON-RPC error envelope: {"error": {"code": ..., "message": "..."}} or {"error": "string"}
def _raise_for_error(data: dict) -> None:
    err = data.get("error")
    if err is None:
        return
    if isinstance(err, dict):
        fault_code = err.get("code")
        code = str(fault_code) if fault_code is not None else "UNKNOWN"
        msg = err.get("message", str(err))
    else:
        fault_code = None
        code = "UNKNOWN"
        msg = str(err)
    raise TransportError(code, msg, fault_code=fault_code)


class JsonRpcTransport(_HttpTransport):
    """JSON-RPC 2.0 over HTTP with positional params."""

    content_type = "application/json"

    def __init__(
        self,
        config: TransportConfig | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config, http_transport)
        self._ids = itertools.count(1)

    def call(self, address: str, method: str, *params: Any) -> Any:
        encoding = self._config.encoding
        request_id = next(self._ids)
        request = {"jsonrpc": "2.0", "method": method, "params": list(params), "id": request_id}
        try:
            body = json.dumps(request).encode(encoding)
        except (TypeError, ValueError, OverflowError) as e:
            raise TransportError("INVALID_REQUEST", f"cannot serialize params for {method!r}: {e}") from e

        content = self._post(address, body)
        try:
            data = json.loads(content.decode(encoding)) if content else None
        except ValueError as e:
            raise TransportError("INVALID_RESPONSE", f"malformed JSON-RPC reply from {address}: {e}") from e
        if not isinstance(data, dict):
            raise TransportError("INVALID_RESPONSE", f"expected a JSON object from {address}")
        # error replies may carry a null id
        if data.get("id") is not None and data["id"] != request_id:
            raise TransportError("INVALID_RESPONSE", f"reply id {data['id']!r} does not match request id {request_id}")
        _raise_for_error(data)
        if "result" not in data:
            raise TransportError("INVALID_RESPONSE", f"reply from {address} has neither result nor error")
        return data["result"]
