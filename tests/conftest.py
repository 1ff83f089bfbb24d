"""
Shared pytest fixtures: a recording stub transport for endpoint and caller tests.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from rpcstub import EndpointDescriptor
from rpcstub.rpc.endpoint import LIST_METHODS


class StubTransport:
    """In-memory RpcTransport: canned method list, records every call."""

    def __init__(self, methods=("foo", "bar"), results: Optional[Dict[str, Any]] = None):
        self.methods = list(methods)
        self.results = results or {}
        self.calls: List[Tuple[Any, ...]] = []
        self.discovery_calls = 0
        self.fail_with: Optional[Exception] = None

    def call(self, address: str, method: str, *params: Any) -> Any:
        if method == LIST_METHODS:
            self.discovery_calls += 1
            return list(self.methods)
        self.calls.append((address, method, *params))
        if self.fail_with is not None:
            raise self.fail_with
        if method in self.results:
            return self.results[method]
        return {"address": address, "method": method, "params": list(params)}


@pytest.fixture
def stub():
    return StubTransport()


@pytest.fixture
def endpoint(stub):
    return EndpointDescriptor("http://h:1/p", documentation="Test service", transport=stub)
