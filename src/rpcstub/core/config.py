"""Transport settings: one object, created by the user and passed to a transport."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class TransportConfig:
    """
    Settings shared by the bundled HTTP transports.
    allow_none enables the XML-RPC <nil/> extension; ignored by JSON-RPC.
    """

    timeout: float = 30.0
    headers: dict[str, str] = field(default_factory=dict)
    verify: bool = True
    allow_none: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], **defaults: Any) -> TransportConfig:
        """Build from a plain dict (e.g. parsed app settings). Unknown keys are ignored."""
        names = {f.name for f in dataclasses.fields(cls)}
        values = {key: value for key, value in defaults.items() if key in names}
        for key, value in mapping.items():
            if key in names:
                values[key] = value
        if "timeout" in values:
            values["timeout"] = float(values["timeout"])
        if "headers" in values:
            values["headers"] = dict(values["headers"])
        return cls(**values)
