from rpcstub.core.config import TransportConfig
from rpcstub.core.logging_config import get_logging_config

__all__ = [
    "TransportConfig",
    "get_logging_config",
]
