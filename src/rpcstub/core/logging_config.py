"""
Logging configuration for applications using rpcstub.
The library only creates loggers; handlers are the application's choice.
"""

from typing import Any, Dict


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get a dictConfig-compatible configuration for the rpcstub loggers."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr"
            }
        },
        "loggers": {
            "rpcstub": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            # httpx logs every request at INFO
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        }
    }
