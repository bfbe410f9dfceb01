"""
Runtime Configuration Module

Provides configuration loading and management for the service and CLI.
"""

from .runtime import (
    APIConfig,
    RuntimeConfig,
    ServerConfig,
    get_default_config,
    load_runtime_config,
    set_default_config,
)

__all__ = [
    "APIConfig",
    "RuntimeConfig",
    "ServerConfig",
    "get_default_config",
    "load_runtime_config",
    "set_default_config",
]
