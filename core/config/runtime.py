"""
Runtime Configuration

Central configuration for the HTTP service and the CLI.

Precedence (lowest to highest):
    defaults < config file (JSON or YAML) < environment variables
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


ENV_PREFIX = "FORGE_"

CONFIG_SEARCH_PATHS = (
    Path("forge.json"),
    Path(".forge.json"),
    Path.home() / ".config" / "forge" / "config.json",
)


@dataclass
class ServerConfig:
    """Configuration for the uvicorn server."""
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False


@dataclass
class APIConfig:
    """Configuration for the FastAPI application."""
    title: str = "Instruction Forge API"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON or YAML file
    - Programmatic construction
    """
    server: ServerConfig = field(default_factory=ServerConfig)
    api: APIConfig = field(default_factory=APIConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - FORGE_HOST: Bind address
        - FORGE_PORT: Bind port
        - FORGE_RELOAD: Enable uvicorn auto-reload (true/false)
        - FORGE_LOG_LEVEL: Log level name
        - FORGE_CORS_ORIGINS: Comma-separated allowed origins
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides.setdefault("server", {})["host"] = os.getenv(f"{ENV_PREFIX}HOST")
        if os.getenv(f"{ENV_PREFIX}PORT"):
            overrides.setdefault("server", {})["port"] = int(os.getenv(f"{ENV_PREFIX}PORT", "8080"))
        if os.getenv(f"{ENV_PREFIX}RELOAD"):
            overrides.setdefault("server", {})["reload"] = (
                os.getenv(f"{ENV_PREFIX}RELOAD", "false").lower() == "true"
            )

        if os.getenv(f"{ENV_PREFIX}CORS_ORIGINS"):
            origins = os.getenv(f"{ENV_PREFIX}CORS_ORIGINS", "")
            overrides.setdefault("api", {})["cors_origins"] = [
                o.strip() for o in origins.split(",") if o.strip()
            ]

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_json(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON or YAML file, chosen by extension."""
        path = Path(path)
        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        return cls.from_json(path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        server_data = data.get("server", {})
        api_data = data.get("api", {})

        server = ServerConfig(**server_data) if server_data else ServerConfig()
        api = APIConfig(**api_data) if api_data else APIConfig()

        return cls(
            server=server,
            api=api,
            log_level=data.get("log_level", "INFO"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("server", {}).items():
            setattr(new_config.server, key, value)

        for key, value in overrides.get("api", {}).items():
            setattr(new_config.api, key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]

        return new_config

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, INFO when the name is unknown."""
        level = logging.getLevelName(str(self.log_level).upper())
        if isinstance(level, int) and level > logging.NOTSET:
            return level
        return logging.INFO

    @property
    def log_level_name(self) -> str:
        """Lower-case canonical level name, as uvicorn expects it."""
        return logging.getLevelName(self.log_level_value).lower()

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "server": {
                "host": self.server.host,
                "port": self.server.port,
                "reload": self.server.reload,
            },
            "api": {
                "title": self.api.title,
                "cors_origins": list(self.api.cors_origins),
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }


def load_runtime_config(path: str | Path | None = None) -> RuntimeConfig:
    """
    Load RuntimeConfig from a config file, then overlay environment variables.

    When path is None the search order is:
      1. ./forge.json
      2. ./.forge.json
      3. ~/.config/forge/config.json

    FORGE_CONFIG, when set, names the file to load instead of searching.

    Environment variables ALWAYS override config file values.
    """
    if path is None and os.getenv(f"{ENV_PREFIX}CONFIG"):
        path = os.getenv(f"{ENV_PREFIX}CONFIG")

    if path is not None:
        return RuntimeConfig.from_file(path).with_env_overrides()

    config: RuntimeConfig | None = None
    for candidate in CONFIG_SEARCH_PATHS:
        if candidate.exists():
            try:
                config = RuntimeConfig.from_file(candidate)
                logger.info(f"Loaded config from {candidate}")
                break
            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to parse {candidate}: {e}")

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = load_runtime_config()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
