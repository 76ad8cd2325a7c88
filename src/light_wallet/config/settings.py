"""Application settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``LIGHTWALLET_``, nested via ``__``)
2. YAML config file (``config_path`` or ``LIGHTWALLET_CONFIG_PATH`` env var)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from light_wallet.config.defaults import DEFAULT_FEE_ZATOSHI, DEFAULT_STALE_TOLERANCE

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class Network(enum.StrEnum):
    """Supported Zcash networks."""

    MAINNET = "mainnet"
    TESTNET = "testnet"


class LogLevel(enum.StrEnum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class ChainConfig(BaseSettings):
    """Chain policy used when classifying pending transactions."""

    model_config = SettingsConfigDict(
        env_prefix="LIGHTWALLET_CHAIN__",
        case_sensitive=False,
    )

    stale_tolerance: int = Field(
        default=DEFAULT_STALE_TOLERANCE,
        ge=1,
        description="Confirmation depth in blocks",
    )
    default_fee: int = Field(
        default=DEFAULT_FEE_ZATOSHI,
        ge=0,
        description="Fee in zatoshi handed to overview conversion",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="LIGHTWALLET_LOGGING__",
        case_sensitive=False,
    )

    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Loads settings from environment variables (``LIGHTWALLET_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIGHTWALLET_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False
    version: str = "0.1.0"
    config_path: str = ""
    network: Network = Network.MAINNET

    chain: ChainConfig = Field(default_factory=ChainConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                merged = {**val, **values[key]}
                values[key] = merged
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
