"""Configuration: settings, protocol defaults and logging setup."""

from light_wallet.config.settings import AppConfig, ChainConfig, LoggingConfig, Network

__all__ = ["AppConfig", "ChainConfig", "LoggingConfig", "Network"]
