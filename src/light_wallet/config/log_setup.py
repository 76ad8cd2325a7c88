"""Logging setup driven by ``AppConfig.logging``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from light_wallet.config.settings import AppConfig


def configure_logging(config: AppConfig) -> None:
    """Configure the root logger from application settings.

    ``debug=True`` forces DEBUG regardless of the configured level.
    """
    level = logging.DEBUG if config.debug else getattr(logging, config.logging.level.value)
    logging.basicConfig(level=level, format=config.logging.format, force=True)
    logging.getLogger("light_wallet").debug(
        "Logging configured (level=%s, network=%s)",
        logging.getLevelName(level),
        config.network,
    )
