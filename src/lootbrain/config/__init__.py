"""Configuration module using Pydantic Settings.

Usage:
    from lootbrain.config import LootingSettings, configure_logging

    settings = LootingSettings(detect_item_distance=30.0)
    configure_logging()
"""

from lootbrain.config.logging_config import configure_logging
from lootbrain.config.settings import ALL_ROLES, LootingSettings

__all__ = [
    "LootingSettings",
    "ALL_ROLES",
    "configure_logging",
]
