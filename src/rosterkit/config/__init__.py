"""Configuration helpers for runtime settings and the order catalog."""

from .catalog import ItemConfig, get_item, is_package, iter_items
from .settings import ConfiguredLocator, PlatformLocator, RosterSettings, load_settings

__all__ = [
    "ConfiguredLocator",
    "ItemConfig",
    "PlatformLocator",
    "RosterSettings",
    "get_item",
    "is_package",
    "iter_items",
    "load_settings",
]
