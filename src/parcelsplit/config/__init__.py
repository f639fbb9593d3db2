"""Configuration management for parcelsplit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SplitConfig: Total area, split direction and unit label
- LoggingConfig: Logging settings
- ParcelSplitSettings: Main application settings
"""

from parcelsplit.config.settings import (
    LoggingConfig,
    ParcelSplitSettings,
    SplitConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ParcelSplitSettings",
    "SplitConfig",
    "get_default_settings",
]
