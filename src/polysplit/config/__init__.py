"""Configuration management for polysplit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SplitterConfig: Edge-pair evaluation settings
- LoggingConfig: Logging settings
- PolysplitSettings: Main application settings
"""

from polysplit.config.settings import (
    LoggingConfig,
    PolysplitSettings,
    SplitterConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PolysplitSettings",
    "SplitterConfig",
    "get_default_settings",
]
