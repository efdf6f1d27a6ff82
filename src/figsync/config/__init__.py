"""Configuration management for figsync.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HostConfig: Document source settings (snapshot or REST)
- OutputConfig: Export writing settings
- LoggingConfig: Logging settings
- FigsyncSettings: Main application settings
"""

from figsync.config.settings import (
    FigsyncSettings,
    HostConfig,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "FigsyncSettings",
    "HostConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
