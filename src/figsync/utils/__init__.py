"""Utility functions for figsync.

This module provides:

- Logging setup and configuration
- Export statistics tracking
"""

from figsync.utils.logging import (
    ExportLogger,
    ExportStats,
    configure_logging,
)

__all__ = [
    "ExportLogger",
    "ExportStats",
    "configure_logging",
]
