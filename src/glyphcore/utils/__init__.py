"""Utility functions for glyphcore.

This module provides logging setup and load statistics tracking.
"""

from glyphcore.utils.logging import (
    LoadLogger,
    LoadStats,
    configure_logging,
)

__all__ = [
    "LoadLogger",
    "LoadStats",
    "configure_logging",
]
