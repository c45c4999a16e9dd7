"""Utility functions for polysplit.

This module provides utility functions including:

- Logging setup and configuration
- Split progress and statistics tracking
"""

from polysplit.utils.logging import (
    SplitLogger,
    SplitStats,
    configure_logging,
)

__all__ = [
    "SplitLogger",
    "SplitStats",
    "configure_logging",
]
