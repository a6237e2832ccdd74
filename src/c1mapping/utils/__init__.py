"""Utility functions for c1mapping.

This module provides logging setup and processing statistics.
"""

from c1mapping.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
