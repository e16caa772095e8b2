"""Utility functions for wordgoal.

This module provides:

- Logging setup and configuration
- Session statistics for window geometry tracking
"""

from wordgoal.utils.logging import GeometryStats, configure_logging

__all__ = [
    "GeometryStats",
    "configure_logging",
]
