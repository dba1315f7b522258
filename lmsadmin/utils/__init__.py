"""Utility functions for LMS Admin TUI."""

from lmsadmin.utils.logging_setup import configure_logging
from lmsadmin.utils.ranges import format_count, snap_to_step

__all__ = [
    # Logging
    "configure_logging",
    # Ranges
    "format_count",
    "snap_to_step",
]
