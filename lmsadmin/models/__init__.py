"""Data models for LMS Admin TUI."""

from lmsadmin.models.policy import Policy

__all__ = ["Policy"]
