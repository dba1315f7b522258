"""Screen-specific constants."""
