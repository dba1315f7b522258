"""All enum definitions for the TUI."""

from enum import Enum

# =============================================================================
# UI Enums
# =============================================================================


class ThemeMode(str, Enum):
    """Theme choices exposed in settings and on the command line."""

    DARK = "dark"
    LIGHT = "light"

    @property
    def textual_theme(self) -> str:
        """Name of the built-in Textual theme backing this mode."""
        return f"textual-{self.value}"


# =============================================================================
# Save Enums
# =============================================================================


class SaveResultKind(str, Enum):
    """Outcome kind of a completed policy save."""

    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "SaveResultKind",
    "ThemeMode",
]
