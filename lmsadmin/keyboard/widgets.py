"""Widget-level keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Slider bindings
# ============================================================================

SLIDER_BINDINGS: list[Binding] = [
    Binding("right", "increment", "Increase", show=False),
    Binding("left", "decrement", "Decrease", show=False),
    Binding("up", "increment", "Increase", show=False),
    Binding("down", "decrement", "Decrease", show=False),
    Binding("pageup", "increment_page", "Increase more", show=False),
    Binding("pagedown", "decrement_page", "Decrease more", show=False),
    Binding("home", "to_minimum", "Minimum", show=False),
    Binding("end", "to_maximum", "Maximum", show=False),
]

__all__ = [
    "SLIDER_BINDINGS",
]
