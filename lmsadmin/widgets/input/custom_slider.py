"""CustomSlider widget for the TUI application.

Standard Reactive Pattern:
- ``value`` is a reactive float, validated onto [minimum, maximum] and the
  step grid on every assignment
- Every change posts ``CustomSlider.Changed``
- Keyboard: left/right/up/down step, pageup/pagedown page, home/end bounds
- Mouse: clicking the track jumps to the nearest step

CSS Classes: widget-custom-slider
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.reactive import reactive

from lmsadmin.constants.limits import SLIDER_PAGE_STEP, SLIDER_STEP
from lmsadmin.keyboard.widgets import SLIDER_BINDINGS
from lmsadmin.utils.ranges import snap_to_step
from lmsadmin.widgets._base import AccessibleMixin, BaseWidget

_TRACK_FILLED = "━"
_TRACK_EMPTY = "─"
_KNOB = "●"


class CustomSlider(AccessibleMixin, BaseWidget, can_focus=True):
    """Horizontal slider over a bounded, stepped range.

    Example:
        >>> slider = CustomSlider(1, 15, value=5, id="max-books-slider")
        >>> yield slider
    """

    BINDINGS = SLIDER_BINDINGS
    DEFAULT_CSS = """
    CustomSlider {
        height: 1;
        width: 1fr;
        color: $text-muted;
    }

    CustomSlider:focus {
        color: $accent;
        text-style: bold;
    }

    CustomSlider:disabled {
        opacity: 0.5;
    }
    """
    _default_classes = "widget-custom-slider"

    value: reactive[float] = reactive(0.0, init=False)

    class Changed(Message):
        """Posted when the slider value changes."""

        def __init__(self, slider: CustomSlider, value: float) -> None:
            super().__init__()
            self.slider = slider
            self.value = value

        @property
        def control(self) -> CustomSlider:
            return self.slider

    def __init__(
        self,
        minimum: float,
        maximum: float,
        *,
        value: float | None = None,
        step: float = SLIDER_STEP,
        page_step: float = SLIDER_PAGE_STEP,
        id: str | None = None,
        classes: str = "",
        disabled: bool = False,
    ) -> None:
        """Initialize the slider.

        Args:
            minimum: Lowest selectable value.
            maximum: Highest selectable value.
            value: Initial value; defaults to ``minimum``.
            step: Increment for arrow keys and the snapping grid.
            page_step: Increment for page up/down.
            id: Widget ID.
            classes: Extra CSS classes.
            disabled: Start disabled.
        """
        if maximum < minimum:
            raise ValueError(f"maximum {maximum!r} is below minimum {minimum!r}")
        if step <= 0:
            raise ValueError(f"step must be positive, got {step!r}")
        super().__init__(id=id, classes=classes, disabled=disabled)
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.step = float(step)
        self.page_step = float(page_step)
        initial = self.minimum if value is None else value
        self.set_reactive(CustomSlider.value, self.validate_value(initial))
        self.set_accessibility_value(str(int(self.value)))

    def validate_value(self, value: float) -> float:
        return snap_to_step(value, self.minimum, self.maximum, self.step)

    def watch_value(self, value: float) -> None:
        self.set_accessibility_value(str(int(value)))
        self.post_message(self.Changed(self, value))

    def render(self) -> Text:
        width = max(self.content_size.width, 3)
        span = self.maximum - self.minimum
        ratio = 0.0 if span == 0 else (self.value - self.minimum) / span
        knob_at = round(ratio * (width - 1))
        return Text.assemble(
            (_TRACK_FILLED * knob_at, "bold"),
            (_KNOB, "bold"),
            (_TRACK_EMPTY * (width - knob_at - 1), "dim"),
        )

    def on_click(self, event: events.Click) -> None:
        width = self.content_size.width
        if width <= 1:
            return
        ratio = min(max(event.x / (width - 1), 0.0), 1.0)
        self.value = self.minimum + ratio * (self.maximum - self.minimum)
        self.focus()

    def action_increment(self) -> None:
        self.value = self.value + self.step

    def action_decrement(self) -> None:
        self.value = self.value - self.step

    def action_increment_page(self) -> None:
        self.value = self.value + self.page_step

    def action_decrement_page(self) -> None:
        self.value = self.value - self.page_step

    def action_to_minimum(self) -> None:
        self.value = self.minimum

    def action_to_maximum(self) -> None:
        self.value = self.maximum


__all__ = ["CustomSlider"]
