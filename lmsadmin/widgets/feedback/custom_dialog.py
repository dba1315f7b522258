"""Custom dialog widgets for the TUI application.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-custom-dialog
"""

from contextlib import suppress

from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Static

from lmsadmin.constants.screens.borrowing_settings import BUTTON_OK
from lmsadmin.widgets.feedback.custom_button import CustomButton

_DIALOG_MIN_WIDTH = 36
_DIALOG_SIDE_MARGIN = 6
_DIALOG_CONTENT_PADDING = 8
_DIALOG_MIN_HEIGHT = 8
_DIALOG_VERTICAL_MARGIN = 4


def _max_line_width(*values: str) -> int:
    width = 0
    for value in values:
        for line in value.splitlines() or [""]:
            width = max(width, len(line))
    return width


def _fit_dialog_width(dialog: ModalScreen, content_width: int) -> int:
    available_width = max(
        _DIALOG_MIN_WIDTH,
        getattr(dialog.app.size, "width", _DIALOG_MIN_WIDTH + _DIALOG_SIDE_MARGIN)
        - _DIALOG_SIDE_MARGIN,
    )
    return max(
        _DIALOG_MIN_WIDTH,
        min(content_width + _DIALOG_CONTENT_PADDING, available_width),
    )


def _apply_dialog_shell_size(dialog: ModalScreen, content_width: int) -> None:
    dialog_width = _fit_dialog_width(dialog, content_width)
    dialog_max_height = max(
        _DIALOG_MIN_HEIGHT,
        getattr(dialog.app.size, "height", _DIALOG_MIN_HEIGHT + _DIALOG_VERTICAL_MARGIN)
        - _DIALOG_VERTICAL_MARGIN,
    )
    with suppress(Exception):
        container = dialog.query_one(".dialog-container", Vertical)
        width_value = str(dialog_width)
        container.styles.width = width_value
        container.styles.min_width = width_value
        container.styles.max_width = width_value
        container.styles.height = "auto"
        container.styles.max_height = str(dialog_max_height)


class CustomAlertDialog(ModalScreen[None]):
    """Alert with a title, a message and a single OK button."""

    CSS_PATH = "../../css/widgets/custom_dialog.tcss"
    BINDINGS = [
        Binding("escape", "acknowledge", "OK", show=False),
    ]

    def __init__(
        self,
        message: str,
        title: str = "",
        *,
        is_error: bool = False,
    ) -> None:
        """Initialize the alert dialog.

        Args:
            message: Message to display.
            title: Dialog title.
            is_error: Style the dialog as an error.
        """
        super().__init__(classes="widget-custom-dialog")
        self._message = message
        self._title = title
        self._is_error = is_error

    @property
    def title_text(self) -> str:
        return self._title

    @property
    def message_text(self) -> str:
        return self._message

    @property
    def is_error(self) -> bool:
        return self._is_error

    def compose(self):
        container_classes = "dialog-container -error" if self._is_error else "dialog-container"
        with Vertical(classes=container_classes):
            if self._title:
                with Vertical(classes="dialog-title-wrapper"):
                    yield Static(
                        self._title,
                        id="alert-title",
                        classes="dialog-title",
                        markup=False,
                    )
            yield Static(
                self._message,
                id="alert-message",
                classes="dialog-message",
                markup=False,
            )
            with Horizontal(classes="dialog-buttons"):
                yield CustomButton(
                    BUTTON_OK,
                    id="alert-ok-btn",
                    classes="dialog-btn confirm",
                )

    def on_mount(self) -> None:
        self._apply_dynamic_layout()
        with suppress(Exception):
            self.query_one("#alert-ok-btn", CustomButton).focus()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        content_width = max(
            _max_line_width(self._title, self._message),
            len(BUTTON_OK) + 9,
        )
        _apply_dialog_shell_size(self, content_width)

    def on_button_pressed(self, event: CustomButton.Pressed) -> None:
        """Handle button presses."""
        event.stop()
        if event.button.id == "alert-ok-btn":
            self.action_acknowledge()

    def action_acknowledge(self) -> None:
        """Close the alert."""
        self.dismiss(None)


__all__ = ["CustomAlertDialog"]
