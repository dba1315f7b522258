"""Base widget classes and accessibility support for reusable components.

Standard Pattern:
- Custom widgets inherit from BaseWidget for per-type default classes
- Interactive widgets mix in AccessibleMixin so every control carries a
  label, a hint and (optionally) a spoken value; the hint doubles as the
  widget tooltip

Example:
    >>> from lmsadmin.widgets._base import AccessibleMixin, BaseWidget
    >>>
    >>> class CustomGauge(AccessibleMixin, BaseWidget):
    ...     _default_classes = "widget-custom-gauge"
"""

from __future__ import annotations

from typing import ClassVar

from textual.widget import Widget


class AccessibleMixin:
    """Accessibility metadata for widgets.

    Attributes:
        accessibility_label: Short name of the control.
        accessibility_hint: What interacting with the control does.
        accessibility_value: Current value as it should be announced.
        accessibility_header: Whether the widget acts as a section header.
    """

    accessibility_label: str = ""
    accessibility_hint: str = ""
    accessibility_value: str = ""
    accessibility_header: bool = False

    def set_accessibility(
        self,
        label: str,
        hint: str = "",
        value: str = "",
        *,
        header: bool = False,
    ) -> None:
        """Attach accessibility metadata and mirror it into the tooltip."""
        self.accessibility_label = label
        self.accessibility_hint = hint
        self.accessibility_value = value
        self.accessibility_header = header
        if hint:
            self.tooltip = hint  # type: ignore[attr-defined]

    def set_accessibility_value(self, value: str) -> None:
        """Update the announced value."""
        self.accessibility_value = value


class BaseWidget(Widget):
    """Base widget applying per-type default CSS classes.

    Attributes:
        _default_classes: Default CSS classes for the widget.
    """

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Widget ID.
            classes: CSS classes to apply to the widget.
            **kwargs: Additional keyword arguments passed to Widget.
        """
        super().__init__(id=id, classes=classes, **kwargs)

        if self._default_classes:
            self.add_class(*self._default_classes.split())


__all__ = ["AccessibleMixin", "BaseWidget"]
