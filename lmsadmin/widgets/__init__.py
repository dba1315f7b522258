"""Widgets module for the LMS Admin TUI.

This module provides all reusable widgets organized into submodules:
- containers: Container widgets (CustomContainer, CustomHorizontal, ...)
- display: Display widgets (CustomStatic)
- feedback: Button, alert dialog, loading indicator
- input: Input widgets (CustomSlider)
- structure: Structure widgets (CustomFooter, CustomHeader)
"""

# Base classes
from lmsadmin.widgets._base import (
    AccessibleMixin,
    BaseWidget,
)

# Container widgets
from lmsadmin.widgets.containers import (
    CustomContainer,
    CustomHorizontal,
    CustomVertical,
    CustomVerticalScroll,
)

# Display widgets
from lmsadmin.widgets.display import CustomStatic

# Feedback widgets
from lmsadmin.widgets.feedback import (
    CustomAlertDialog,
    CustomButton,
    CustomLoadingIndicator,
)

# Input widgets
from lmsadmin.widgets.input import CustomSlider

# Structure widgets
from lmsadmin.widgets.structure import (
    CustomFooter,
    CustomHeader,
)

__all__ = [
    # Base classes
    "AccessibleMixin",
    "BaseWidget",
    # Feedback
    "CustomAlertDialog",
    "CustomButton",
    # Containers
    "CustomContainer",
    # Structure
    "CustomFooter",
    "CustomHeader",
    "CustomHorizontal",
    "CustomLoadingIndicator",
    # Input
    "CustomSlider",
    # Display
    "CustomStatic",
    "CustomVertical",
    "CustomVerticalScroll",
]
