"""Feedback widgets for loading states, buttons and alerts."""

from lmsadmin.widgets.feedback.custom_button import CustomButton
from lmsadmin.widgets.feedback.custom_dialog import (
    CustomAlertDialog,
)
from lmsadmin.widgets.feedback.custom_loading_indicator import (
    CustomLoadingIndicator,
)

__all__ = [
    "CustomAlertDialog",
    "CustomButton",
    "CustomLoadingIndicator",
]
