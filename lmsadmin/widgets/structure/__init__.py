"""Structure widgets for LMS Admin TUI.

- CustomFooter: Footer widget
- CustomHeader: Header widget
"""

from lmsadmin.widgets.structure.custom_footer import CustomFooter
from lmsadmin.widgets.structure.custom_header import CustomHeader

__all__ = [
    "CustomFooter",
    "CustomHeader",
]
