"""Screen widgets drawn each frame."""

from term_edit.cli.widgets.base import Widget, Rect
from term_edit.cli.widgets.text_view import TextViewWidget
from term_edit.cli.widgets.status_bar import StatusBarWidget
from term_edit.cli.widgets.message_bar import MessageBarWidget

__all__ = [
    "Widget",
    "Rect",
    "TextViewWidget",
    "StatusBarWidget",
    "MessageBarWidget",
]
