"""Inverted status bar: file name, line count and cursor line."""

from __future__ import annotations

from term_edit.core.constants import INVERT, NO_NAME, RESET, STATUS_NAME_WIDTH
from term_edit.cli.widgets.base import BaseWidget, Rect


class StatusBarWidget(BaseWidget):
    """Bottom status bar showing the file and position."""

    def left_text(self) -> str:
        doc = self.session.document
        name = (doc.filename or NO_NAME)[:STATUS_NAME_WIDTH]
        return f"{name} - {doc.num_rows} lines"

    def right_text(self) -> str:
        return f"{self.session.cursor.cy + 1}/{self.session.document.num_rows}"

    def render(self, bounds: Rect) -> list[str]:
        """Render the status bar, fitting within bounds.width."""
        width = bounds.width
        left = self.left_text()[:width]
        right = self.right_text()

        # Right text goes flush right only if it fits after the left text
        gap = width - len(left) - len(right)
        if gap >= 0:
            body = left + ' ' * gap + right
        else:
            body = left + ' ' * (width - len(left))

        return [f"{INVERT}{body}{RESET}"]
