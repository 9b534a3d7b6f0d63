"""Document text area with horizontal and vertical scrolling."""

from __future__ import annotations

from term_edit.core.constants import WELCOME
from term_edit.cli.widgets.base import BaseWidget, Rect

FILLER = "~"


class TextViewWidget(BaseWidget):
    """
    Draws the visible slice of the document.

    Rows past the end of the document show a ``~`` marker. An empty
    document gets the welcome banner a third of the way down.
    """

    def render(self, bounds: Rect) -> list[str]:
        doc = self.session.document
        view = self.session.viewport
        lines: list[str] = []

        for y in range(bounds.height):
            filerow = y + view.rowoff
            if filerow < doc.num_rows:
                render = doc[filerow].render
                lines.append(render[view.coloff:view.coloff + bounds.width])
            elif doc.num_rows == 0 and y == bounds.height // 3:
                lines.append(self._welcome(bounds.width))
            else:
                lines.append(FILLER)

        return lines

    @staticmethod
    def _welcome(width: int) -> str:
        """Centered banner; the first padding cell keeps the filler marker."""
        banner = WELCOME[:width]
        padding = (width - len(banner)) // 2
        if padding:
            return FILLER + ' ' * (padding - 1) + banner
        return banner
