"""Viewport - which part of the document is on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_edit.core.document import Document
    from term_edit.core.session import Cursor


@dataclass
class Viewport:
    """
    Screen geometry plus the top-left document coordinate being shown.

    ``rowoff`` is a row index; ``coloff`` is a rendered column. The screen
    size excludes the status and message bars and is fixed for the session.
    """
    screenrows: int = 22
    screencols: int = 80
    rowoff: int = 0
    coloff: int = 0

    def scroll(self, document: Document, cursor: Cursor) -> None:
        """Update ``cursor.rx`` and move the offsets so the cursor is visible."""
        cursor.rx = 0
        row = document.row_at(cursor.cy)
        if row is not None:
            cursor.rx = row.cx_to_rx(cursor.cx)

        if cursor.cy < self.rowoff:
            self.rowoff = cursor.cy
        if cursor.cy >= self.rowoff + self.screenrows:
            self.rowoff = cursor.cy - self.screenrows + 1
        if cursor.rx < self.coloff:
            self.coloff = cursor.rx
        if cursor.rx >= self.coloff + self.screencols:
            self.coloff = cursor.rx - self.screencols + 1
