"""Translate key events into cursor moves, insertions and quit."""

from __future__ import annotations

import logging
from enum import Enum, auto

from term_edit.core.constants import ESC, QUIT_KEY
from term_edit.core.session import EditorSession
from term_edit.cli.core.input import Key, KeyEvent

logger = logging.getLogger(__name__)

_ARROWS = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)


class Action(Enum):
    """What the main loop should do after a key."""
    CONTINUE = auto()
    QUIT = auto()


class InputDispatcher:
    """
    Applies key events to an editor session.

    There are no modes: arrows and paging move the cursor, Ctrl-Q quits,
    and any other character, a lone ESC included, is inserted at the cursor.
    """

    def __init__(self, session: EditorSession) -> None:
        self.session = session

    def handle(self, event: KeyEvent) -> Action:
        """Apply one key event."""
        if event.char == QUIT_KEY:
            return Action.QUIT

        if event.is_char:
            self.insert_char(event.char)
            return Action.CONTINUE

        key = event.key
        if key in _ARROWS:
            self.move_cursor(key)
        elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
            self.page(key)
        elif key is Key.HOME:
            self.session.cursor.cx = 0
        elif key is Key.END:
            row = self.session.document.row_at(self.session.cursor.cy)
            if row is not None:
                self.session.cursor.cx = row.size
        elif key is Key.ESCAPE:
            self.insert_char(ESC)
        # DELETE does nothing; there is no deletion
        return Action.CONTINUE

    def move_cursor(self, key: Key) -> None:
        """Move one step, wrapping across line ends, then clamp cx."""
        doc = self.session.document
        cursor = self.session.cursor
        row = doc.row_at(cursor.cy)

        if key is Key.LEFT:
            if cursor.cx != 0:
                cursor.cx -= 1
            elif cursor.cy > 0:
                cursor.cy -= 1
                cursor.cx = doc[cursor.cy].size
        elif key is Key.RIGHT:
            if row is not None and cursor.cx < row.size:
                cursor.cx += 1
            elif row is not None and cursor.cx == row.size:
                cursor.cy += 1
                cursor.cx = 0
        elif key is Key.UP:
            if cursor.cy != 0:
                cursor.cy -= 1
        elif key is Key.DOWN:
            if cursor.cy < doc.num_rows:
                cursor.cy += 1

        cursor.cx = min(cursor.cx, doc.row_length(cursor.cy))

    def page(self, key: Key) -> None:
        """Jump to the top/bottom screen row, then step a screenful."""
        cursor = self.session.cursor
        view = self.session.viewport
        if key is Key.PAGE_UP:
            cursor.cy = view.rowoff
            step = Key.UP
        else:
            cursor.cy = min(view.rowoff + view.screenrows - 1, self.session.document.num_rows)
            step = Key.DOWN

        for _ in range(view.screenrows):
            self.move_cursor(step)

    def insert_char(self, ch: str) -> None:
        """Insert at the cursor, starting a new row past the end."""
        doc = self.session.document
        cursor = self.session.cursor
        if cursor.cy == doc.num_rows:
            doc.insert_row(doc.num_rows, "")
            logger.debug("Started row %d", cursor.cy)
        doc[cursor.cy].insert_char(cursor.cx, ch)
        cursor.cx += 1
