"""Build a whole screen update as one string."""

from __future__ import annotations

import time
from typing import Callable

from term_edit.core.constants import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    NEWLINE,
    SHOW_CURSOR,
    move_cursor,
)
from term_edit.core.session import EditorSession
from term_edit.cli.widgets.base import Rect
from term_edit.cli.widgets.message_bar import MessageBarWidget
from term_edit.cli.widgets.status_bar import StatusBarWidget
from term_edit.cli.widgets.text_view import TextViewWidget


class FrameBuffer:
    """Append-only output buffer for one frame."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> None:
        self._parts.append(text)

    def getvalue(self) -> str:
        return ''.join(self._parts)

class ScreenRenderer:
    """
    Draws the editor screen.

    Nothing is written to the terminal here: each frame is built
    off-screen and returned so the caller can write it in one go. The
    cursor is hidden while the frame is painted and rows are cleared to
    end of line instead of clearing the whole screen, so there is no
    flicker.
    """

    def __init__(
        self,
        session: EditorSession,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.session = session
        self.text_view = TextViewWidget(session)
        self.status_bar = StatusBarWidget(session)
        self.message_bar = MessageBarWidget(session, clock=clock)

    def render_frame(self) -> str:
        """Scroll to the cursor and return the complete frame."""
        session = self.session
        session.scroll()
        view = session.viewport
        cursor = session.cursor

        buf = FrameBuffer()
        buf.append(HIDE_CURSOR)
        buf.append(CURSOR_HOME)

        for line in self.text_view.render(Rect(0, 0, view.screencols, view.screenrows)):
            buf.append(line)
            buf.append(CLEAR_LINE)
            buf.append(NEWLINE)

        bar = Rect(0, view.screenrows, view.screencols, 1)
        for line in self.status_bar.render(bar):
            buf.append(line)
            buf.append(NEWLINE)

        buf.append(CLEAR_LINE)
        bar = Rect(0, view.screenrows + 1, view.screencols, 1)
        for line in self.message_bar.render(bar):
            buf.append(line)

        buf.append(move_cursor(cursor.cy - view.rowoff + 1, cursor.rx - view.coloff + 1))
        buf.append(SHOW_CURSOR)
        return buf.getvalue()
