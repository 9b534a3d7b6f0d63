"""Editor session state: cursor, status message, settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from term_edit.core.constants import MESSAGE_TIMEOUT, READ_TIMEOUT, TAB_STOP
from term_edit.core.document import Document
from term_edit.core.viewport import Viewport


@dataclass
class EditorConfig:
    """
    Settings for one editor run.

    Attributes:
        tab_stop: Render columns per tab stop
        message_timeout: Seconds a status message remains visible
        read_timeout: Seconds the key reader waits before polling again
    """
    tab_stop: int = TAB_STOP
    message_timeout: float = MESSAGE_TIMEOUT
    read_timeout: float = READ_TIMEOUT


@dataclass
class Cursor:
    """Cursor position: logical (cx, cy) and rendered column rx."""
    cx: int = 0
    cy: int = 0
    rx: int = 0


@dataclass
class StatusMessage:
    """A transient message for the message bar."""
    text: str = ""
    timestamp: float = 0.0

    def visible(self, now: float, timeout: float = MESSAGE_TIMEOUT) -> bool:
        """True while the message is non-empty and younger than ``timeout``."""
        return bool(self.text) and now - self.timestamp < timeout


@dataclass
class EditorSession:
    """
    Everything one editing session works on.

    Built once at startup and handed to the dispatcher and renderer.
    """
    document: Document = field(default_factory=Document)
    viewport: Viewport = field(default_factory=Viewport)
    cursor: Cursor = field(default_factory=Cursor)
    status: StatusMessage = field(default_factory=StatusMessage)
    config: EditorConfig = field(default_factory=EditorConfig)

    def set_status(self, text: str, now: float) -> None:
        self.status = StatusMessage(text, now)

    def scroll(self) -> None:
        """Recompute rx and bring the cursor into view."""
        self.viewport.scroll(self.document, self.cursor)
