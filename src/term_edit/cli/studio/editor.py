"""Full-screen editor: the draw / read / dispatch loop."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Protocol

from term_edit.core.constants import HELP_MESSAGE, RESERVED_ROWS
from term_edit.core.document import Document
from term_edit.core.session import EditorConfig, EditorSession
from term_edit.core.viewport import Viewport
from term_edit.cli.core.input import InputReader, KeyEvent
from term_edit.cli.core.terminal import Terminal
from term_edit.edit.dispatcher import Action, InputDispatcher
from term_edit.io.reader import load
from term_edit.render.frame import ScreenRenderer

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def read_key(self) -> KeyEvent: ...


class EditorApp:
    """
    Interactive text editor.

    Simple design:
    - The terminal goes raw before anything else and is restored on exit
    - Every iteration redraws the whole screen, then waits for one key
    - Ctrl-Q quits with a cleared screen
    """

    def __init__(
        self,
        path: Optional[str | Path] = None,
        config: Optional[EditorConfig] = None,
        terminal: Optional[Terminal] = None,
        keys: Optional[KeySource] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = path
        self.config = config or EditorConfig()
        self.terminal = terminal or Terminal()
        self._keys = keys
        self._clock = clock
        self.session: Optional[EditorSession] = None

    def run(self) -> int:
        """Main application loop. Returns the exit status."""
        with self.terminal.raw_mode():
            session = self._create_session()
            renderer = ScreenRenderer(session, clock=self._clock)
            dispatcher = InputDispatcher(session)
            keys = self._keys or InputReader(self.terminal.in_fd, self.config.read_timeout)

            while True:
                self.terminal.write(renderer.render_frame())
                if dispatcher.handle(keys.read_key()) is Action.QUIT:
                    break

            self.terminal.clear()
        logger.info("Quit")
        return 0

    def _create_session(self) -> EditorSession:
        size = self.terminal.window_size()
        viewport = Viewport(
            screenrows=size.rows - RESERVED_ROWS,
            screencols=size.cols,
        )

        if self.path is not None:
            document = load(self.path, tab_stop=self.config.tab_stop)
        else:
            document = Document(tab_stop=self.config.tab_stop)

        session = EditorSession(document=document, viewport=viewport, config=self.config)
        session.set_status(HELP_MESSAGE, self._clock())
        self.session = session
        return session
