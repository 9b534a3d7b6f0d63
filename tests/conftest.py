"""Shared fixtures: sample files, a fake terminal and scripted keys."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

import pytest

from term_edit.cli.core.input import Key, KeyEvent
from term_edit.cli.core.terminal import TerminalSize
from term_edit.core.constants import CLEAR_SCREEN, CURSOR_HOME, ctrl_key
from term_edit.core.session import EditorSession
from term_edit.core.viewport import Viewport
from term_edit.io.reader import load_lines

QUIT = KeyEvent(char=ctrl_key('q'), raw=ctrl_key('q'))


class FakeTerminal:
    """Stands in for Terminal: records output and raw-mode use."""

    def __init__(self, rows: int = 24, cols: int = 80) -> None:
        self.size = TerminalSize(rows, cols)
        self.output: list[str] = []
        self.raw = False
        self.restored = 0
        self.in_fd = -1

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        self.raw = True
        try:
            yield
        finally:
            self.raw = False
            self.restored += 1

    def window_size(self) -> TerminalSize:
        return self.size

    def write(self, data: str) -> None:
        self.output.append(data)

    def clear(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)


class ScriptedKeys:
    """Replays key events, then quits."""

    def __init__(self, events: list[KeyEvent]) -> None:
        self.events = list(events)

    def read_key(self) -> KeyEvent:
        if self.events:
            return self.events.pop(0)
        return QUIT


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def make_keys() -> Callable[..., ScriptedKeys]:
    """Build a key source from Key members and characters."""
    def factory(*items: Key | str) -> ScriptedKeys:
        events = [
            KeyEvent(key=item) if isinstance(item, Key) else KeyEvent(char=item, raw=item)
            for item in items
        ]
        return ScriptedKeys(events)
    return factory


@pytest.fixture
def three_line_file(tmp_path: Path) -> Path:
    path = tmp_path / "three.txt"
    path.write_bytes(b"first\nsecond line\r\n\tthird\n")
    return path


@pytest.fixture
def make_session() -> Callable[..., EditorSession]:
    """Session over the given lines with a small screen."""
    def factory(lines: list[str], rows: int = 5, cols: int = 10) -> EditorSession:
        return EditorSession(
            document=load_lines(lines),
            viewport=Viewport(screenrows=rows, screencols=cols),
        )
    return factory


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """An os.pipe() pair, closed afterwards."""
    read_fd, write_fd = os.pipe()
    fds = [read_fd, write_fd]
    yield read_fd, write_fd
    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, int]]:
    """A pty.openpty() (master, slave) pair, closed afterwards."""
    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass
