"""Low-level terminal operations: raw mode, window size, output."""

from __future__ import annotations

import logging
import os
import re
import select
import signal
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from term_edit.core.constants import (
    CLEAR_SCREEN,
    CURSOR_FAR_CORNER,
    CURSOR_HOME,
    QUERY_CURSOR,
    READ_TIMEOUT,
)
from term_edit.core.errors import TermEditError

logger = logging.getLogger(__name__)

_CURSOR_REPLY = re.compile(rb'^\x1b\[(\d+);(\d+)')

# termios attribute list indices
_IFLAG, _OFLAG, _CFLAG, _LFLAG, _CC = 0, 1, 2, 3, 6

# Signals that would otherwise kill us with the terminal still raw
_RESTORE_ON = tuple(
    sig for sig in (getattr(signal, 'SIGTERM', None), getattr(signal, 'SIGHUP', None))
    if sig is not None
)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def raw_attributes(attrs: list) -> list:
    """
    Compute raw-mode attributes from a ``tcgetattr`` snapshot.

    Turns off echo, canonical input, signal keys, extended input
    processing, output post-processing, flow control and CR/NL
    translation; reads return after at most one decisecond.
    """
    raw = list(attrs)
    raw[_CC] = list(attrs[_CC])
    raw[_IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    raw[_OFLAG] &= ~termios.OPOST
    raw[_CFLAG] |= termios.CS8
    raw[_LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    raw[_CC][termios.VMIN] = 0
    raw[_CC][termios.VTIME] = 1
    return raw


def _raise_exit(signum: int, frame: object) -> None:
    raise SystemExit(128 + signum)


class Terminal:
    """
    Terminal I/O for the editor.

    Reads from ``in_fd`` and writes to ``out_fd`` (stdin/stdout by default)
    without going through Python's buffered streams.
    """

    def __init__(self, in_fd: int | None = None, out_fd: int | None = None) -> None:
        self._in_fd = in_fd
        self._out_fd = out_fd

    @property
    def in_fd(self) -> int:
        if self._in_fd is None:
            self._in_fd = self._fileno(sys.stdin, "tcgetattr")
        return self._in_fd

    @property
    def out_fd(self) -> int:
        if self._out_fd is None:
            self._out_fd = self._fileno(sys.stdout, "getWindowSize")
        return self._out_fd

    @staticmethod
    def _fileno(stream: object, operation: str) -> int:
        try:
            return stream.fileno()  # type: ignore[attr-defined]
        except (AttributeError, ValueError, OSError) as exc:
            cause = exc if isinstance(exc, OSError) else OSError(str(exc))
            raise TermEditError(operation, cause) from exc

    def write(self, data: str) -> None:
        """Write ``data`` in a single system call."""
        os.write(self.out_fd, data.encode('utf-8', errors='replace'))

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """
        Put the input terminal into raw mode for the duration of the block.

        The original attributes are restored on every way out, including
        SIGTERM/SIGHUP, which are turned into SystemExit while active.
        """
        fd = self.in_fd
        try:
            original = termios.tcgetattr(fd)
        except termios.error as exc:
            raise TermEditError("tcgetattr", _os_error(exc)) from exc

        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, raw_attributes(original))
        except termios.error as exc:
            raise TermEditError("tcsetattr", _os_error(exc)) from exc
        logger.debug("Raw mode on (fd %d)", fd)

        previous = {sig: signal.signal(sig, _raise_exit) for sig in _RESTORE_ON}
        try:
            yield
        except BaseException:
            # keep the exception in flight; a failed restore is only logged
            self._restore(fd, original, previous, strict=False)
            raise
        self._restore(fd, original, previous, strict=True)

    @staticmethod
    def _restore(fd: int, original: list, previous: dict, strict: bool) -> None:
        """Reinstate signal handlers and the attribute snapshot."""
        for sig, handler in previous.items():
            signal.signal(sig, handler)
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            logger.error("Cannot restore terminal (fd %d): %s", fd, exc)
            if strict:
                raise TermEditError("tcsetattr", _os_error(exc)) from exc
            return
        logger.debug("Terminal restored (fd %d)", fd)

    def window_size(self) -> TerminalSize:
        """
        Get terminal dimensions.

        Asks the OS first; if that fails or reports zero columns, parks the
        cursor in the far bottom-right corner and asks the terminal where
        it ended up.
        """
        try:
            size = os.get_terminal_size(self.out_fd)
        except OSError:
            size = None

        if size is not None and size.columns != 0:
            logger.debug("Window size %dx%d from ioctl", size.lines, size.columns)
            return TerminalSize(size.lines, size.columns)

        try:
            self.write(CURSOR_FAR_CORNER)
        except OSError as exc:
            raise TermEditError("getWindowSize", exc) from exc
        result = self.cursor_position()
        if result is None:
            raise TermEditError("getWindowSize")
        logger.debug("Window size %dx%d from cursor report", result.rows, result.cols)
        return result

    def cursor_position(self, timeout: float = READ_TIMEOUT) -> TerminalSize | None:
        """Query the cursor position (``CSI 6n``); None if the reply is unusable."""
        reply = b''
        try:
            self.write(QUERY_CURSOR)
            while len(reply) < 31:
                ready, _, _ = select.select([self.in_fd], [], [], timeout)
                if not ready:
                    break
                byte = os.read(self.in_fd, 1)
                if not byte or byte == b'R':
                    break
                reply += byte
        except OSError as exc:
            raise TermEditError("getWindowSize", exc) from exc

        match = _CURSOR_REPLY.match(reply)
        if match is None:
            return None
        return TerminalSize(int(match.group(1)), int(match.group(2)))


def _os_error(exc: termios.error) -> OSError:
    """termios.error carries (errno, message) but is not an OSError."""
    args = exc.args
    if len(args) == 2 and isinstance(args[0], int):
        return OSError(args[0], args[1])
    return OSError(str(exc))
