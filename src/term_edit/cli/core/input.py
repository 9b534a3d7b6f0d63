"""Keyboard input: escape-sequence decoding and key reading."""

from __future__ import annotations

import codecs
import logging
import os
import select
import string
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from term_edit.core.constants import ESC, READ_TIMEOUT
from term_edit.core.errors import TermEditError

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character otherwise (control characters included)
    raw: str = ""  # Input that produced the event

    @property
    def is_char(self) -> bool:
        """Check if this is a plain character."""
        return self.char is not None and self.key is None


class DecoderState(Enum):
    """Where the decoder is inside an escape sequence."""
    START = auto()      # Between keys
    ESC = auto()        # Seen ESC
    CSI = auto()        # Seen ESC [
    CSI_PARAM = auto()  # Seen ESC [ <digit>
    SS3 = auto()        # Seen ESC O


_Target = Union[DecoderState, Key]

# (state, input) -> next state, or the key the sequence completes.
# In CSI_PARAM the input is "<digit>~" so the parameter picks the key.
TRANSITIONS: dict[tuple[DecoderState, str], _Target] = {
    (DecoderState.ESC, '['): DecoderState.CSI,
    (DecoderState.ESC, 'O'): DecoderState.SS3,
    **{(DecoderState.CSI, d): DecoderState.CSI_PARAM for d in string.digits},
    # CSI letter
    (DecoderState.CSI, 'A'): Key.UP,
    (DecoderState.CSI, 'B'): Key.DOWN,
    (DecoderState.CSI, 'C'): Key.RIGHT,
    (DecoderState.CSI, 'D'): Key.LEFT,
    (DecoderState.CSI, 'H'): Key.HOME,
    (DecoderState.CSI, 'F'): Key.END,
    # CSI digit ~ (vt/xterm/rxvt variants)
    (DecoderState.CSI_PARAM, '1~'): Key.HOME,
    (DecoderState.CSI_PARAM, '3~'): Key.DELETE,
    (DecoderState.CSI_PARAM, '4~'): Key.END,
    (DecoderState.CSI_PARAM, '5~'): Key.PAGE_UP,
    (DecoderState.CSI_PARAM, '6~'): Key.PAGE_DOWN,
    (DecoderState.CSI_PARAM, '7~'): Key.HOME,
    (DecoderState.CSI_PARAM, '8~'): Key.END,
    # SS3 (application mode)
    (DecoderState.SS3, 'A'): Key.UP,
    (DecoderState.SS3, 'B'): Key.DOWN,
    (DecoderState.SS3, 'C'): Key.RIGHT,
    (DecoderState.SS3, 'D'): Key.LEFT,
    (DecoderState.SS3, 'H'): Key.HOME,
    (DecoderState.SS3, 'F'): Key.END,
}


class KeyDecoder:
    """
    Finite-state decoder turning input characters into key events.

    Feed characters one at a time. A sequence that does not match
    ``TRANSITIONS``, or that is cut short by a read timeout, becomes a
    plain ESCAPE key and the characters consumed so far are dropped.
    """

    def __init__(self) -> None:
        self._state = DecoderState.START
        self._seq = ""
        self._param = ""

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def pending(self) -> bool:
        """True while inside an unfinished escape sequence."""
        return self._state is not DecoderState.START

    def feed(self, ch: str) -> Optional[KeyEvent]:
        """Consume one character; return an event when one is complete."""
        if self._state is DecoderState.START:
            if ch == ESC:
                self._state = DecoderState.ESC
                self._seq = ch
                return None
            return KeyEvent(char=ch, raw=ch)

        self._seq += ch
        symbol = self._param + ch if self._state is DecoderState.CSI_PARAM else ch
        target = TRANSITIONS.get((self._state, symbol))

        if isinstance(target, Key):
            return self._finish(target)
        if target is None:
            return self._finish(Key.ESCAPE)

        if target is DecoderState.CSI_PARAM:
            self._param = ch
        self._state = target
        return None

    def timeout(self) -> Optional[KeyEvent]:
        """Input stalled: an unfinished sequence decodes to ESCAPE."""
        if not self.pending:
            return None
        return self._finish(Key.ESCAPE)

    def _finish(self, key: Key) -> KeyEvent:
        event = KeyEvent(key=key, raw=self._seq)
        self._state = DecoderState.START
        self._seq = ""
        self._param = ""
        return event


class InputReader:
    """
    Blocking keyboard reader.

    Uses os.read() to bypass Python's I/O buffering. Each wait for input
    is bounded by ``timeout``; empty, would-block and interrupted reads
    are retried.
    """

    def __init__(self, fd: Optional[int] = None, timeout: float = READ_TIMEOUT) -> None:
        self._fd = fd if fd is not None else sys.stdin.fileno()
        self._timeout = timeout
        self._decoder = KeyDecoder()
        self._utf8 = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self._chars = ""

    def read(self) -> Optional[KeyEvent]:
        """
        Read at most one key event.

        Returns None if no complete key arrived within one timeout.
        """
        ch = self._read_char()
        if ch is None:
            return self._decoder.timeout()
        return self._decoder.feed(ch)

    def read_key(self) -> KeyEvent:
        """Read a key event, blocking until one is available."""
        while True:
            event = self.read()
            if event is not None:
                logger.debug("Key %s %r", event.key.name if event.key else "char", event.raw)
                return event

    def _read_char(self) -> Optional[str]:
        """Next decoded character, or None on timeout."""
        while not self._chars:
            data = self._read_byte()
            if data is None:
                return None
            self._chars = self._utf8.decode(data)
        ch, self._chars = self._chars[0], self._chars[1:]
        return ch

    def _read_byte(self) -> Optional[bytes]:
        if not self._has_input(self._timeout):
            return None
        try:
            data = os.read(self._fd, 1)
        except (BlockingIOError, InterruptedError):
            return None
        except OSError as exc:
            raise TermEditError("read", exc) from exc
        return data or None

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except InterruptedError:
            return False
        except (ValueError, OSError) as exc:
            raise TermEditError("read", exc if isinstance(exc, OSError) else None) from exc
        return bool(ready)
