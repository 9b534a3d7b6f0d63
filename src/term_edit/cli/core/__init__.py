"""Core TUI infrastructure - terminal I/O and input handling."""

from term_edit.cli.core.terminal import Terminal, TerminalSize, raw_attributes
from term_edit.cli.core.input import (
    DecoderState,
    InputReader,
    Key,
    KeyDecoder,
    KeyEvent,
)

__all__ = [
    "Terminal",
    "TerminalSize",
    "raw_attributes",
    "InputReader",
    "KeyDecoder",
    "DecoderState",
    "KeyEvent",
    "Key",
]
