"""Shared constants for the editor and its terminal protocol."""

VERSION = "0.0.1"
WELCOME = f"termEdit editor -- version {VERSION}"
NO_NAME = "[No Name]"
HELP_MESSAGE = "HELP: CTRL-Q = quit"

# Render columns per tab stop
TAB_STOP = 8

# Seconds a status message stays on the message bar
MESSAGE_TIMEOUT = 5.0

# Seconds to wait for input before polling again (VTIME=1 decisecond)
READ_TIMEOUT = 0.1

# Rows reserved below the text area: status bar + message bar
RESERVED_ROWS = 2

# Longest filename shown in the status bar
STATUS_NAME_WIDTH = 20

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CURSOR_HOME = f"{CSI}H"
CLEAR_SCREEN = f"{CSI}2J"
CLEAR_LINE = f"{CSI}K"
INVERT = f"{CSI}7m"
RESET = f"{CSI}m"
QUERY_CURSOR = f"{CSI}6n"
CURSOR_FAR_CORNER = f"{CSI}999C{CSI}999B"
NEWLINE = "\r\n"


def ctrl_key(ch: str) -> str:
    """Return the character a terminal sends for Ctrl + ``ch``."""
    return chr(ord(ch) & 0x1F)


def move_cursor(row: int, col: int) -> str:
    """Cursor position sequence (1-indexed)."""
    return f"{CSI}{row};{col}H"


QUIT_KEY = ctrl_key("q")
