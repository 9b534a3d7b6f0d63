"""
term-edit: a minimal full-screen terminal text editor

Opens a file into an in-memory line buffer, draws a scrolling viewport of
it in raw terminal mode, and lets you move the cursor and type.

Quick Start:
    $ term-edit notes.txt

Library use:
    >>> import term_edit
    >>> doc = term_edit.load("notes.txt")
    >>> doc[0].render

Keys:
    - Arrows, Home/End, PageUp/PageDown move the cursor
    - Any other key inserts that character
    - Ctrl-Q quits
"""

import logging

__version__ = "0.0.1"

# Core types
from term_edit.core.row import Row
from term_edit.core.document import Document
from term_edit.core.session import Cursor, EditorSession, StatusMessage
from term_edit.core.viewport import Viewport
from term_edit.core.errors import TermEditError

# Convenience functions
from term_edit.io.reader import load, load_lines

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Row",
    "Document",
    "Cursor",
    "EditorSession",
    "StatusMessage",
    "Viewport",
    "TermEditError",
    # I/O
    "load",
    "load_lines",
]
