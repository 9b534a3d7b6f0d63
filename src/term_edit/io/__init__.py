"""File loading."""

from term_edit.io.reader import load, load_lines

__all__ = ["load", "load_lines"]
