"""Row - one line of text with its tab-expanded render form."""

from __future__ import annotations

from dataclasses import dataclass, field

from term_edit.core.constants import TAB_STOP


@dataclass
class Row:
    """
    A single line of the document.

    ``chars`` is the authoritative text. ``render`` is derived from it with
    every tab expanded to spaces up to the next tab stop, and is rebuilt
    after every change to ``chars``.
    """
    chars: str = ""
    tab_stop: int = TAB_STOP
    render: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.update_render()

    def __len__(self) -> int:
        return len(self.chars)

    @property
    def size(self) -> int:
        """Number of logical characters."""
        return len(self.chars)

    def update_render(self) -> None:
        """Rebuild ``render`` from ``chars``."""
        parts: list[str] = []
        col = 0
        for ch in self.chars:
            if ch == '\t':
                width = self.tab_stop - (col % self.tab_stop)
                parts.append(' ' * width)
                col += width
            else:
                parts.append(ch)
                col += 1
        self.render = ''.join(parts)

    def cx_to_rx(self, cx: int) -> int:
        """Map a logical column to its rendered column."""
        rx = 0
        for ch in self.chars[:cx]:
            if ch == '\t':
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def insert_char(self, at: int, ch: str) -> None:
        """Insert ``ch`` before column ``at``; out-of-range positions append."""
        if at < 0 or at > len(self.chars):
            at = len(self.chars)
        self.chars = self.chars[:at] + ch + self.chars[at:]
        self.update_render()
