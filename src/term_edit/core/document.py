"""Document - the ordered list of rows being edited."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from term_edit.core.constants import TAB_STOP
from term_edit.core.row import Row

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """
    The text buffer: rows in line order, indexed by 0-based line number.

    ``filename`` is only used for display; nothing is ever written back.
    """
    rows: list[Row] = field(default_factory=list)
    filename: str | None = None
    tab_stop: int = TAB_STOP

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def insert_row(self, index: int, text: str) -> Row | None:
        """Insert a new row at ``index``; ``index == num_rows`` appends."""
        if index < 0 or index > len(self.rows):
            logger.debug("insert_row: index %d out of range", index)
            return None
        row = Row(text, tab_stop=self.tab_stop)
        self.rows.insert(index, row)
        return row

    def append_row(self, text: str) -> Row:
        row = Row(text, tab_stop=self.tab_stop)
        self.rows.append(row)
        return row

    def row_length(self, index: int) -> int:
        """Length of row ``index``, or 0 past the last row."""
        if 0 <= index < len(self.rows):
            return self.rows[index].size
        return 0

    def row_at(self, index: int) -> Row | None:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None
