"""Load text files into a Document."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from term_edit.core.constants import TAB_STOP
from term_edit.core.document import Document
from term_edit.core.errors import TermEditError

logger = logging.getLogger(__name__)


def load(path: str | Path, tab_stop: int = TAB_STOP) -> Document:
    """
    Load a text file, one row per line.

    Trailing ``\\r`` and ``\\n`` characters are stripped from each line and
    bytes that are not UTF-8 are replaced. Raises TermEditError if the
    file cannot be opened. The status bar shows ``path`` as given.
    """
    filename = os.fspath(path)
    path = Path(path)
    try:
        # only \n ends a line; a \r before it is stripped with it
        with open(path, encoding='utf-8', errors='replace', newline='\n') as f:
            doc = load_lines(f, filename=filename, tab_stop=tab_stop)
    except OSError as exc:
        logger.error("Cannot open %s: %s", path, exc)
        raise TermEditError("fopen", exc) from exc

    logger.info("Loaded %s (%d lines)", path, doc.num_rows)
    return doc


def load_lines(
    lines: Iterable[str],
    filename: str | None = None,
    tab_stop: int = TAB_STOP,
) -> Document:
    """Build a Document from an iterable of lines."""
    doc = Document(filename=filename, tab_stop=tab_stop)
    for line in lines:
        doc.append_row(line.rstrip('\r\n'))
    return doc
