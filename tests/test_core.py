"""Tests for rows, documents and file loading (no terminal needed)."""

from pathlib import Path

import pytest

import term_edit
from term_edit.core.document import Document
from term_edit.core.errors import TermEditError
from term_edit.core.row import Row
from term_edit.io.reader import load, load_lines


def _untab(row: Row) -> str:
    """Walk render alongside chars, collapsing each tab's space run."""
    out: list[str] = []
    col = 0
    for ch in row.chars:
        if ch == '\t':
            assert row.render[col] == ' '
            col += 1
            while col % row.tab_stop:
                assert row.render[col] == ' '
                col += 1
        else:
            out.append(row.render[col])
            col += 1
    assert col == len(row.render)
    return ''.join(out)


class TestRow:
    """Tests for Row render and column mapping."""

    def test_plain_row(self) -> None:
        row = Row("hello")
        assert row.render == "hello"
        assert row.size == 5
        assert len(row.render) == 5

    def test_tab_expands_to_next_stop(self) -> None:
        assert Row("\t").render == " " * 8
        assert Row("ab\tc").render == "ab" + " " * 6 + "c"
        assert Row("12345678\tx").render == "12345678" + " " * 8 + "x"

    def test_custom_tab_stop(self) -> None:
        assert Row("a\tb", tab_stop=4).render == "a   b"

    def test_cx_to_rx_without_tabs_is_identity(self) -> None:
        row = Row("no tabs in here")
        for cx in range(row.size + 1):
            assert row.cx_to_rx(cx) == cx

    def test_cx_to_rx_with_tabs(self) -> None:
        row = Row("\tab\tc")
        assert row.cx_to_rx(0) == 0
        assert row.cx_to_rx(1) == 8
        assert row.cx_to_rx(3) == 10
        assert row.cx_to_rx(4) == 16
        assert row.cx_to_rx(5) == 17

    @pytest.mark.parametrize("text", ["\t\t", "a\tbc\t\td", "1234567\t8", "x\t" * 9])
    def test_cx_to_rx_monotonic_and_tab_width(self, text: str) -> None:
        row = Row(text)
        previous = 0
        for cx in range(1, row.size + 1):
            rx = row.cx_to_rx(cx)
            step = rx - previous
            if row.chars[cx - 1] == '\t':
                assert 1 <= step <= 8
            else:
                assert step == 1
            previous = rx
        assert row.cx_to_rx(row.size) == len(row.render)

    @pytest.mark.parametrize("text", ["", "plain", "\tlead", "mid\tdle", "a\t\tb\t", "1234567\t12345678\t"])
    def test_render_untabs_back_to_chars(self, text: str) -> None:
        row = Row(text)
        assert _untab(row) == text.replace('\t', '')

    def test_insert_char_into_empty_row(self) -> None:
        row = Row()
        row.insert_char(0, 'A')
        assert row.chars == "A"
        assert row.render == "A"

    def test_insert_tab_first(self) -> None:
        row = Row()
        row.insert_char(0, '\t')
        assert row.render == " " * 8
        assert row.cx_to_rx(1) == 8

    def test_insert_char_middle(self) -> None:
        row = Row("ac")
        row.insert_char(1, 'b')
        assert row.chars == "abc"

    def test_insert_char_out_of_range_appends(self) -> None:
        row = Row("ab")
        row.insert_char(10, 'c')
        row.insert_char(-1, 'd')
        assert row.chars == "abcd"
        assert row.render == "abcd"

    def test_render_follows_insert(self) -> None:
        row = Row("ab")
        row.insert_char(1, '\t')
        assert row.render == "a" + " " * 7 + "b"


class TestDocument:
    """Tests for the row store."""

    def test_empty(self) -> None:
        doc = Document()
        assert doc.num_rows == 0
        assert doc.row_at(0) is None
        assert doc.row_length(0) == 0

    def test_insert_row_positions(self) -> None:
        doc = Document()
        doc.insert_row(0, "b")
        doc.insert_row(0, "a")
        doc.insert_row(2, "c")
        assert [row.chars for row in doc] == ["a", "b", "c"]

    def test_insert_row_out_of_range(self) -> None:
        doc = Document()
        assert doc.insert_row(3, "x") is None
        assert len(doc) == 0

    def test_insert_row_derives_render(self) -> None:
        doc = Document()
        row = doc.insert_row(0, "\tx")
        assert row is not None
        assert row.render == " " * 8 + "x"

    def test_rows_use_document_tab_stop(self) -> None:
        doc = Document(tab_stop=2)
        doc.append_row("\tx")
        assert doc[0].render == "  x"

    def test_row_length(self) -> None:
        doc = load_lines(["abc", ""])
        assert doc.row_length(0) == 3
        assert doc.row_length(1) == 0
        assert doc.row_length(2) == 0


class TestLoading:
    """Tests for reading files into documents."""

    def test_load_strips_terminators(self, three_line_file: Path) -> None:
        doc = load(three_line_file)
        assert [row.chars for row in doc] == ["first", "second line", "\tthird"]
        assert doc.filename == str(three_line_file)

    def test_load_keeps_filename_as_typed(self, three_line_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(three_line_file.parent)
        assert load("./three.txt").filename == "./three.txt"
        assert load(".//three.txt").filename == ".//three.txt"

    def test_load_keeps_inner_carriage_return(self, tmp_path: Path) -> None:
        path = tmp_path / "cr.txt"
        path.write_bytes(b"a\rb\r\r\n")
        doc = load(path)
        assert [row.chars for row in doc] == ["a\rb"]

    def test_load_without_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "last.txt"
        path.write_bytes(b"one\ntwo")
        assert [row.chars for row in load(path)] == ["one", "two"]

    def test_load_empty_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "blank.txt"
        path.write_bytes(b"\n\nx\n")
        assert [row.chars for row in load(path)] == ["", "", "x"]

    def test_load_replaces_bad_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"caf\xe9\n")
        assert load(path)[0].chars == "caf\ufffd"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TermEditError) as info:
            load(tmp_path / "missing.txt")
        assert info.value.operation == "fopen"
        assert isinstance(info.value.cause, FileNotFoundError)
        assert str(info.value).startswith("fopen: ")

    def test_package_load(self, three_line_file: Path) -> None:
        assert term_edit.load(three_line_file).num_rows == 3


class TestErrors:
    """Tests for the fatal error type."""

    def test_message_like_perror(self) -> None:
        err = TermEditError("read", OSError(5, "Input/output error"))
        assert str(err) == "read: Input/output error"

    def test_without_cause(self) -> None:
        assert str(TermEditError("getWindowSize")) == "getWindowSize"
