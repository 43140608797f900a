"""Unit tests for pretty table collection and layout."""

import pytest

from html2org.options import PrettyTablesOptions
from html2org.tables import TableContext, render_table


def _table(header=(), rows=(), footer=()) -> TableContext:
    ctx = TableContext()
    for cell in header:
        ctx.add_header_cell(cell)
    for row in rows:
        ctx.start_row()
        for cell in row:
            ctx.add_data_cell(cell)
        ctx.end_row()
    ctx.in_footer = True
    for cell in footer:
        ctx.add_data_cell(cell)
    return ctx


@pytest.mark.unit
class TestTableContext:
    """Cell collection."""

    def test_cells_land_in_current_row(self):
        ctx = _table(rows=[["a", "b"], ["c"]])
        assert ctx.body == [["a", "b"], ["c"]]
        assert ctx.row == 2

    def test_footer_mode(self):
        ctx = _table(rows=[["a"]], footer=["total"])
        assert ctx.footer == ["total"]
        assert ctx.body == [["a"]]

    def test_cell_outside_row_gets_a_row(self):
        ctx = TableContext()
        ctx.add_data_cell("orphan")
        assert ctx.body == [["orphan"]]


@pytest.mark.unit
class TestRenderTable:
    """Layout with rich."""

    def test_empty_table(self):
        assert render_table(TableContext(), PrettyTablesOptions()) == ""

    def test_org_pipe_table(self):
        ctx = _table(header=["Name", "Age"], rows=[["Alice", "30"], ["Bob", "4"]])
        lines = render_table(ctx, PrettyTablesOptions()).split("\n")
        assert lines == [
            "| NAME  | AGE |",
            "|-------+-----|",
            "| Alice | 30  |",
            "| Bob   | 4   |",
        ]

    def test_raw_text_art(self):
        ctx = _table(rows=[["x"]])
        assert render_table(ctx, PrettyTablesOptions(org_format=False)) == "+---+\n| x |\n+---+"

    def test_custom_separators(self):
        options = PrettyTablesOptions(column_separator="!", row_separator="=", center_separator="*", org_format=False)
        assert render_table(_table(rows=[["x"]]), options) == "*===*\n! x !\n*===*"

    def test_empty_rows_are_dropped(self):
        ctx = _table(rows=[[], ["x"], []])
        assert render_table(ctx, PrettyTablesOptions()) == "| x |"

    def test_short_rows_are_padded(self):
        ctx = _table(rows=[["a", "b"], ["c"]])
        lines = render_table(ctx, PrettyTablesOptions()).split("\n")
        assert lines == ["| a | b |", "| c |   |"]

    def test_header_auto_format(self):
        ctx = _table(header=["first_name"], rows=[["Ada"]])
        assert render_table(ctx, PrettyTablesOptions()).startswith("| FIRST NAME |")

    def test_header_auto_format_disabled(self):
        ctx = _table(header=["first_name"], rows=[["Ada"]])
        assert render_table(ctx, PrettyTablesOptions(auto_format_header=False)).startswith("| first_name |")

    def test_footer(self):
        ctx = _table(header=["item"], rows=[["a"]], footer=["total"])
        lines = render_table(ctx, PrettyTablesOptions()).split("\n")
        assert lines[-1] == "| TOTAL |"
        assert lines.count("|-------|") == 2

    def test_row_lines(self):
        ctx = _table(rows=[["a"], ["b"]])
        assert render_table(ctx, PrettyTablesOptions(row_line=True)) == "| a |\n|---|\n| b |"

    def test_column_width_wraps(self):
        ctx = _table(rows=[["aaaa bbbb"]])
        assert render_table(ctx, PrettyTablesOptions(col_width=4)) == "| aaaa |\n| bbbb |"

    def test_right_alignment(self):
        ctx = _table(rows=[["long"], ["x"]])
        lines = render_table(ctx, PrettyTablesOptions(alignment="right")).split("\n")
        assert lines[1] == "|    x |"


@pytest.mark.unit
class TestPrettyTableRendering:
    """Tables in documents with pretty tables enabled."""

    def test_document_table(self, convert):
        html = "<p>Before</p><table><tr><th>a</th></tr><tr><td>1</td></tr></table><p>After</p>"
        assert convert(html, pretty_tables=True) == "Before\n\n| A |\n|---|\n| 1 |\n\nAfter"

    def test_caption(self, convert):
        html = "<table><caption>Results</caption><tr><td>x</td></tr></table>"
        assert convert(html, pretty_tables=True) == "#+CAPTION: Results\n| x |"

    def test_cell_markup(self, convert):
        html = '<table><tr><td><b>bold</b> and <a href="http://x.org/">link</a></td></tr></table>'
        assert convert(html, pretty_tables=True) == "| *bold* and [[http://x.org/][link]] |"

    def test_block_children_of_cell(self, convert):
        html = "<table><tr><td><p>one</p><p>two</p></td></tr></table>"
        assert convert(html, pretty_tables=True) == "| one |\n| two |"

    def test_tfoot(self, convert):
        html = (
            "<table><thead><tr><th>item</th></tr></thead>"
            "<tbody><tr><td>a</td></tr></tbody>"
            "<tfoot><tr><td>total</td></tr></tfoot></table>"
        )
        result = convert(html, pretty_tables=True)
        assert result.split("\n")[-1] == "| TOTAL |"

    def test_nested_table_rows_stay_inside(self, convert):
        html = "<table><tr><td>outer<table><tr><td>inner</td></tr></table></td><td>second</td></tr></table>"
        result = convert(html, pretty_tables=True)
        assert "second" in result
        assert "inner" in result
        assert result.count("| outer") == 1

    def test_sibling_tables_stay_separate(self, convert):
        html = (
            "<table><tr><th>A</th></tr><tr><td>1</td></tr></table>"
            "<table><tr><th>B</th></tr><tr><td>2</td></tr>"
            "<tfoot><tr><td>f</td></tr></tfoot></table>"
        )
        assert convert(html, pretty_tables=True) == (
            "| A |\n|---|\n| 1 |\n\n"
            "| B |\n|---|\n| 2 |\n|---|\n| F |"
        )
