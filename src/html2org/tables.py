#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/tables.py
"""Pretty table support.

While a ``<table>`` is rendered in pretty mode, cell text is collected into a
:class:`TableContext`. When the table closes, :func:`render_table` lays the
collected matrix out with ``rich`` using a box style assembled from the
configured separator characters, then optionally rewrites the result into
Org pipe-table markup::

    |  HEADER 1   |  HEADER 2   |
    |-------------+-------------|
    | Row 1 Col 1 | Row 1 Col 2 |
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field

from rich.box import Box
from rich.console import Console
from rich.table import Column, Table
from rich.text import Text

from html2org.options import PrettyTablesOptions

logger = logging.getLogger(__name__)


@dataclass
class TableContext:
    """Cells collected for one table.

    Parameters
    ----------
    header : list[str]
        Text of ``<th>`` cells in document order
    body : list[list[str]]
        One list per ``<tr>``; rows holding only header or footer cells stay empty
    footer : list[str]
        Text of ``<td>`` cells inside ``<tfoot>``
    caption : str
        Text of the ``<caption>`` element, if any
    row : int
        Index of the body row receiving ``<td>`` cells
    in_footer : bool
        Whether rendering is inside ``<tfoot>``

    """

    header: list[str] = field(default_factory=list)
    body: list[list[str]] = field(default_factory=list)
    footer: list[str] = field(default_factory=list)
    caption: str = ""
    row: int = 0
    in_footer: bool = False

    def start_row(self) -> None:
        """Open a new body row."""
        self.body.append([])

    def end_row(self) -> None:
        """Advance the cursor past the current row."""
        self.row += 1

    def add_header_cell(self, text: str) -> None:
        """Append a header cell."""
        self.header.append(text)

    def add_data_cell(self, text: str) -> None:
        """Append a ``<td>`` cell to the footer or to the current body row."""
        if self.in_footer:
            self.footer.append(text)
            return
        if self.row >= len(self.body):
            # <td> outside any <tr>
            self.body.extend([] for _ in range(self.row - len(self.body) + 1))
        self.body[self.row].append(text)


def _build_box(options: PrettyTablesOptions) -> Box:
    c = options.center_separator
    r = options.row_separator
    v = options.column_separator
    rule = f"{c}{r}{c}{c}"
    cells = f"{v} {v}{v}"
    box_lines = "\n".join([rule, cells, rule, cells, rule, rule, cells, rule]) + "\n"
    return Box(box_lines, ascii=box_lines.isascii())


def _format_header(text: str) -> str:
    formatted = text.replace("_", " ").strip().upper()
    return formatted or (" " if text else "")


def _to_org_format(rendered: str, options: PrettyTablesOptions) -> str:
    center = options.center_separator
    border_chars = {center, options.row_separator}

    def is_rule(line: str) -> bool:
        return center in line and set(line) <= border_chars

    lines = rendered.split("\n")
    if lines and is_rule(lines[-1]):
        lines.pop()
    if lines and is_rule(lines[0]):
        lines.pop(0)

    column = options.column_separator
    fixed = []
    for line in lines:
        if line.startswith(center):
            line = column + line[len(center) :]
        if line.endswith(center):
            line = line[: -len(center)] + column
        fixed.append(line)
    return "\n".join(fixed)


def render_table(table_ctx: TableContext, options: PrettyTablesOptions) -> str:
    """Lay out collected table cells as text.

    Parameters
    ----------
    table_ctx : TableContext
        Collected header, body and footer cells
    options : PrettyTablesOptions
        Separator characters, alignments and layout switches

    Returns
    -------
    str
        The rendered table without a trailing newline, or an empty string
        when the table has no cells at all

    """
    rows = [row for row in table_ctx.body if row]
    header = list(table_ctx.header)
    footer = list(table_ctx.footer)
    n_cols = max([len(header), len(footer), *(len(row) for row in rows)])
    if n_cols == 0:
        return ""

    if options.auto_format_header:
        header = [_format_header(cell) for cell in header]
        footer = [_format_header(cell) for cell in footer]

    def pad(cells: list[str]) -> list[str]:
        return cells + [""] * (n_cols - len(cells))

    header_cells = pad(header)
    footer_cells = pad(footer)

    columns = [
        Column(
            header=Text(header_cells[i], justify=options.header_alignment),
            footer=Text(footer_cells[i], justify=options.footer_alignment),
            justify=options.alignment,
            max_width=options.col_width,
            no_wrap=not options.auto_wrap_text,
            overflow="fold",
        )
        for i in range(n_cols)
    ]
    table = Table(
        *columns,
        box=_build_box(options),
        show_header=bool(header),
        show_footer=bool(footer),
        show_edge=options.borders,
        show_lines=options.row_line,
        padding=(0, 1),
        expand=False,
        header_style="",
        footer_style="",
    )
    for row in rows:
        table.add_row(*(Text(cell, justify=options.alignment) for cell in pad(row)))

    console = Console(
        file=io.StringIO(),
        width=1 << 16,
        color_system=None,
        markup=False,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    with console.capture() as capture:
        console.print(table)
    rendered = capture.get().rstrip("\n")
    logger.debug(f"Rendered table with {n_cols} column(s) and {len(rows)} body row(s)")

    if options.org_format:
        rendered = _to_org_format(rendered, options)
    return rendered
