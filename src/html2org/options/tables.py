#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/options/tables.py
"""Configuration options for pretty (text-art) tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from html2org.constants import (
    DEFAULT_TABLE_ALIGNMENT,
    DEFAULT_TABLE_AUTO_FORMAT_HEADER,
    DEFAULT_TABLE_AUTO_WRAP_TEXT,
    DEFAULT_TABLE_BORDERS,
    DEFAULT_TABLE_CENTER_SEPARATOR,
    DEFAULT_TABLE_COL_WIDTH,
    DEFAULT_TABLE_COLUMN_SEPARATOR,
    DEFAULT_TABLE_FOOTER_ALIGNMENT,
    DEFAULT_TABLE_HEADER_ALIGNMENT,
    DEFAULT_TABLE_ORG_FORMAT,
    DEFAULT_TABLE_ROW_LINE,
    DEFAULT_TABLE_ROW_SEPARATOR,
    TableAlignment,
)
from html2org.options.base import CloneFrozenMixin

_ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class PrettyTablesOptions(CloneFrozenMixin):
    """Style of tables rendered when ``pretty_tables`` is enabled.

    Parameters
    ----------
    auto_format_header : bool, default True
        Upper-case header and footer cells and replace underscores with spaces.
    auto_wrap_text : bool, default True
        Wrap cell text that exceeds ``col_width``.
    col_width : int or None, default None
        Maximum width of a column in characters. ``None`` means unbounded.
    column_separator : str, default "|"
        Character drawn between columns and at the table edges.
    row_separator : str, default "-"
        Character drawn along horizontal rules.
    center_separator : str, default "+"
        Character drawn where rules and column separators cross.
    header_alignment : {"left", "center", "right"}, default "center"
        Alignment of header cells.
    footer_alignment : {"left", "center", "right"}, default "center"
        Alignment of footer cells.
    alignment : {"left", "center", "right"}, default "left"
        Alignment of body cells.
    row_line : bool, default False
        Draw a rule between every body row.
    borders : bool, default True
        Draw the outer table border.
    org_format : bool, default True
        Post-process the table into Org pipe-table markup.

    """

    auto_format_header: bool = field(
        default=DEFAULT_TABLE_AUTO_FORMAT_HEADER,
        metadata={
            "help": "Upper-case table header and footer cells",
            "cli_name": "no-auto-format-header",
            "cli_negated_help": "Keep table header and footer cells as written",
        },
    )
    auto_wrap_text: bool = field(
        default=DEFAULT_TABLE_AUTO_WRAP_TEXT,
        metadata={
            "help": "Wrap table cells wider than the column width",
            "cli_name": "no-table-wrap",
            "cli_negated_help": "Do not wrap table cells that exceed the column width",
        },
    )
    col_width: int | None = field(
        default=DEFAULT_TABLE_COL_WIDTH,
        metadata={"help": "Maximum table column width in characters", "cli_name": "table-col-width", "type": int},
    )
    column_separator: str = field(
        default=DEFAULT_TABLE_COLUMN_SEPARATOR,
        metadata={
            "help": "Character used between table columns",
            "cli_name": "table-column-separator",
            "cli_metavar": "CHAR",
        },
    )
    row_separator: str = field(
        default=DEFAULT_TABLE_ROW_SEPARATOR,
        metadata={
            "help": "Character used for horizontal table rules",
            "cli_name": "table-row-separator",
            "cli_metavar": "CHAR",
        },
    )
    center_separator: str = field(
        default=DEFAULT_TABLE_CENTER_SEPARATOR,
        metadata={
            "help": "Character used where table rules cross",
            "cli_name": "table-center-separator",
            "cli_metavar": "CHAR",
        },
    )
    header_alignment: TableAlignment = field(
        default=DEFAULT_TABLE_HEADER_ALIGNMENT,
        metadata={"help": "Alignment of header cells", "cli_name": "table-header-alignment", "choices": _ALIGNMENTS},
    )
    footer_alignment: TableAlignment = field(
        default=DEFAULT_TABLE_FOOTER_ALIGNMENT,
        metadata={"help": "Alignment of footer cells", "cli_name": "table-footer-alignment", "choices": _ALIGNMENTS},
    )
    alignment: TableAlignment = field(
        default=DEFAULT_TABLE_ALIGNMENT,
        metadata={"help": "Alignment of body cells", "cli_name": "table-alignment", "choices": _ALIGNMENTS},
    )
    row_line: bool = field(
        default=DEFAULT_TABLE_ROW_LINE,
        metadata={"help": "Draw a rule between table rows", "cli_name": "table-row-lines"},
    )
    borders: bool = field(
        default=DEFAULT_TABLE_BORDERS,
        metadata={
            "help": "Draw the outer table border",
            "cli_name": "no-table-borders",
            "cli_negated_help": "Omit the outer table border",
        },
    )
    org_format: bool = field(
        default=DEFAULT_TABLE_ORG_FORMAT,
        metadata={
            "help": "Emit Org pipe tables instead of raw text-art",
            "cli_name": "no-org-tables",
            "cli_negated_help": "Emit raw text-art tables instead of Org pipe tables",
        },
    )

    def __post_init__(self) -> None:
        """Validate separators, alignments and column width.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        for name in ("column_separator", "row_separator", "center_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        for name in ("header_alignment", "footer_alignment", "alignment"):
            value = getattr(self, name)
            if value not in _ALIGNMENTS:
                raise ValueError(f"{name} must be one of {_ALIGNMENTS}, got {value!r}")
        if self.col_width is not None and self.col_width <= 0:
            raise ValueError(f"col_width must be positive, got {self.col_width}")
