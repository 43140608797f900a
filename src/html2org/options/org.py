#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/options/org.py
"""Configuration options for HTML to Org-mode conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

from html2org.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_BREAK_LONG_LINES,
    DEFAULT_DATA_URL_MAX_LENGTH,
    DEFAULT_HTML_PARSER,
    DEFAULT_OMIT_LINKS,
    DEFAULT_PRETTY_TABLES,
    DEFAULT_SHOW_FULL_DATA_URL,
    DEFAULT_SHOW_INTERNAL_ANCHORS,
    DEFAULT_SHOW_NOSCRIPT,
    HtmlParser,
)
from html2org.options.base import CloneFrozenMixin
from html2org.options.tables import PrettyTablesOptions

_HTML_PARSERS = ("html.parser", "html5lib", "lxml")


@dataclass(frozen=True)
class Html2OrgOptions(CloneFrozenMixin):
    """Configuration options for converting an HTML tree to Org-mode text.

    Options are immutable for the duration of a conversion. Use
    :meth:`create_updated` to derive a modified copy.

    Parameters
    ----------
    pretty_tables : bool, default False
        Render tables as Org pipe tables. When False, cells are emitted as
        space separated text, one row per line.
    pretty_tables_options : PrettyTablesOptions
        Style of pretty tables.
    omit_links : bool, default False
        Drop link targets from ``<a>`` elements and keep only their text.
    break_long_lines : bool, default False
        Wrap lines longer than 74 characters inside quote blocks.
    base_url : str or None, default None
        Base URL used to resolve relative link targets and form actions.
    show_noscript : bool, default False
        Render the content of ``<noscript>`` elements.
    show_internal_anchors : bool, default False
        Emit ``<<name>>`` targets for elements referenced by in-page links.
    show_full_data_url : bool, default False
        Keep ``data:`` URLs intact instead of abbreviating long ones.
    data_url_max_length : int, default 100
        Length above which ``data:`` URLs are abbreviated.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html5lib"
        BeautifulSoup tree builder used when parsing text input.

    Examples
    --------
    >>> options = Html2OrgOptions(base_url="https://example.com/")
    >>> options.create_updated(omit_links=True).omit_links
    True

    """

    pretty_tables: bool = field(
        default=DEFAULT_PRETTY_TABLES,
        metadata={"help": "Render tables as Org pipe tables", "importance": "core"},
    )
    pretty_tables_options: PrettyTablesOptions = field(
        default_factory=PrettyTablesOptions,
        metadata={"help": "Style of pretty tables", "cli_flatten": True},
    )
    omit_links: bool = field(
        default=DEFAULT_OMIT_LINKS,
        metadata={"help": "Emit link text only, dropping link targets", "importance": "core"},
    )
    break_long_lines: bool = field(
        default=DEFAULT_BREAK_LONG_LINES,
        metadata={"help": "Wrap long lines inside quote blocks", "importance": "advanced"},
    )
    base_url: str | None = field(
        default=DEFAULT_BASE_URL,
        metadata={
            "help": "Base URL for resolving relative links",
            "cli_name": "base-url",
            "cli_short": "-u",
            "cli_metavar": "URL",
            "importance": "core",
        },
    )
    show_noscript: bool = field(
        default=DEFAULT_SHOW_NOSCRIPT,
        metadata={"help": "Render the content of <noscript> elements", "importance": "advanced"},
    )
    show_internal_anchors: bool = field(
        default=DEFAULT_SHOW_INTERNAL_ANCHORS,
        metadata={
            "help": "Emit <<name>> targets for in-page link destinations",
            "cli_name": "internal-anchors",
            "importance": "advanced",
        },
    )
    show_full_data_url: bool = field(
        default=DEFAULT_SHOW_FULL_DATA_URL,
        metadata={"help": "Do not abbreviate long data: URLs", "cli_name": "full-data-urls", "importance": "advanced"},
    )
    data_url_max_length: int = field(
        default=DEFAULT_DATA_URL_MAX_LENGTH,
        metadata={"help": "Length above which data: URLs are abbreviated", "type": int, "importance": "advanced"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser to use: 'html5lib' (standards-compliant, matches browser behavior), "
                "'html.parser' (built-in, fast), 'lxml' (fast, requires C library)"
            ),
            "choices": _HTML_PARSERS,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.data_url_max_length < 0:
            raise ValueError(f"data_url_max_length must be non-negative, got {self.data_url_max_length}")
        if self.html_parser not in _HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {_HTML_PARSERS}, got {self.html_parser!r}")
        if not isinstance(self.pretty_tables_options, PrettyTablesOptions):
            raise ValueError(
                "pretty_tables_options must be a PrettyTablesOptions instance, "
                f"got {type(self.pretty_tables_options).__name__}"
            )
