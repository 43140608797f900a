#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/constants.py
"""Constants and default values for the html2org library.

Constants are organized by category:
1. Type Definitions - Literal types used by the options classes
2. Rendering Defaults - Default values of the render options
3. Org Markup - Directive strings and element tables used by the renderer
4. Format Detection - Values used to sniff HTML input
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]
TableAlignment = Literal["left", "center", "right"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_PRETTY_TABLES = False
DEFAULT_OMIT_LINKS = False
DEFAULT_BREAK_LONG_LINES = False
DEFAULT_BASE_URL: str | None = None
DEFAULT_SHOW_NOSCRIPT = False
DEFAULT_SHOW_INTERNAL_ANCHORS = False
DEFAULT_SHOW_FULL_DATA_URL = False
DEFAULT_DATA_URL_MAX_LENGTH = 100
DEFAULT_HTML_PARSER: HtmlParser = "html5lib"

# Pretty table defaults
DEFAULT_TABLE_AUTO_FORMAT_HEADER = True
DEFAULT_TABLE_AUTO_WRAP_TEXT = True
DEFAULT_TABLE_COL_WIDTH: int | None = None
DEFAULT_TABLE_COLUMN_SEPARATOR = "|"
DEFAULT_TABLE_ROW_SEPARATOR = "-"
DEFAULT_TABLE_CENTER_SEPARATOR = "+"
DEFAULT_TABLE_HEADER_ALIGNMENT: TableAlignment = "center"
DEFAULT_TABLE_FOOTER_ALIGNMENT: TableAlignment = "center"
DEFAULT_TABLE_ALIGNMENT: TableAlignment = "left"
DEFAULT_TABLE_ROW_LINE = False
DEFAULT_TABLE_BORDERS = True
DEFAULT_TABLE_ORG_FORMAT = True

# Wrapping width used inside quote blocks when break_long_lines is enabled
MAX_LINE_LENGTH = 74

# =============================================================================
# Org Markup
# =============================================================================

FORM_ID_PREFIX = "org-form-id--"
DEFAULT_FORM_METHOD = "get"
LINK_PLACEHOLDER_TEXT = "Link"
LIST_BULLET = "- "
HORIZONTAL_RULE = "-----"
OMITTED_DATA_URL = "data:(omitted)"

# Elements whose whole subtree is never rendered
SKIPPED_ELEMENTS = frozenset({"style", "script", "template", "meta", "link", "base"})

# Elements whose layout implies line breaks around them
BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "dialog",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

# Generic block containers rendered like <div>
DIV_LIKE_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "details",
        "dialog",
        "div",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "header",
        "hgroup",
        "main",
        "nav",
        "section",
        "summary",
    }
)

# Elements rendered as blank-line separated blocks
PARAGRAPH_ELEMENTS = frozenset({"p", "ul", "ol", "dl"})

INLINE_CODE_ELEMENTS = frozenset({"code", "tt", "kbd", "samp", "var"})

EMPHASIS_DELIMITERS: dict[str, str] = {
    "b": "*",
    "strong": "*",
    "i": "/",
    "em": "/",
    "u": "_",
    "ins": "_",
    "s": "+",
    "del": "+",
    "strike": "+",
}

HEADING_LEVELS: dict[str, int] = {f"h{level}": level for level in range(1, 7)}

# Input types rendered as #+begin_input blocks, "unknown" stands for a missing type
RENDERED_INPUT_TYPES = frozenset({"text", "number", "password", "unknown"})

# =============================================================================
# Format Detection
# =============================================================================

HTML_EXTENSIONS = frozenset({".html", ".htm", ".xhtml", ".shtml", ".xht"})
HTML_MIME_TYPES = frozenset({"text/html", "application/xhtml+xml"})
HTML_MAGIC_BYTES = (b"<!doctype html", b"<html", b"<?xml")

# Environment variable prefix for CLI defaults
ENV_PREFIX = "HTML2ORG_"
