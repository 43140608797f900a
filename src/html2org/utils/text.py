#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/utils/text.py
"""Whitespace handling and final cleanup of rendered Org text.

Functions
---------
- collapse_whitespace: Collapse ASCII whitespace runs in HTML text nodes
- flatten: Join all whitespace-separated words with single spaces
- break_long_lines: Split a line segment so that no line exceeds a width
- normalize_output: Final cleanup applied to a finished document
"""

from __future__ import annotations

import re

from html2org.constants import MAX_LINE_LENGTH

# HTML whitespace only, so that non-breaking spaces survive until the final pass
_SPACING_RE = re.compile(r"[ \t\r\n\f]+")
_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")
_BLANK_LINES_RE = re.compile(r"\n{3,}")
_NEWLINE_RUN_RE = re.compile(r"\n+")


def collapse_whitespace(text: str) -> str:
    """Collapse each run of HTML whitespace to a single space.

    Parameters
    ----------
    text : str
        Raw text node content

    Returns
    -------
    str
        Text with whitespace runs replaced by one space

    Examples
    --------
    >>> collapse_whitespace("a \\n\\t b")
    'a b'

    """
    return _SPACING_RE.sub(" ", text)


def flatten(text: str) -> str:
    """Join the words of ``text`` with single spaces, dropping line breaks."""
    return " ".join(text.split())


def collapse_newlines(text: str) -> str:
    """Replace runs of newlines by one newline and drop trailing spaces on each line."""
    return _NEWLINE_RUN_RE.sub("\n", _TRAILING_SPACE_RE.sub("\n", text))


def break_long_lines(segment: str, line_length: int, max_length: int = MAX_LINE_LENGTH) -> list[str]:
    """Split a newline-free segment into pieces that fit within ``max_length``.

    Breaks happen at the last whitespace before the limit. A word longer than
    the limit is kept whole and broken at the first whitespace after it.
    Whitespace at a break point is consumed.

    Parameters
    ----------
    segment : str
        Text to emit, without embedded newlines
    line_length : int
        Number of characters already on the current line
    max_length : int, default 74
        Maximum line width

    Returns
    -------
    list[str]
        Pieces to write in order. Every piece except the last ends with a
        newline; a leading ``"\\n"`` piece is produced when the current line is
        already full.

    """
    pieces: list[str] = []
    existing = line_length
    if existing >= max_length:
        pieces.append("\n")
        existing = 0

    rest = segment
    while len(rest) + existing > max_length:
        i = max_length - existing
        while i >= 0 and not rest[i].isspace():
            i -= 1
        if i == -1:
            i = max_length - existing
            while i < len(rest) and not rest[i].isspace():
                i += 1
        pieces.append(rest[:i] + "\n")
        while i < len(rest) and rest[i].isspace():
            i += 1
        rest = rest[i:]
        existing = 0

    if rest:
        pieces.append(rest)
    return pieces


def normalize_output(text: str) -> str:
    """Clean up a fully rendered document.

    Trailing spaces and tabs are removed from every line, three or more
    consecutive newlines become one blank line, non-breaking spaces become
    ordinary spaces and the document edges are trimmed.

    Parameters
    ----------
    text : str
        Raw renderer output

    Returns
    -------
    str
        Normalized Org text

    """
    text = _TRAILING_SPACE_RE.sub("\n", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    text = text.replace("\xa0", " ")
    return text.strip()
