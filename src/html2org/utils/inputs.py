#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/utils/inputs.py
"""Utilities for uniform input handling.

Functions
---------
- is_path_like: Check if input is path-like (string or Path object)
- is_file_like: Check if input is a file-like object
- is_binary_content: Check if raw bytes look like a binary file
- looks_like_html: Sniff whether a document is HTML
- wrap_plain_text: Escape non-HTML text into a ``<pre>`` block
"""

from __future__ import annotations

import html
import mimetypes
import re
from pathlib import Path
from typing import IO, Any, Union

from html2org.constants import HTML_EXTENSIONS, HTML_MAGIC_BYTES, HTML_MIME_TYPES

PathLike = Union[str, Path]
InputType = Union[PathLike, IO[str], IO[bytes], bytes]

_SNIFF_SIZE = 1024
_TAG_RE = re.compile(rb"</?[a-zA-Z][a-zA-Z0-9-]*(\s[^<>]*)?/?>")


def is_path_like(obj: Any) -> bool:
    """Check if an object is path-like (string or pathlib.Path).

    Examples
    --------
    >>> is_path_like("page.html")
    True
    >>> is_path_like(b"<p>x</p>")
    False

    """
    return isinstance(obj, (str, Path))


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has a callable ``read``)."""
    return hasattr(obj, "read") and callable(obj.read)


def is_binary_content(data: bytes) -> bool:
    """Return True when the leading bytes contain a NUL byte.

    UTF-16 and UTF-32 documents start with a byte-order mark and are not
    treated as binary.
    """
    head = data[:_SNIFF_SIZE]
    if head.startswith((b"\xff\xfe", b"\xfe\xff")):
        return False
    return b"\x00" in head


def looks_like_html(data: bytes, filename: str | None = None) -> bool:
    """Decide whether a document should be parsed as HTML.

    The filename extension and its guessed MIME type are checked first. When
    they are missing or inconclusive, the leading bytes are searched for an
    HTML doctype, an ``<html>`` element or any tag.

    Parameters
    ----------
    data : bytes
        Raw document bytes
    filename : str, optional
        Name of the file the bytes came from

    Returns
    -------
    bool
        True if the content should be treated as HTML

    """
    if filename:
        suffix = Path(filename).suffix.lower()
        if suffix in HTML_EXTENSIONS:
            return True
        mime_type, _ = mimetypes.guess_type(filename)
        if mime_type in HTML_MIME_TYPES:
            return True

    head = data[:_SNIFF_SIZE].lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    if head.startswith(HTML_MAGIC_BYTES):
        return True
    return _TAG_RE.search(head) is not None


def wrap_plain_text(text: str) -> str:
    """Escape plain text into a ``<pre>`` element so it is kept verbatim."""
    return f"<pre>{html.escape(text, quote=False)}</pre>"
