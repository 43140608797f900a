#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/api.py
"""Public conversion API.

Examples
--------
Convert an HTML string:

    >>> from html2org import from_string
    >>> from_string('<h1>Title</h1><p>Content with <b>bold</b> text.</p>')
    '* Title\\n\\nContent with *bold* text.'

Convert a file with options:

    >>> from html2org import Html2OrgOptions, html_to_org
    >>> options = Html2OrgOptions(pretty_tables=True, base_url="https://example.com/")
    >>> org = html_to_org("page.html", options=options)  # doctest: +SKIP

"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Union

from bs4 import BeautifulSoup
from bs4.element import PageElement

from html2org.anchors import collect_fragment_names
from html2org.exceptions import (
    FileAccessError,
    FileNotFoundError,
    Html2OrgError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2org.options import Html2OrgOptions
from html2org.parsing import parse_html
from html2org.renderer import render_node
from html2org.utils.encoding import decode_html_bytes, strip_bom
from html2org.utils.inputs import is_file_like, is_path_like

logger = logging.getLogger(__name__)

HtmlInput = Union[str, Path, IO[str], IO[bytes], bytes]


class HtmlToOrgConverter:
    """Convert parsed or raw HTML into Org-mode text.

    A converter holds only immutable options, so one instance may be used
    for any number of conversions, including concurrently.

    Parameters
    ----------
    options : Html2OrgOptions or None, default None
        Conversion options. If None, uses default settings.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`Html2OrgOptions`

    """

    def __init__(self, options: Html2OrgOptions | None = None):
        """Initialize the converter with options."""
        if options is None:
            options = Html2OrgOptions()
        if not isinstance(options, Html2OrgOptions):
            raise InvalidOptionsError(Html2OrgOptions, type(options))
        self.options = options

    def parse(self, html: str) -> BeautifulSoup:
        """Parse HTML text with the configured tree builder."""
        return parse_html(html, self.options.html_parser)

    def convert(self, html: str) -> str:
        """Parse and convert an HTML string."""
        return self.convert_node(self.parse(html))

    def convert_node(self, node: PageElement) -> str:
        """Convert an already parsed document or element.

        Parameters
        ----------
        node : PageElement
            A BeautifulSoup document, tag or string

        Returns
        -------
        str
            Org-mode text

        Raises
        ------
        LinkNormalizationError
            If a link target cannot be normalized; no partial output is returned
        RenderingError
            If rendering fails for any other reason

        """
        anchors = collect_fragment_names(node)
        try:
            return render_node(node, self.options, anchors)
        except Html2OrgError:
            raise
        except RecursionError as e:
            raise RenderingError(
                "Document is nested too deeply to render", rendering_stage="traversal", original_error=e
            ) from e
        except Exception as e:
            raise RenderingError(
                f"Failed to render HTML to Org: {e}", rendering_stage="traversal", original_error=e
            ) from e


def from_html_node(node: PageElement, options: Html2OrgOptions | None = None) -> str:
    """Render a pre-parsed BeautifulSoup node to Org-mode text."""
    return HtmlToOrgConverter(options).convert_node(node)


def from_string(text: str, options: Html2OrgOptions | None = None) -> str:
    """Parse HTML from a string and render it to Org-mode text.

    A leading byte-order mark is ignored.
    """
    return HtmlToOrgConverter(options).convert(strip_bom(text))


def from_bytes(data: bytes, options: Html2OrgOptions | None = None) -> str:
    """Decode HTML bytes, detecting their encoding, and render them to Org-mode text."""
    return from_string(decode_html_bytes(data), options)


def from_reader(stream: IO[str] | IO[bytes], options: Html2OrgOptions | None = None) -> str:
    """Read HTML from a text or binary file object and render it to Org-mode text.

    Raises
    ------
    ParsingError
        If the stream cannot be read

    """
    try:
        content = stream.read()
    except Exception as e:
        raise ParsingError(f"Failed to read HTML input: {e}", parsing_stage="input_reading", original_error=e) from e

    if isinstance(content, bytes):
        return from_bytes(content, options)
    return from_string(content, options)


def _read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(path, original_error=e) from e


def html_to_org(input_data: HtmlInput, options: Html2OrgOptions | None = None) -> str:
    """Convert HTML to Org-mode text.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes or file-like object
        HTML content to convert. Can be:
        - String containing HTML content directly
        - String path to an existing HTML file
        - pathlib.Path object pointing to an HTML file
        - Raw bytes; the encoding is detected
        - File-like object opened in text or binary mode
    options : Html2OrgOptions or None, default None
        Configuration options. If None, uses default settings.

    Returns
    -------
    str
        Org-mode representation of the document

    Raises
    ------
    FileNotFoundError
        If a ``Path`` does not exist
    FileAccessError
        If a file cannot be read
    ValidationError
        If the input type is not supported
    ParsingError
        If the input cannot be read or parsed
    RenderingError
        If rendering fails, including malformed link targets

    Examples
    --------
    >>> html_to_org("<ul><li>one</li><li>two</li></ul>")
    '- one\\n- two'

    """
    if isinstance(input_data, Path):
        if not input_data.exists():
            raise FileNotFoundError(str(input_data))
        return from_bytes(_read_file(str(input_data)), options)

    if isinstance(input_data, str):
        if is_path_like(input_data) and "<" not in input_data and os.path.isfile(input_data):
            logger.debug(f"Reading HTML from file {input_data}")
            return from_bytes(_read_file(input_data), options)
        return from_string(input_data, options)

    if isinstance(input_data, (bytes, bytearray)):
        return from_bytes(bytes(input_data), options)

    if is_file_like(input_data):
        return from_reader(input_data, options)

    raise ValidationError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )
