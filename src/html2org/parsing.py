#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/parsing.py
"""HTML parsing with BeautifulSoup."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, FeatureNotFound

from html2org.constants import DEFAULT_HTML_PARSER, HtmlParser
from html2org.exceptions import DependencyError, ParsingError
from html2org.utils.encoding import strip_bom

logger = logging.getLogger(__name__)

_PARSER_PACKAGES = {"html5lib": "html5lib", "lxml": "lxml", "html.parser": "beautifulsoup4"}


def parse_html(text: str, parser: HtmlParser = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    """Parse HTML text into a BeautifulSoup document.

    Parameters
    ----------
    text : str
        HTML source. A leading byte-order mark is removed.
    parser : {"html5lib", "html.parser", "lxml"}, default "html5lib"
        Tree builder passed to BeautifulSoup

    Returns
    -------
    BeautifulSoup
        The parsed document

    Raises
    ------
    DependencyError
        If the requested tree builder is not installed
    ParsingError
        If the tree builder fails on the input

    """
    logger.debug(f"Parsing HTML with {parser}")
    try:
        return BeautifulSoup(strip_bom(text), parser)
    except FeatureNotFound as e:
        raise DependencyError([_PARSER_PACKAGES.get(parser, parser)], original_error=e) from e
    except Exception as e:
        raise ParsingError(
            f"Failed to parse HTML: {e}", parsing_stage="html_parsing", original_error=e
        ) from e
