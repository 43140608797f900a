#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/links.py
"""Normalization of link targets found in ``href``, ``src`` and ``action``.

A link is trimmed, abbreviated when it is a long ``data:`` URL, cleaned of
embedded line breaks and, when a base URL is configured, resolved against
it. Malformed references that cannot be salvaged raise
:class:`~html2org.exceptions.LinkNormalizationError`.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin, urlsplit

from html2org.constants import OMITTED_DATA_URL
from html2org.exceptions import LinkNormalizationError
from html2org.options import Html2OrgOptions

logger = logging.getLogger(__name__)

_INVALID_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def abbreviate_data_url(link: str) -> str:
    """Replace the payload of a ``data:`` URL by ``(omitted)``.

    Examples
    --------
    >>> abbreviate_data_url("data:image/png;base64,iVBORw0KGgo")
    'data:image/png;(omitted)'
    >>> abbreviate_data_url("data:,hello")
    'data:(omitted)'

    """
    prefix, sep, _ = link.partition(";")
    if not sep:
        return OMITTED_DATA_URL
    return f"{prefix};(omitted)"


def _strip_invalid_escape(link: str) -> str:
    # Only the path and the fragment are checked; the query is kept as written
    before_fragment, hash_sign, _ = link.partition("#")
    path_end = before_fragment.find("?")
    if path_end == -1:
        path_end = len(before_fragment)

    match = _INVALID_ESCAPE_RE.search(link, 0, path_end)
    if match is None and hash_sign:
        match = _INVALID_ESCAPE_RE.search(link, len(before_fragment) + 1)
    if match is None:
        return link
    logger.debug(f"Dropping invalid percent-escape from link {link!r}")
    return link[: match.start()]


def _resolve(base_url: str, link: str) -> str:
    try:
        # urljoin is lenient; split both sides to surface bad hosts and ports
        for part in (base_url, link):
            _ = urlsplit(part).port
        return urljoin(base_url, link)
    except ValueError as e:
        raise LinkNormalizationError(link, original_error=e) from e


def normalize_link(link: str | None, options: Html2OrgOptions) -> str:
    """Turn a raw link attribute into the target written to the output.

    Parameters
    ----------
    link : str or None
        Raw attribute value
    options : Html2OrgOptions
        Conversion options providing ``base_url``, ``show_full_data_url`` and
        ``data_url_max_length``

    Returns
    -------
    str
        The normalized target. Empty when the attribute is missing or blank;
        the bare name for fragment-only links.

    Raises
    ------
    LinkNormalizationError
        If the reference or the base URL cannot be parsed

    Examples
    --------
    >>> opts = Html2OrgOptions(base_url="http://example.com/foo/")
    >>> normalize_link("../", opts)
    'http://example.com/'
    >>> normalize_link("#section-2", opts)
    'section-2'

    """
    link = (link or "").strip()
    if not link:
        return ""

    if link.startswith("#"):
        return link[1:]

    if (
        link[:5].lower() == "data:"
        and not options.show_full_data_url
        and len(link) > options.data_url_max_length
    ):
        return abbreviate_data_url(link)

    link = link.replace("\n", "").replace("\r", "")

    if options.base_url:
        link = _strip_invalid_escape(link)
        return _resolve(options.base_url, link)

    return link
