#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/utils/encoding.py
"""Character encoding detection and byte-order-mark handling.

HTML handed to the converter as bytes is decoded with BeautifulSoup's
``UnicodeDammit``, which honours byte-order marks, ``<meta charset>``
declarations and (when installed) charset detection libraries.
"""

from __future__ import annotations

import logging

from bs4.dammit import UnicodeDammit

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove a leading byte-order mark from decoded text.

    Parameters
    ----------
    text : str
        Decoded text

    Returns
    -------
    str
        Text without a leading U+FEFF

    """
    if text.startswith(BOM):
        logger.debug("Stripping byte-order mark from input")
        return text[len(BOM) :]
    return text


def decode_html_bytes(data: bytes, fallback_encodings: list[str] | None = None) -> str:
    """Decode raw HTML bytes to text.

    A byte-order mark decides the encoding when present. Otherwise
    ``fallback_encodings`` are tried, then the charset declared by the
    document, then BeautifulSoup's own guesses ending with utf-8 and
    windows-1252.

    Parameters
    ----------
    data : bytes
        Raw document bytes
    fallback_encodings : list[str] | None, default None
        Encodings to try before the declared charset

    Returns
    -------
    str
        Decoded text with any byte-order mark removed

    Examples
    --------
    >>> decode_html_bytes(b"\\xef\\xbb\\xbf<p>caf\\xc3\\xa9</p>")
    '<p>café</p>'

    """
    dammit = UnicodeDammit(data, user_encodings=fallback_encodings or [], is_html=True)
    if dammit.unicode_markup is None:
        logger.warning("Encoding detection failed, using utf-8 with error replacement")
        return strip_bom(data.decode("utf-8", errors="replace"))

    logger.debug(f"Decoded input as {dammit.original_encoding}")
    return strip_bom(dammit.unicode_markup)
