#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/anchors.py
"""Collection of in-page link targets.

Before rendering, the whole document is scanned once for anchors whose
``href`` is a bare fragment (``#name``). The resulting names decide which
elements get an Org ``<<name>>`` target when internal anchors are enabled.
"""

from __future__ import annotations

import logging

from bs4 import Tag
from bs4.element import PageElement

logger = logging.getLogger(__name__)


def collect_fragment_names(root: PageElement) -> frozenset[str]:
    """Return the fragment names referenced by ``<a href="#name">`` links.

    Every descendant of ``root`` is visited, including subtrees that are
    never rendered such as ``<head>``, ``<script>`` and ``<style>``.

    Parameters
    ----------
    root : PageElement
        Document or element to scan

    Returns
    -------
    frozenset[str]
        Non-empty fragment names, without the leading ``#``

    Examples
    --------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup('<a href="#intro">Intro</a><a href="#">top</a>', "html.parser")
    >>> sorted(collect_fragment_names(soup))
    ['intro']

    """
    if not isinstance(root, Tag):
        return frozenset()

    candidates = [root] if root.name == "a" else []
    candidates.extend(root.find_all("a"))

    names = set()
    for anchor in candidates:
        href = anchor.get("href")
        if not isinstance(href, str):
            continue
        href = href.strip()
        if href.startswith("#") and len(href) > 1:
            names.add(href[1:])

    logger.debug(f"Collected {len(names)} internal anchor target(s)")
    return frozenset(names)
