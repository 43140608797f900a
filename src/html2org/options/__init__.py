#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/options/__init__.py
"""Configuration options for html2org conversion.

Options are frozen dataclasses: they are safe to share between threads and
between conversion calls, and are modified through ``create_updated``.
"""

from html2org.options.base import CloneFrozenMixin
from html2org.options.org import Html2OrgOptions
from html2org.options.tables import PrettyTablesOptions

__all__ = [
    "CloneFrozenMixin",
    "Html2OrgOptions",
    "PrettyTablesOptions",
]
