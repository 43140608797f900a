#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/utils/__init__.py
"""Utility modules for the html2org package.

This package contains text normalization, encoding detection and input
sniffing helpers shared by the renderer, the public API and the CLI.
"""

from html2org.utils.encoding import decode_html_bytes, strip_bom
from html2org.utils.text import break_long_lines, collapse_whitespace, flatten, normalize_output

__all__ = [
    "break_long_lines",
    "collapse_whitespace",
    "decode_html_bytes",
    "flatten",
    "normalize_output",
    "strip_bom",
]
