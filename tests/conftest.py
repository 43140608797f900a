"""Pytest configuration and shared fixtures for the html2org test suite."""

import logging
from typing import Callable

import pytest

from html2org import Html2OrgOptions, from_string


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def convert() -> Callable[..., str]:
    """Convert an HTML string, passing keyword arguments as options.

    Examples
    --------
    >>> convert("<b>x</b>", pretty_tables=True)  # doctest: +SKIP

    """

    def _convert(html: str, **option_values) -> str:
        return from_string(html, Html2OrgOptions(**option_values))

    return _convert


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler changes made by CLI tests that configure logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
