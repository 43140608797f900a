#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/cli/__init__.py
"""Command line interface for html2org.

Usage::

    html2org -i page.html -o page.org
    cat page.html | html2org --pretty-tables -u https://example.com/
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from html2org.api import from_string
from html2org.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    DynamicCLIBuilder,
    create_parser,
    get_exit_code_for_exception,
)
from html2org.cli.config import CONFIG_ENV_VAR, load_config_with_priority
from html2org.exceptions import FileAccessError, FileNotFoundError, FormatError, Html2OrgError
from html2org.logging_utils import configure_logging
from html2org.options import Html2OrgOptions
from html2org.utils.encoding import decode_html_bytes
from html2org.utils.inputs import is_binary_content, looks_like_html, wrap_plain_text

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(source: str) -> bytes:
    """Read the raw input bytes from a path or from stdin ('-')."""
    if source == "-":
        stream = getattr(sys.stdin, "buffer", None)
        if stream is not None:
            return stream.read()
        return sys.stdin.read().encode("utf-8")

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(source)
    if not path.is_file():
        raise FileAccessError(source, message=f"Not a file: {source}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(source, original_error=e) from e


def _write_output(text: str, destination: str | None) -> None:
    if destination is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    try:
        Path(destination).write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(destination, message=f"Cannot write output file: {destination}", original_error=e) from e
    logger.info(f"Wrote {destination}")


def convert_input(data: bytes, options: Html2OrgOptions, filename: str | None = None) -> str:
    """Convert raw CLI input to Org text.

    Input that does not look like HTML is kept verbatim in a source block.

    Raises
    ------
    FormatError
        If the input is binary

    """
    if is_binary_content(data):
        raise FormatError(detected_format="binary")

    text = decode_html_bytes(data)
    if not looks_like_html(data, filename):
        logger.info("Input does not look like HTML, converting it as plain text")
        text = wrap_plain_text(text)
    return from_string(text, options)


def main(args: list[str] | None = None) -> int:
    """Execute the ``html2org`` command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    builder = DynamicCLIBuilder()
    parser = create_parser(builder)
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        if parsed_args.no_config:
            config = {}
        else:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = builder.build_options(parsed_args, config)
        logger.debug(f"Effective options: {options.to_flat_dict()}")
        filename = None if parsed_args.input == "-" else parsed_args.input
        org = convert_input(_read_input(parsed_args.input), options, filename=filename)
        _write_output(org + "\n", parsed_args.output)
    except Html2OrgError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
