#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/cli/builder.py
"""Dynamic CLI argument builder for html2org.

This module generates argparse arguments from the fields of
:class:`~html2org.options.Html2OrgOptions` using their metadata, and turns
parsed arguments, environment variables and configuration file values back
into an options object.
"""

from __future__ import annotations

import argparse
import difflib
import logging
import os
from dataclasses import MISSING, Field, fields
from typing import Any, Dict, Iterator, Mapping, Optional, Type

from html2org.constants import ENV_PREFIX
from html2org.exceptions import (
    DependencyError,
    FileError,
    FormatError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2org.options import Html2OrgOptions

logger = logging.getLogger(__name__)

# Well-known metadata keys used by the option definitions
CLI_METADATA_FLATTEN = "cli_flatten"
CLI_METADATA_NAME = "cli_name"
CLI_METADATA_SHORT = "cli_short"
CLI_METADATA_METAVAR = "cli_metavar"
CLI_METADATA_NEGATED_HELP = "cli_negated_help"

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


def parse_bool(value: Any) -> bool:
    """Interpret a configuration or environment value as a boolean.

    Raises
    ------
    ValueError
        If the value is not a recognizable boolean

    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


class DynamicCLIBuilder:
    """Builds CLI arguments dynamically from the options dataclasses.

    Every field of :class:`Html2OrgOptions` becomes one flag. Fields whose
    metadata sets ``cli_flatten`` hold a nested options dataclass; the nested
    fields are exposed as top-level flags and stored under dotted
    destinations such as ``pretty_tables_options.col_width``.
    """

    def __init__(self, options_class: Type[Html2OrgOptions] = Html2OrgOptions) -> None:
        """Initialize the CLI builder."""
        self.options_class = options_class
        self.dest_to_cli_flag: Dict[str, str] = {}
        self._fields: Dict[str, Field] = dict(self._iter_fields(options_class))

    def _iter_fields(self, options_class: Type, prefix: str = "") -> Iterator[tuple[str, Field]]:
        for f in fields(options_class):
            if f.metadata.get(CLI_METADATA_FLATTEN):
                if f.default_factory is MISSING:
                    raise TypeError(f"Flattened field {f.name} needs a default_factory")
                yield from self._iter_fields(f.default_factory, prefix=f"{prefix}{f.name}.")
            else:
                yield f"{prefix}{f.name}", f

    @staticmethod
    def snake_to_kebab(name: str) -> str:
        """Convert snake_case to kebab-case."""
        return name.replace("_", "-")

    @staticmethod
    def env_var_name(dest: str) -> str:
        """Return the environment variable consulted for ``dest``.

        Examples
        --------
        >>> DynamicCLIBuilder.env_var_name("pretty_tables_options.col_width")
        'HTML2ORG_PRETTY_TABLES_OPTIONS_COL_WIDTH'

        """
        return ENV_PREFIX + dest.upper().replace(".", "_").replace("-", "_")

    def _field_default(self, f: Field) -> Any:
        if f.default is not MISSING:
            return f.default
        if f.default_factory is not MISSING:
            return f.default_factory()
        return MISSING

    def get_argument_kwargs(self, dest: str, f: Field) -> Dict[str, Any]:
        """Build the ``add_argument`` keyword arguments for one field.

        Booleans defaulting to True become ``store_false`` flags and booleans
        defaulting to False become ``store_true`` flags. Defaults are
        suppressed so that only explicitly given flags land in the namespace.
        """
        metadata = f.metadata
        kwargs: Dict[str, Any] = {"dest": dest, "default": argparse.SUPPRESS, "help": metadata.get("help")}

        default = self._field_default(f)
        if isinstance(default, bool):
            if default:
                kwargs["action"] = "store_false"
                kwargs["help"] = metadata.get(CLI_METADATA_NEGATED_HELP) or self._negate_help(metadata.get("help"))
            else:
                kwargs["action"] = "store_true"
            return kwargs

        if "type" in metadata:
            kwargs["type"] = metadata["type"]
        if "choices" in metadata:
            kwargs["choices"] = list(metadata["choices"])
        else:
            kwargs["metavar"] = self._metavar(dest, f)
        return kwargs

    @staticmethod
    def _negate_help(help_text: str | None) -> str | None:
        if not help_text:
            return help_text
        return f"Do not {help_text[0].lower()}{help_text[1:]}"

    def _metavar(self, dest: str, f: Field) -> str:
        if CLI_METADATA_METAVAR in f.metadata:
            return f.metadata[CLI_METADATA_METAVAR]
        if f.metadata.get("type") is int:
            return "N"
        return dest.rsplit(".", 1)[-1].upper()

    def infer_cli_name(self, dest: str, f: Field) -> str:
        """Return the long flag for a field, honoring a ``cli_name`` override."""
        name = f.metadata.get(CLI_METADATA_NAME)
        if name is None:
            name = self.snake_to_kebab(dest.rsplit(".", 1)[-1])
            if self._field_default(f) is True and not name.startswith("no-"):
                name = f"no-{name}"
        return f"--{name}"

    def add_options_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add one argument per option field, grouped by importance."""
        groups = {
            "core": parser.add_argument_group("Conversion options"),
            "advanced": parser.add_argument_group("Advanced options"),
            "tables": parser.add_argument_group("Pretty table options"),
        }
        for dest, f in self._fields.items():
            flag = self.infer_cli_name(dest, f)
            flags = [flag]
            if CLI_METADATA_SHORT in f.metadata:
                flags.insert(0, f.metadata[CLI_METADATA_SHORT])

            group_name = "tables" if "." in dest else f.metadata.get("importance", "advanced")
            groups.get(group_name, groups["advanced"]).add_argument(*flags, **self.get_argument_kwargs(dest, f))
            self.dest_to_cli_flag[dest] = flag

    def _coerce(self, dest: str, value: Any) -> Any:
        f = self._fields[dest]
        default = self._field_default(f)
        if isinstance(default, bool):
            return parse_bool(value)
        if f.metadata.get("type") is int and value is not None and not isinstance(value, int):
            return int(value)
        return value

    def _suggest(self, key: str) -> str | None:
        matches = difflib.get_close_matches(key, list(self._fields), n=1, cutoff=0.6)
        return matches[0] if matches else None

    def flatten_config(self, data: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
        """Flatten nested configuration tables into dotted destinations.

        Unknown keys are logged and ignored.
        """
        flat: Dict[str, Any] = {}
        for key, value in data.items():
            dest = f"{prefix}{str(key).replace('-', '_')}"
            if isinstance(value, Mapping):
                flat.update(self.flatten_config(value, prefix=f"{dest}."))
            elif dest in self._fields:
                flat[dest] = value
            else:
                suggestion = self._suggest(dest)
                hint = f" (did you mean '{suggestion}'?)" if suggestion else ""
                logger.warning(f"Ignoring unknown configuration key '{dest}'{hint}")
        return flat

    def env_values(self, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Collect option values from ``HTML2ORG_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for dest in self._fields:
            env_name = self.env_var_name(dest)
            if env_name in environ:
                logger.debug(f"Using {env_name} from environment")
                values[dest] = environ[env_name]
        return values

    def build_options(
        self,
        parsed_args: argparse.Namespace,
        config: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Html2OrgOptions:
        """Create the options object for a CLI run.

        Values are taken from, in decreasing priority, the command line, the
        environment, the configuration file and the built-in defaults.

        Raises
        ------
        ValidationError
            If a value cannot be converted or is rejected by the options class

        """
        merged: Dict[str, Any] = {}
        merged.update(self.flatten_config(config or {}))
        merged.update(self.env_values(environ))
        namespace = vars(parsed_args)
        merged.update({dest: namespace[dest] for dest in self._fields if dest in namespace})

        values: Dict[str, Any] = {}
        for dest, raw in merged.items():
            try:
                values[dest] = self._coerce(dest, raw)
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"Invalid value for {self.dest_to_cli_flag.get(dest, dest)}: {raw!r}",
                    parameter_name=dest,
                    parameter_value=raw,
                    original_error=e,
                ) from e

        try:
            return self.options_class().create_updated(**values)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid options: {e}", original_error=e) from e


def _get_version() -> str:
    try:
        from importlib.metadata import version

        return version("html2org")
    except Exception:
        return "unknown"


def create_parser(builder: Optional[DynamicCLIBuilder] = None) -> argparse.ArgumentParser:
    """Create the argument parser of the ``html2org`` command.

    Parameters
    ----------
    builder : DynamicCLIBuilder, optional
        Builder used for the option flags; a new one is created when omitted

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    builder = builder or DynamicCLIBuilder()
    parser = argparse.ArgumentParser(
        prog="html2org",
        description="Convert HTML documents to Org-mode markup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  html2org -i page.html -o page.org
  curl -s https://example.com/ | html2org -u https://example.com/
  html2org -i report.html --pretty-tables --table-col-width 30

Every option can also be set with an environment variable named
HTML2ORG_<OPTION>, e.g. HTML2ORG_PRETTY_TABLES=true, or in a configuration
file (.html2org.toml, .html2org.yaml, .html2org.json or [tool.html2org]
in pyproject.toml).
""",
    )
    parser.add_argument("-i", "--input", default="-", help="HTML file to read, '-' for stdin (default)")
    parser.add_argument("-o", "--output", help="File to write, stdout when omitted")
    parser.add_argument("-v", "--version", action="version", version=f"html2org {_get_version()}")

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Configuration file (.toml, .json, .yaml or .yml)")
    config_group.add_argument(
        "--no-config", action="store_true", help="Do not load any configuration file, even if one is found"
    )

    builder.add_options_arguments(parser)

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--verbose", action="store_true", help="Enable debug logging")
    logging_group.add_argument("--trace", action="store_true", help="Enable debug logging with timestamps")
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
