"""Unit tests for the html2org CLI argument builder."""

import argparse
import logging
from dataclasses import dataclass, field, fields

import pytest

from html2org.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
    DynamicCLIBuilder,
    create_parser,
    get_exit_code_for_exception,
    parse_bool,
)
from html2org.exceptions import (
    DependencyError,
    FileAccessError,
    FormatError,
    InvalidOptionsError,
    LinkNormalizationError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2org.options import Html2OrgOptions, PrettyTablesOptions


@pytest.fixture
def builder() -> DynamicCLIBuilder:
    return DynamicCLIBuilder()


@pytest.fixture
def parser(builder) -> argparse.ArgumentParser:
    return create_parser(builder)


@pytest.mark.unit
@pytest.mark.cli
class TestFlagGeneration:
    """Flags generated from option fields."""

    def test_flag_names(self, builder, parser):
        assert builder.dest_to_cli_flag == {
            "pretty_tables": "--pretty-tables",
            "pretty_tables_options.auto_format_header": "--no-auto-format-header",
            "pretty_tables_options.auto_wrap_text": "--no-table-wrap",
            "pretty_tables_options.col_width": "--table-col-width",
            "pretty_tables_options.column_separator": "--table-column-separator",
            "pretty_tables_options.row_separator": "--table-row-separator",
            "pretty_tables_options.center_separator": "--table-center-separator",
            "pretty_tables_options.header_alignment": "--table-header-alignment",
            "pretty_tables_options.footer_alignment": "--table-footer-alignment",
            "pretty_tables_options.alignment": "--table-alignment",
            "pretty_tables_options.row_line": "--table-row-lines",
            "pretty_tables_options.borders": "--no-table-borders",
            "pretty_tables_options.org_format": "--no-org-tables",
            "omit_links": "--omit-links",
            "break_long_lines": "--break-long-lines",
            "base_url": "--base-url",
            "show_noscript": "--show-noscript",
            "show_internal_anchors": "--internal-anchors",
            "show_full_data_url": "--full-data-urls",
            "data_url_max_length": "--data-url-max-length",
            "html_parser": "--html-parser",
        }

    def test_defaults_are_suppressed(self, parser):
        namespace = parser.parse_args([])
        assert not hasattr(namespace, "pretty_tables")
        assert not hasattr(namespace, "base_url")

    def test_boolean_actions(self, parser):
        namespace = parser.parse_args(["--pretty-tables", "--no-org-tables"])
        assert namespace.pretty_tables is True
        assert getattr(namespace, "pretty_tables_options.org_format") is False

    def test_short_base_url_flag(self, parser):
        assert parser.parse_args(["-u", "http://x.org/"]).base_url == "http://x.org/"

    def test_integer_type(self, parser):
        assert parser.parse_args(["--data-url-max-length", "20"]).data_url_max_length == 20

    def test_choices(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["--html-parser", "regex"])

    def test_negated_flag_help_describes_the_flag(self, builder):
        kwargs = builder.get_argument_kwargs(
            "pretty_tables_options.borders", builder._fields["pretty_tables_options.borders"]
        )
        assert kwargs["action"] == "store_false"
        assert kwargs["help"] == "Omit the outer table border"

    def test_negated_help_is_derived_without_override(self):
        @dataclass(frozen=True)
        class Toggles:
            colors: bool = field(default=True, metadata={"help": "Use colors"})

        kwargs = DynamicCLIBuilder(Toggles).get_argument_kwargs("colors", fields(Toggles)[0])
        assert kwargs["help"] == "Do not use colors"

    @pytest.mark.parametrize(
        "dest,metavar",
        [
            ("pretty_tables_options.column_separator", "CHAR"),
            ("pretty_tables_options.col_width", "N"),
            ("data_url_max_length", "N"),
            ("base_url", "URL"),
        ],
    )
    def test_metavars(self, builder, dest, metavar):
        assert builder.get_argument_kwargs(dest, builder._fields[dest])["metavar"] == metavar

    def test_choices_have_no_metavar(self, builder):
        kwargs = builder.get_argument_kwargs("html_parser", builder._fields["html_parser"])
        assert "metavar" not in kwargs

    def test_help_output_has_no_dotted_placeholders(self, parser):
        help_text = parser.format_help()
        assert "PRETTY_TABLES_OPTIONS" not in help_text
        assert "--table-column-separator CHAR" in help_text

    def test_env_var_name(self):
        assert DynamicCLIBuilder.env_var_name("omit_links") == "HTML2ORG_OMIT_LINKS"
        assert DynamicCLIBuilder.env_var_name("pretty_tables_options.col_width") == (
            "HTML2ORG_PRETTY_TABLES_OPTIONS_COL_WIDTH"
        )


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Merging of CLI, environment and configuration values."""

    def test_defaults(self, builder, parser):
        assert builder.build_options(parser.parse_args([]), environ={}) == Html2OrgOptions()

    def test_cli_values(self, builder, parser):
        args = parser.parse_args(["--omit-links", "--table-col-width", "12", "--table-alignment", "right"])
        options = builder.build_options(args, environ={})
        assert options.omit_links is True
        assert options.pretty_tables_options == PrettyTablesOptions(col_width=12, alignment="right")

    def test_config_values(self, builder, parser):
        config = {"pretty_tables": True, "pretty_tables_options": {"borders": False}, "base-url": "http://x.org/"}
        options = builder.build_options(parser.parse_args([]), config=config, environ={})
        assert options.pretty_tables is True
        assert options.pretty_tables_options.borders is False
        assert options.base_url == "http://x.org/"

    def test_env_values(self, builder, parser):
        environ = {"HTML2ORG_SHOW_NOSCRIPT": "yes", "HTML2ORG_PRETTY_TABLES_OPTIONS_COL_WIDTH": "8"}
        options = builder.build_options(parser.parse_args([]), environ=environ)
        assert options.show_noscript is True
        assert options.pretty_tables_options.col_width == 8

    def test_precedence(self, builder, parser):
        config = {"data_url_max_length": 1, "base_url": "http://config/"}
        environ = {"HTML2ORG_DATA_URL_MAX_LENGTH": "2", "HTML2ORG_BASE_URL": "http://env/"}
        args = parser.parse_args(["--data-url-max-length", "3"])
        options = builder.build_options(args, config=config, environ=environ)
        assert options.data_url_max_length == 3
        assert options.base_url == "http://env/"

    def test_env_can_disable_true_default(self, builder, parser):
        options = builder.build_options(parser.parse_args([]), environ={"HTML2ORG_PRETTY_TABLES_OPTIONS_BORDERS": "0"})
        assert options.pretty_tables_options.borders is False

    def test_bad_boolean(self, builder, parser):
        with pytest.raises(ValidationError) as exc_info:
            builder.build_options(parser.parse_args([]), environ={"HTML2ORG_PRETTY_TABLES": "maybe"})
        assert exc_info.value.parameter_name == "pretty_tables"

    def test_bad_integer(self, builder, parser):
        with pytest.raises(ValidationError):
            builder.build_options(parser.parse_args([]), config={"data_url_max_length": "many"}, environ={})

    def test_rejected_by_options_class(self, builder, parser):
        with pytest.raises(ValidationError, match="column_separator"):
            builder.build_options(
                parser.parse_args(["--table-column-separator", "||"]),
                environ={},
            )

    def test_unknown_config_key_is_reported(self, builder, parser, caplog):
        with caplog.at_level(logging.WARNING, logger="html2org.cli.builder"):
            options = builder.build_options(parser.parse_args([]), config={"omit_link": True}, environ={})
        assert options == Html2OrgOptions()
        assert "omit_links" in caplog.text


@pytest.mark.unit
@pytest.mark.cli
class TestHelpers:
    """Exit codes and value parsing."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError(["lxml"]), EXIT_DEPENDENCY_ERROR),
            (ImportError("x"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("x"), EXIT_VALIDATION_ERROR),
            (InvalidOptionsError(Html2OrgOptions, dict), EXIT_VALIDATION_ERROR),
            (FileAccessError("f"), EXIT_FILE_ERROR),
            (FormatError(detected_format="binary"), EXIT_FORMAT_ERROR),
            (ParsingError("x"), EXIT_PARSING_ERROR),
            (RenderingError("x"), EXIT_RENDERING_ERROR),
            (LinkNormalizationError("http://[::1/"), EXIT_RENDERING_ERROR),
            (RuntimeError("x"), EXIT_ERROR),
        ],
    )
    def test_exit_codes(self, exception, code):
        assert get_exit_code_for_exception(exception) == code

    @pytest.mark.parametrize("value,expected", [("true", True), ("On", True), ("1", True), ("no", False), ("", False)])
    def test_parse_bool(self, value, expected):
        assert parse_bool(value) is expected

    def test_parse_bool_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_bool("perhaps")
