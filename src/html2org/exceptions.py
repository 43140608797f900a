#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/exceptions.py
"""Custom exceptions for the html2org library.

This module defines specialized exception classes for the error conditions
that can occur while reading, parsing and rendering HTML documents into
Org-mode markup.

Exception Hierarchy
-------------------
- Html2OrgError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, locked files)

  - FormatError (input that is not a convertible document)

  - ParsingError (input document parsing failures)

  - RenderingError (output generation failures)
    - LinkNormalizationError (malformed URL in href/src/action)

  - DependencyError (missing parser backends)

"""

from typing import Any


class Html2OrgError(Exception):
    """Base exception class for all html2org-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Html2OrgError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, expected_type: type, received_type: type, message: str | None = None):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"Expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Html2OrgError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be read or written.

    This includes permission errors, directories passed as files, etc.

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(Html2OrgError):
    """Exception raised when the input is not something that can be converted.

    Parameters
    ----------
    message : str, optional
        Custom error message
    detected_format : str, optional
        What the input was sniffed as (e.g. ``"binary"``)
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str | None = None,
        detected_format: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if detected_format:
                message = f"Input looks like '{detected_format}' and cannot be converted to Org"
            else:
                message = "Input format is not supported for conversion"
        super().__init__(message, original_error=original_error)
        self.detected_format = detected_format


class ParsingError(Html2OrgError):
    """Exception raised when reading or parsing the HTML input fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Html2OrgError):
    """Exception raised when Org output generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class LinkNormalizationError(RenderingError):
    """Exception raised when a link target cannot be parsed or resolved.

    A single malformed URL aborts the whole conversion; no partial output
    is produced.

    Parameters
    ----------
    url : str
        The offending link target
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The error raised by the URL parser

    Attributes
    ----------
    url : str
        The link target that could not be normalized

    """

    def __init__(self, url: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the link normalization error."""
        if message is None:
            message = f"Cannot normalize link {url!r}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="link_normalization", original_error=original_error)
        self.url = url


class DependencyError(Html2OrgError):
    """Exception raised when a required parser backend is not installed.

    Parameters
    ----------
    missing_packages : list[str]
        Names of the packages that need to be installed
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    missing_packages : list[str]
        Packages that need to be installed
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        missing_packages: list[str],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.missing_packages = missing_packages
        self.install_command = f"pip install {' '.join(missing_packages)}" if missing_packages else ""
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = f"HTML parsing requires the following packages: {pkg_list}"
            if self.install_command:
                message += f"\n\nInstall with: {self.install_command}"
        super().__init__(message, original_error)
