#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for ldiff.

This module defines the exception classes raised while reading inputs,
loading configuration and assembling diff output. They carry more specific
information than the generic built-ins so the CLI can map them to exit codes.

Exception Hierarchy
-------------------
- LdiffError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigError (invalid configuration file contents)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, read failures)

  - InvariantError (internal contract violations, never user-facing)

"""

from typing import Any


class LdiffError(Exception):
    """Base exception class for all ldiff-specific errors.

    Catching this will catch every error raised deliberately by ldiff.

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


class ValidationError(LdiffError):
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


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Covers unreadable or malformed files as well as unknown keys and
    out-of-range values.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    parameter_name : str, optional
        Configuration key that was rejected
    parameter_value : any, optional
        Value that was rejected
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(
            message,
            parameter_name=parameter_name,
            parameter_value=parameter_value,
            original_error=original_error,
        )
        self.config_path = config_path


class FileError(LdiffError):
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
            message = f"{file_path}: No such file or directory"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file exists but cannot be read.

    This includes permission errors and paths that name a directory.
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"{file_path}: Cannot read file"
        super().__init__(message, file_path=file_path, original_error=original_error)


class InvariantError(LdiffError):
    """Exception raised when an internal contract is broken by a caller.

    Examples are flushing a hunk merger that never received a piece, or
    building a hunk from a piece with no insertions and no removals. These
    indicate a programming error, not a problem with the user's input.
    """
