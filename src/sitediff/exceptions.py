#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the sitediff library.

This module defines the exception classes raised by sitediff. The comparison
core itself is total over well-formed input; these exceptions cover the
collaborators that feed it (file collection, build commands) and the
rendering stage.

Exception Hierarchy
-------------------
- SiteDiffError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - CollectionError (walking or decoding a site tree)

  - BuildError (external build or format command failures)

  - RenderingError (report generation failures)
    - OutputWriteError (report write failures)

"""

from __future__ import annotations

from typing import Any, Sequence


class SiteDiffError(Exception):
    """Base exception class for all sitediff-specific errors.

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


class ValidationError(SiteDiffError):
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


class FileError(SiteDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the file that caused the error
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class CollectionError(FileError):
    """Exception raised when a site tree cannot be collected into a snapshot.

    Raised for a missing root directory, unreadable files, and files that
    are not valid UTF-8. Collection happens before any comparison, so this
    error always aborts a run before the report is produced.
    """


class BuildError(SiteDiffError):
    """Exception raised when an external build or format command fails.

    Parameters
    ----------
    message : str
        Description of the failure
    command : sequence of str, optional
        The argument list that was executed
    returncode : int, optional
        Exit status of the command, or None if it could not be started
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] | None = None,
        returncode: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the build error with command details."""
        super().__init__(message, original_error=original_error)
        self.command = list(command) if command is not None else None
        self.returncode = returncode


class RenderingError(SiteDiffError):
    """Exception raised when the report cannot be rendered.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Renderer or stage where the failure occurred (e.g. "html")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when a rendered report cannot be written to disk."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write report to: {file_path}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.file_path = file_path
