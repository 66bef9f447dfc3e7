"""
Custom exception classes for the mvvmjump CLI.

This module defines application-specific exceptions raised when the resolver is
called outside its contract, when the settings file cannot be read or written,
or when the editor cannot be launched. Ordinary "counterpart not found"
outcomes are never exceptions; they are returned as NotFound values.
"""

import os
from typing import Optional


class MvvmJumpError(Exception):
    """
    Base exception for mvvmjump errors.

    It carries diagnostic information about the operating system and the
    original exception that caused the error, for the CLI's error reports.

    Attributes:
        message: A human-readable error message describing what went wrong.
        original_exception: The underlying exception that caused this error, if any.
        diagnostic_info: A dictionary containing diagnostic information including
            exception type, details, and OS name.
    """

    default_message = "An error occurred while resolving the counterpart file"

    def __init__(
        self,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.original_exception = original_exception
        self.diagnostic_info = {
            "type": (
                type(original_exception).__name__ if original_exception else "Unknown"
            ),
            "details": str(original_exception) if original_exception else "No details",
            "os_name": os.name,
        }


class InvalidActivePathError(MvvmJumpError, ValueError):
    """
    Raised when the resolver is given an empty or blank active file path.

    Callers must short-circuit on "no active document" before calling the
    resolver; reaching it with an empty path is a programming error.
    """

    default_message = "Active file path must be a non-empty path"


class SettingsError(MvvmJumpError):
    """
    Base exception for settings file errors.

    Attributes:
        file_path: Path of the settings file involved, if known.
    """

    default_message = "An error occurred with the settings file"

    def __init__(
        self,
        message: Optional[str] = None,
        file_path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.file_path = file_path


class SettingsReadError(SettingsError):
    """Raised when the settings file exists but cannot be read or parsed."""

    default_message = "Failed to read settings file"


class SettingsWriteError(SettingsError):
    """Raised when the settings file or its directory cannot be written."""

    default_message = "Failed to write settings file"


class EditorLaunchError(MvvmJumpError):
    """
    Raised when the editor command fails to open the counterpart file.

    Attributes:
        command: The command line that was attempted, if any. None means the
            operating system's default opener was used.
    """

    default_message = "Failed to open file in editor"

    def __init__(
        self,
        message: Optional[str] = None,
        command: Optional[list[str]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message=message, original_exception=original_exception)
        self.command = command
