"""
Type definitions and data models used across the mvvmjump CLI application.

This module contains shared type definitions including enums and TypedDict
structures that are used throughout the codebase for type safety and consistency.
"""

from enum import StrEnum
from typing import TypedDict


class SupportedFramework(StrEnum):
    """
    Enumeration of UI frameworks whose View/ViewModel conventions mvvmjump knows.

    Each value is the human-readable name shown in framework selection prompts
    and accepted by the `--framework` option. The enum values are used as keys
    in the CONVENTION_PRESETS mapping to retrieve the framework's file extensions.
    """

    WPF = "WPF"
    WPF_VB = "WPF (Visual Basic)"
    AVALONIA = "Avalonia"


class NamingConvention(TypedDict):
    """
    Type definition for a framework's View/ViewModel naming convention.

    Attributes:
        view_extension: Extension of markup view files (e.g., ".xaml").
        code_behind_extension: Extension of a view's code-behind file
            (e.g., ".xaml.cs"). A code-behind file is treated as the view itself.
        code_extension: Extension of ViewModel source files (e.g., ".cs").
        view_token: Literal token closing a view's base name ("View").
        model_token: Literal token that turns a view name into a ViewModel name
            ("Model"). A ViewModel name ends with view_token + model_token.
        project_extensions: Extensions of project manifest files (e.g., ".csproj")
            used to recognise project directories.
        ignore_dirs: A frozen set of directory names the search never enters
            (e.g., "bin", "obj").
    """

    view_extension: str
    code_behind_extension: str
    code_extension: str
    view_token: str
    model_token: str
    project_extensions: frozenset[str]
    ignore_dirs: frozenset[str]
