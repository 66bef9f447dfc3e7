"""
Application-wide constants and configuration mappings.

This module defines the naming-convention presets used throughout the mvvmjump
CLI application: per framework, which extensions mark views, code-behind files,
ViewModels and project manifests, and which directories the search skips.
"""

from typing import Final, Mapping
from models import SupportedFramework, NamingConvention


# Build output and tooling directories. They never hold hand-written views or
# ViewModels, and `obj` is full of generated `*.g.cs` files.
DEFAULT_IGNORE_DIRS: Final[frozenset[str]] = frozenset(
    {
        "bin",
        "obj",
        ".git",
        ".vs",
        "node_modules",
    }
)

VIEW_TOKEN: Final[str] = "View"
MODEL_TOKEN: Final[str] = "Model"


# Framework-specific naming conventions.
# The resolver classifies the active file with these extensions and derives the
# counterpart's expected name and extension from them. The project extensions
# are used by the CLI host to turn a solution directory into a list of projects.
CONVENTION_PRESETS: Final[Mapping[SupportedFramework, NamingConvention]] = {
    SupportedFramework.WPF: {
        "view_extension": ".xaml",
        "code_behind_extension": ".xaml.cs",
        "code_extension": ".cs",
        "view_token": VIEW_TOKEN,
        "model_token": MODEL_TOKEN,
        "project_extensions": frozenset({".csproj"}),
        "ignore_dirs": DEFAULT_IGNORE_DIRS,
    },
    SupportedFramework.WPF_VB: {
        "view_extension": ".xaml",
        "code_behind_extension": ".xaml.vb",
        "code_extension": ".vb",
        "view_token": VIEW_TOKEN,
        "model_token": MODEL_TOKEN,
        "project_extensions": frozenset({".vbproj"}),
        "ignore_dirs": DEFAULT_IGNORE_DIRS,
    },
    SupportedFramework.AVALONIA: {
        "view_extension": ".axaml",
        "code_behind_extension": ".axaml.cs",
        "code_extension": ".cs",
        "view_token": VIEW_TOKEN,
        "model_token": MODEL_TOKEN,
        "project_extensions": frozenset({".csproj"}),
        "ignore_dirs": DEFAULT_IGNORE_DIRS,
    },
}

DEFAULT_FRAMEWORK: Final[SupportedFramework] = SupportedFramework.WPF
