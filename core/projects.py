"""
Project root selection and discovery.

An IDE reports its open projects either as directories or as the paths of
their manifest files (e.g., "C:/src/App/App.csproj"). This module maps those
entries to directories, picks the one that owns the active file, and, for the
command-line host, discovers projects under a solution directory.
"""

import os
from pathlib import Path
from typing import Iterable

from core.walker import DirectoryWalker
from models import NamingConvention


def _normalize(path: Path | str) -> Path:
    # realpath: project lists and active documents may reach the same tree
    # through different symlinks
    return Path(os.path.normcase(os.path.realpath(path)))


def is_within(path: Path | str, directory: Path | str) -> bool:
    """
    Check whether `path` lies inside `directory`, segment by segment.

    Both paths are made absolute, with symlinks resolved, and normalised
    first, so a tree reached through a symlink still matches. Plain string prefixes
    are not enough: "/proj" contains "/proj/a.cs" but not "/project/a.cs".

    Args:
        path: The path to test.
        directory: The candidate containing directory.

    Returns:
        bool: True if `path` equals `directory` or lies below it.
    """
    try:
        _normalize(path).relative_to(_normalize(directory))
        return True
    except ValueError:
        return False


def project_directory(project_path: Path | str, convention: NamingConvention) -> Path:
    """Map a project entry to its directory; manifest paths map to their parent."""
    candidate = Path(project_path)
    if os.path.normcase(candidate.suffix) in {
        os.path.normcase(ext) for ext in convention["project_extensions"]
    }:
        return candidate.parent
    return candidate


def select_project_root(
    active_path: Path | str,
    project_paths: Iterable[Path | str],
    convention: NamingConvention,
) -> Path | None:
    """
    Select the project that owns the active file.

    Projects are checked in the order given and the first one whose directory
    contains the active file wins, so for nested projects the caller's order
    decides.

    Args:
        active_path: Full path of the active file.
        project_paths: Project directories or manifest paths, in host order.
        convention: Naming convention supplying project manifest extensions.

    Returns:
        Path | None: The selected project directory, or None if no project
        contains the active file.
    """
    for project_path in project_paths:
        directory = project_directory(project_path, convention)
        if is_within(active_path, directory):
            return directory
    return None


def discover_project_paths(
    solution_dir: Path, convention: NamingConvention, walker: DirectoryWalker
) -> list[Path]:
    """
    Find the project directories below a solution directory.

    A directory is a project when it holds a file with one of the convention's
    project extensions (e.g., "App.csproj").

    Args:
        solution_dir: Directory to search.
        convention: Naming convention supplying project manifest extensions.
        walker: Directory walker used for the search.

    Returns:
        list[Path]: Project directories, sorted ascending and without duplicates.
        Parents sort before the projects nested inside them.
    """
    extensions = {os.path.normcase(ext) for ext in convention["project_extensions"]}
    found: set[Path] = set()

    for file_path in walker.walk_files(solution_dir):
        if os.path.normcase(file_path.suffix) in extensions:
            found.add(file_path.parent)

    return sorted(found)
