"""
Counterpart Resolver.

Given the active file and the open projects, finds the file on the other side
of the View/ViewModel pair:

1.  **Project selection**: the first project whose directory contains the
    active file. No project means NotFound.
2.  **Name derivation**: the active file's role decides the counterpart's
    expected base name and extension. Files that are neither Views nor
    ViewModels are rejected before any disk access.
3.  **Depth-first search**: the project subtree is walked and the first file
    with the expected name is returned.

The resolver keeps no state between calls; one instance can serve any number
of (re-entrant) resolutions from the host's command thread.
"""

import os
from pathlib import Path
from typing import Iterable

from constants import CONVENTION_PRESETS, DEFAULT_FRAMEWORK
from core.exceptions import InvalidActivePathError
from core.models import Found, NotFound, NotFoundReason, SearchResult, SearchTarget
from core.naming import classify_active_file, derive_search_target
from core.projects import select_project_root
from core.walker import DirectoryWalker, FilesystemDirectoryWalker
from models import NamingConvention
from utils import debug


class CounterpartResolver:
    """
    Resolves a View to its ViewModel and back.

    Attributes:
        convention: Naming convention used to classify files and build targets.
        walker: Directory walker used to search project subtrees.
    """

    def __init__(self, convention: NamingConvention, walker: DirectoryWalker):
        self.convention = convention
        self.walker = walker

    def resolve(
        self, active_file_path: Path | str, project_roots: Iterable[Path | str]
    ) -> SearchResult:
        """
        Find the counterpart of the active file.

        Args:
            active_file_path: Full path of the active file. Must not be empty.
            project_roots: Project directories (or project manifest paths), one
                per open project, in host order. May be empty.

        Returns:
            SearchResult: Found with the counterpart's path, or NotFound with
            the reason the search failed.

        Raises:
            InvalidActivePathError: If active_file_path is empty or blank.
        """
        if active_file_path is None or not str(active_file_path).strip():
            raise InvalidActivePathError()

        active_path = Path(active_file_path)

        project_root = select_project_root(
            active_path, project_roots, self.convention
        )
        if project_root is None:
            debug(f"No project contains {active_path}")
            return NotFound(NotFoundReason.NO_MATCHING_PROJECT)

        active = classify_active_file(active_path, self.convention)
        target = derive_search_target(active, self.convention)
        if target is None:
            debug(f"{active_path.name} is neither a view nor a view model")
            return NotFound(NotFoundReason.UNRECOGNIZED_NAMING_CONVENTION)

        debug(
            f"Searching {project_root} for {target.file_name} "
            f"({active.role.value} -> counterpart)"
        )
        return self._search(project_root, target)

    def _search(self, project_root: Path, target: SearchTarget) -> SearchResult:
        """
        Walk the project subtree for the target.

        A file matching the expected base name ends the walk immediately. A file
        matching an alternate name is remembered (first one wins) and returned
        only once the subtree is exhausted without a better match.
        """
        extension = os.path.normcase(target.expected_extension)
        expected = os.path.normcase(target.expected_base_name)
        alternates = {os.path.normcase(name) for name in target.alternate_base_names}
        fallback: Path | None = None

        for file_path in self.walker.walk_files(project_root):
            name = os.path.normcase(file_path.name)
            if not name.endswith(extension):
                continue

            base_name = name[: -len(extension)]
            if base_name == expected:
                debug(f"Found {file_path}")
                return Found(file_path)
            if fallback is None and base_name in alternates:
                fallback = file_path

        if fallback is not None:
            debug(f"Found {fallback} (alternate name)")
            return Found(fallback)

        return NotFound(NotFoundReason.COUNTERPART_NOT_PRESENT)


def resolve(
    active_file_path: Path | str,
    project_roots: Iterable[Path | str],
    convention: NamingConvention | None = None,
) -> SearchResult:
    """
    Resolve with a file-system walker, using the WPF convention by default.

    Args:
        active_file_path: Full path of the active file. Must not be empty.
        project_roots: Project directories or manifest paths, in host order.
        convention: Naming convention to use. Defaults to the WPF preset.

    Returns:
        SearchResult: Found or NotFound, see CounterpartResolver.resolve.
    """
    convention = convention or CONVENTION_PRESETS[DEFAULT_FRAMEWORK]
    walker = FilesystemDirectoryWalker(ignore_dirs=convention["ignore_dirs"])
    return CounterpartResolver(convention, walker).resolve(
        active_file_path, project_roots
    )
