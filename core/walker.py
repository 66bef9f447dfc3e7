"""
Depth-first directory traversal.

The resolver consumes files through the DirectoryWalker protocol so that the
search order and its error tolerance live in one place, and so tests can swap
in a walker that records whether any traversal happened at all.
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from utils import debug


class DirectoryWalker(Protocol):
    """
    Protocol defining the interface for walking a directory subtree.

    This protocol specifies a single method yielding files lazily, allowing
    different implementations for production (filesystem) and testing (mocks).
    """

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Lazily yield every regular file below `root`, depth-first.

        Args:
            root: The directory to start from.

        Yields:
            Path: Paths of files, in the order they are discovered. Consumers
                may stop iterating at any point.
        """


class FilesystemDirectoryWalker:
    """
    Walks the real file system with `os.scandir`.

    The traversal is iterative: a stack holds one entry iterator per open
    directory, and a subdirectory is pushed as soon as it is met. This visits
    entries in exactly the order a recursive walk would, without a recursion
    limit. Directories are tracked by (device, inode) so symlink loops are
    entered only once.

    Entries come in whatever order the operating system enumerates them, so
    which of several equally named files is met first is platform dependent.

    Attributes:
        ignore_dirs: Directory names that are never entered (e.g., "bin", "obj").
        follow_symlinks: Whether symlinked directories are entered.
    """

    def __init__(
        self,
        ignore_dirs: Iterable[str] = frozenset(),
        follow_symlinks: bool = True,
    ):
        self.ignore_dirs = frozenset(ignore_dirs)
        self.follow_symlinks = follow_symlinks

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Lazily yield every regular file below `root`, depth-first.

        A root that does not exist or cannot be listed yields nothing. A
        subdirectory that cannot be listed (permission denied, removed while
        walking) is skipped and the walk continues with its siblings.

        Args:
            root: The directory to start from.

        Yields:
            Path: Paths of files, in discovery order.
        """
        root_key = self._directory_key(root)
        if root_key is None:
            return

        visited = {root_key}
        stack = [self._list_entries(root)]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                if entry.is_dir(follow_symlinks=self.follow_symlinks):
                    if entry.name in self.ignore_dirs:
                        continue
                    key = self._directory_key(Path(entry.path))
                    if key is None or key in visited:
                        continue
                    visited.add(key)
                    stack.append(self._list_entries(Path(entry.path)))
                elif entry.is_file(follow_symlinks=self.follow_symlinks):
                    yield Path(entry.path)
            except OSError as e:
                debug(f"Skipping entry {entry.path}: {e}")

    def _list_entries(self, directory: Path) -> Iterator[os.DirEntry[str]]:
        """
        Read all entries of `directory` up front.

        The scandir handle is closed before any entry is processed, so the
        walk never holds more than one directory handle open.
        """
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            debug(f"Cannot list directory {directory}: {e}")
            return iter(())
        return iter(entries)

    def _directory_key(self, directory: Path) -> tuple[int, int] | None:
        try:
            st = os.stat(directory)
        except OSError as e:
            debug(f"Cannot stat directory {directory}: {e}")
            return None
        return (st.st_dev, st.st_ino)


class MockDirectoryWalker:
    """
    Mock implementation of DirectoryWalker for testing.

    Yields a fixed list of file paths and records every walk, allowing tests to
    assert on search order and to verify that no traversal was attempted.
    """

    def __init__(self, files: Iterable[Path | str] = ()):
        """
        Initialize MockDirectoryWalker with the files it will report.

        Args:
            files: Paths yielded (in this order) by every call to walk_files.

        Attributes (for test inspection):
            walk_calls: List of root paths passed to walk_files()
            yielded: Number of files handed out across all walks
        """
        self.files = [Path(f) for f in files]

        # Track calls for test inspection
        self.walk_calls: list[Path] = []
        self.yielded = 0

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Yield the configured files that lie under `root` (tracks call).

        Args:
            root: The directory the walk starts from.

        Yields:
            Path: The configured file paths located below root.
        """
        self.walk_calls.append(root)
        for file_path in self.files:
            try:
                file_path.relative_to(root)
            except ValueError:
                continue
            self.yielded += 1
            yield file_path
