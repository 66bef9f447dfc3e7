"""
Editor host adapter.

The resolver only needs three things from the editor it runs in: the active
document, the open projects, and a way to open a file. This module defines that
interface and implements it for the command line, where the active document is
passed as an argument and the editor is an external command.
"""

from pathlib import Path
import shlex
import subprocess
from typing import Protocol, Sequence

import typer

from core.exceptions import EditorLaunchError
from core.projects import discover_project_paths
from core.walker import FilesystemDirectoryWalker
from models import NamingConvention
from utils import debug


class EditorHost(Protocol):
    """
    Protocol defining what the open-counterpart command needs from its host.
    """

    def get_active_document_full_path(self) -> str | None:
        """
        Return the full path of the document being edited.

        Returns:
            The path, or None (or an empty string) if no document is active.
        """

    def get_project_paths(self) -> list[str]:
        """
        Return one path per open project, in the host's order.

        Entries may be project directories or project manifest files.
        """

    def open_file(self, path: Path) -> None:
        """
        Open `path` in the editor.

        Raises:
            EditorLaunchError: If the file could not be opened.
        """


class CliEditorHost:
    """
    EditorHost backed by command-line arguments.

    Attributes:
        active_file: The active document given on the command line, if any.
        project_paths: Explicit project paths. When empty, projects are
            discovered below solution_dir.
        solution_dir: Directory searched for project manifests.
        convention: Naming convention supplying manifest extensions and ignored dirs.
        editor_command: Command line used to open files, e.g. "code --goto".
            The file path is appended as the last argument. When None, the
            operating system's default application is used.
        print_only: If True, open_file writes the path to stdout instead of
            launching anything, so other tools can consume it.
    """

    def __init__(
        self,
        active_file: Path | None,
        convention: NamingConvention,
        project_paths: Sequence[Path] = (),
        solution_dir: Path | None = None,
        editor_command: str | None = None,
        print_only: bool = False,
    ):
        self.active_file = active_file
        self.convention = convention
        self.project_paths = list(project_paths)
        self.solution_dir = solution_dir or Path.cwd()
        self.editor_command = editor_command
        self.print_only = print_only

    def get_active_document_full_path(self) -> str | None:
        if self.active_file is None:
            return None
        return str(self.active_file.absolute())

    def get_project_paths(self) -> list[str]:
        if self.project_paths:
            return [str(p.absolute()) for p in self.project_paths]

        walker = FilesystemDirectoryWalker(ignore_dirs=self.convention["ignore_dirs"])
        discovered = discover_project_paths(self.solution_dir, self.convention, walker)
        debug(f"Discovered {len(discovered)} project(s) under {self.solution_dir}")
        return [str(p) for p in discovered]

    def open_file(self, path: Path) -> None:
        """
        Open `path` with the editor command, or the OS default application.

        Raises:
            EditorLaunchError: If the command is malformed, cannot be started,
                or exits with a non-zero status.
        """
        if self.print_only:
            typer.echo(str(path))
            return

        if not self.editor_command:
            exit_code = typer.launch(str(path))
            if exit_code != 0:
                raise EditorLaunchError(
                    message=f"Default application exited with status {exit_code}"
                )
            return

        try:
            cmd = [*shlex.split(self.editor_command), str(path)]
        except ValueError as e:
            raise EditorLaunchError(
                message=f"Invalid editor command: {self.editor_command}",
                original_exception=e,
            ) from e

        debug(f"Running {cmd}")
        try:
            subprocess.run(cmd, check=True)
        except subprocess.CalledProcessError as e:
            raise EditorLaunchError(
                message=f"Editor exited with status {e.returncode}",
                command=cmd,
                original_exception=e,
            ) from e
        except OSError as e:
            raise EditorLaunchError(
                message=f"Could not start editor: {cmd[0]}",
                command=cmd,
                original_exception=e,
            ) from e


class MockEditorHost:
    """
    Mock implementation of EditorHost for testing.

    Returns fixed answers and records every interaction, allowing tests to
    verify what was opened without launching anything.
    """

    def __init__(
        self,
        active_document: str | None = None,
        project_paths: Sequence[str] = (),
        open_error: Exception | None = None,
    ):
        """
        Initialize MockEditorHost with the host state to report.

        Args:
            active_document: Path returned as the active document (None for none).
            project_paths: Paths returned as the open projects.
            open_error: If provided, open_file raises this instead of recording.

        Attributes (for test inspection):
            opened_files: List of paths passed to open_file()
            project_paths_calls: Number of get_project_paths() calls
        """
        self.active_document = active_document
        self.project_paths = list(project_paths)
        self.open_error = open_error

        # Track calls for test inspection
        self.opened_files: list[Path] = []
        self.project_paths_calls = 0

    def get_active_document_full_path(self) -> str | None:
        return self.active_document

    def get_project_paths(self) -> list[str]:
        self.project_paths_calls += 1
        return list(self.project_paths)

    def open_file(self, path: Path) -> None:
        if self.open_error is not None:
            raise self.open_error
        self.opened_files.append(path)
