"""
mvvmjump CLI Entry Point.

This module implements the command-line interface for mvvmjump, a tool that
jumps between the two halves of a View/ViewModel pair. Bound to a key or menu
entry in an editor, it takes the file being edited and opens its counterpart:

    CustomerView.xaml      <->  CustomerViewModel.cs
    Customer.xaml.cs        ->  CustomerViewModel.cs

The command runs in three steps:

1.  **Project Selection**: Finds the project that owns the active file, either
    from explicit `--project` options or from the project manifests (e.g.
    `*.csproj`) found under the solution directory.
2.  **Name Derivation**: Classifies the active file as a View or ViewModel using
    the framework's naming convention and derives the counterpart's name.
3.  **Search & Open**: Walks the project tree depth-first, then opens the first
    match in the configured editor (or the system default application).

Usage:
    Run directly as a script or via the installed entry point.

    $ python main.py src/App/Views/CustomerView.xaml --editor "code --goto"

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI and colors.
    - Inquirer: Interactive terminal user prompts.
"""

from pathlib import Path
from typing import Annotated, Optional
import typer
from rich import print as pr
from rich.markup import escape
from constants import CONVENTION_PRESETS, DEFAULT_FRAMEWORK
from adapters.editor import CliEditorHost
from core.command import open_counterpart
from core.exceptions import (
    EditorLaunchError,
    SettingsError,
)
from core.models import Found, NotFound, NotFoundReason
from core.resolver import CounterpartResolver
from core.settings import get_config_file
from core.walker import FilesystemDirectoryWalker
from models import SupportedFramework
from ui.prompts import edit_settings, make_framework_selection
from utils import set_verbose

app = typer.Typer()


@app.command()
def main(
    file: Annotated[
        Optional[Path],
        typer.Argument(
            dir_okay=False,  # The active document is a file
            help="The active document whose counterpart should be opened",
        ),
    ] = None,
    project: Annotated[
        Optional[list[Path]],
        typer.Option(
            "--project",
            "-P",
            help="Project directory or project file (repeatable). "
            "Defaults to projects found under --solution-dir.",
        ),
    ] = None,
    solution_dir: Annotated[
        Path,
        typer.Option(
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=False,  # Typer throws error if it's a file, not a dir
            dir_okay=True,  # Must be a directory
            resolve_path=True,  # Automatically converts to absolute path
            help="Directory searched for project files when --project is not given",
        ),
    ] = Path.cwd(),  # If not provided, use the current working directory
    framework: Annotated[
        str | None,
        typer.Option(
            help=f"Available frameworks: {', '.join(list(SupportedFramework))}"
        ),
    ] = None,
    editor: Annotated[
        str | None,
        typer.Option(
            envvar="MVVMJUMP_EDITOR",
            help="Command used to open the counterpart; the path is appended.",
        ),
    ] = None,
    print_only: Annotated[
        bool,
        typer.Option(
            "--print-only",
            "-p",
            help="Print the counterpart's path instead of opening it.",
        ),
    ] = False,
    search_all: Annotated[
        bool,
        typer.Option(
            "--search-all",
            "-a",
            help="Also search build and tooling directories "
            "(bin, obj, .git, .vs, node_modules), which are skipped by default.",
        ),
    ] = False,
    configure: Annotated[
        bool,
        typer.Option(
            "--configure",
            "-c",
            help="Edit framework and editor settings (shows current values for editing).",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print debug output to stderr."),
    ] = False,
):
    """
    Open the counterpart (View <-> ViewModel) of FILE.

    Resolves the counterpart of the given file within the project that owns
    it and opens it in the editor. Exits with code 1 when no counterpart is
    found.

    Args:
        file (Path | None): The active document. When omitted there is nothing
            to resolve and the command reports that no document is active.
        project (list[Path] | None): Explicit project directories or project
            files, checked in order.
        solution_dir (Path): Directory searched for project files when no
            projects are given. Defaults to the current working directory.
        framework (str | None): Naming convention to use. Falls back to the
            settings file, then to WPF.
        editor (str | None): Editor command line. Falls back to the settings
            file, then to the system default application.
        print_only (bool): Print the found path instead of opening it.
        search_all (bool): Search the whole project tree, including the
            directories the framework preset normally skips.
        configure (bool): Run the interactive settings editor and exit.
        verbose (bool): Enable debug output.

    Raises:
        typer.Exit: With code 1 if no counterpart is found or an error occurs.
    """
    set_verbose(verbose)

    try:
        if configure:
            edit_settings()
            raise typer.Exit(0)

        config = get_config_file()
    except SettingsError as e:
        print_settings_err(e)
        return

    # Validate framework passed by user
    # If not passed, fall back to the settings file and then the default
    try:
        selected = normalize_framework(framework or config.get("framework"))
    except ValueError:
        if framework is not None:
            pr(f"\n[red bold]Not a valid framework: {escape(framework)}")
            selected = make_framework_selection()
        else:
            selected = DEFAULT_FRAMEWORK

    convention = CONVENTION_PRESETS[selected]
    if search_all:
        convention = {**convention, "ignore_dirs": frozenset()}

    host = CliEditorHost(
        active_file=file,
        convention=convention,
        project_paths=project or [],
        solution_dir=solution_dir,
        editor_command=editor or config.get("editor"),
        print_only=print_only,
    )

    resolver = CounterpartResolver(
        convention, FilesystemDirectoryWalker(ignore_dirs=convention["ignore_dirs"])
    )

    try:
        result = open_counterpart(host, resolver)
    except EditorLaunchError as e:
        print_editor_err(e)
        return
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)
        return

    if isinstance(result, NotFound):
        print_not_found(result, file)

    if isinstance(result, Found) and not print_only:
        pr(f"[green]Opened:[/green] {escape(str(result.path))}")


def normalize_framework(framework: str | None) -> SupportedFramework:
    """
    Normalizes and validates a framework string to a SupportedFramework enum value.

    Performs case-insensitive matching against the supported frameworks.

    Args:
        framework (str | None): The framework string to normalize.

    Returns:
        SupportedFramework: The matching SupportedFramework enum value.

    Raises:
        ValueError: If no framework is provided (None or empty string) or if the
            string doesn't match any supported framework (case-insensitive).
    """
    if not framework:
        raise ValueError("No framework provided")

    normalized = framework.strip().lower()
    for fw in SupportedFramework:
        if str(fw).lower() == normalized:
            return fw
    raise ValueError(f"Unsupported framework: {framework}")


def print_not_found(result: NotFound, file: Path | None) -> None:
    """
    Tells the user why no counterpart was opened.

    Args:
        result (NotFound): The resolution outcome, carrying the reason.
        file (Path | None): The active document, if one was given.

    Raises:
        typer.Exit: Always raises with exit code 1.
    """
    name = escape(file.name) if file else ""

    if result.reason is NotFoundReason.NO_ACTIVE_DOCUMENT:
        pr("[red]No active document.[/red] Pass the file you are editing as FILE.")
    elif result.reason is NotFoundReason.NO_MATCHING_PROJECT:
        pr(f"[red]No project contains[/red] [green]'{name}'[/green].")
        pr(
            "\n[yellow]Quick Fix:[/yellow] Pass --project, or run from (or point "
            "--solution-dir at) the directory holding your project files."
        )
    elif result.reason is NotFoundReason.UNRECOGNIZED_NAMING_CONVENTION:
        pr(f"[red][green]'{name}'[/green] is neither a View nor a ViewModel.[/red]")
    else:
        pr(f"[red]Couldn't find a counterpart for[/red] [green]'{name}'[/green].")

    raise typer.Exit(code=1)


def print_settings_err(e: SettingsError) -> None:
    """
    Displays a user-friendly error message for settings file failures.

    Args:
        e (SettingsError): The exception that was raised, containing error
            details and the settings file path.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Settings Error[/bold red]")
    pr(f"The app couldn't use its settings file: {escape(e.message)}")
    if e.file_path:
        pr(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Fix or delete the file, or run with --configure.")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")

    raise typer.Exit(code=1) from e


def print_editor_err(e: EditorLaunchError) -> None:
    """
    Displays a user-friendly error message when the editor could not be launched.

    Args:
        e (EditorLaunchError): The exception that was raised, containing the
            attempted command and diagnostic information.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Editor Error[/bold red]")
    pr(f"The counterpart was found but couldn't be opened: {escape(e.message)}")
    if e.command:
        pr(f"Command: [yellow]{escape(' '.join(e.command))}[/yellow]")

    pr(
        "\n[yellow]Quick Fix:[/yellow] Check the editor command "
        "(--editor, MVVMJUMP_EDITOR or --configure)."
    )
    pr(f"Diagnostics: {escape(str(e.diagnostic_info))}")
    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    This catch-all handler ensures that any unhandled exceptions are presented
    to the user in a friendly way, rather than showing a raw Python stack trace.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("An unexpected error occurred while looking for the counterpart.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    pr("\n--- PLEASE REPORT THIS ---")
    pr(f"Error Type: {type(e).__name__}")
    pr(f"Error Message: {escape(str(e))}")
    if hasattr(e, "__cause__") and e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
