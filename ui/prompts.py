"""
Interactive user prompts for the mvvmjump CLI application.

This module provides the interactive terminal flows used when a choice was not
given on the command line:

1. Framework Selection: Prompts users to select the UI framework whose naming
   convention should be used.

2. Settings Editing: Prompts for the framework and the editor command with the
   current values pre-selected, then saves them to the settings file.

Dependencies:
    - inquirer: Interactive terminal prompts
    - rich: Terminal formatting and colors
    - typer: CLI framework integration
"""

import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr
import typer

from core.settings import get_config_file, save_config
from models import SupportedFramework


def make_framework_selection(
    default: SupportedFramework | None = None,
) -> SupportedFramework:
    """
    Interactively prompts the user to select a supported framework.

    Args:
        default: Framework pre-selected in the list, if any.

    Returns:
        SupportedFramework: The enum member corresponding to the user's selection.

    Raises:
        typer.Exit: If the user cancels the prompt.
    """

    pr("\n[bold green]Select the framework your project uses.[/bold green]")
    questions = [
        inquirer.List(
            "framework",
            message="Hit [ENTER] to make your selection",
            choices=list(SupportedFramework),
            default=default,
        ),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers:
        raise typer.Exit()

    return SupportedFramework(answers["framework"])


def edit_settings() -> None:
    """
    Interactively edit the stored framework and editor command.

    Current settings are pre-populated so the user only changes what they want.
    An empty editor command means "use the operating system's default
    application". Errors while reading or writing the settings file propagate
    to the caller.

    Raises:
        typer.Exit: If the user cancels a prompt.
        SettingsReadError: If the existing settings file is unreadable.
        SettingsWriteError: If the settings cannot be saved.
    """
    config = get_config_file()
    current_framework = config.get("framework")
    current_editor = (config.get("editor") or "").strip()

    default = (
        SupportedFramework(current_framework)
        if current_framework in list(SupportedFramework)
        else None
    )
    framework = make_framework_selection(default)

    pr("\n[bold green]Editor command (leave empty for the system default).[/bold green]\n")
    questions = [
        inquirer.Text("editor", message="Enter editor command", default=current_editor),
    ]

    answers = inquirer.prompt(questions, theme=GreenPassion())

    if not answers:
        raise typer.Exit(code=1)

    editor = (answers.get("editor") or "").strip()

    save_config(str(framework), editor or None)
    pr("[green]Settings saved.[/green]\n")
