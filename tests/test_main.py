"""
Tests for the CLI entry point using typer's CliRunner.

Tests cover:
- main: found / not-found exit codes, --project and --solution-dir handling,
  --print-only, framework selection, settings and editor errors
- normalize_framework: case-insensitive matching
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from core.exceptions import EditorLaunchError, SettingsReadError
from main import app, normalize_framework
from models import SupportedFramework

runner = CliRunner()


@pytest.fixture
def no_settings(mocker):
    """Keep the user's real settings file out of the tests."""
    return mocker.patch("main.get_config_file", return_value={})


@pytest.fixture
def solution(tmp_path):
    """A solution with one WPF project holding a View/ViewModel pair."""
    for rel in (
        "App/App.csproj",
        "App/UI/CustomerView.xaml",
        "App/VM/CustomerViewModel.cs",
        "App/Notes.txt",
    ):
        (tmp_path / rel).parent.mkdir(parents=True, exist_ok=True)
        (tmp_path / rel).touch()
    return tmp_path


# ============================================================================
# Tests for main
# ============================================================================


@pytest.mark.unit
def test_print_only_prints_counterpart(solution, no_settings):
    result = runner.invoke(
        app,
        [
            str(solution / "App" / "UI" / "CustomerView.xaml"),
            "--solution-dir",
            str(solution),
            "--print-only",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == str(solution / "App" / "VM" / "CustomerViewModel.cs")


@pytest.mark.unit
def test_explicit_project_manifest(solution, no_settings):
    result = runner.invoke(
        app,
        [
            str(solution / "App" / "VM" / "CustomerViewModel.cs"),
            "--project",
            str(solution / "App" / "App.csproj"),
            "-p",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == str(solution / "App" / "UI" / "CustomerView.xaml")


@pytest.mark.unit
@pytest.mark.mock
def test_found_counterpart_opened_with_editor(solution, no_settings, mocker):
    mock_run = mocker.patch("adapters.editor.subprocess.run")

    result = runner.invoke(
        app,
        [
            str(solution / "App" / "UI" / "CustomerView.xaml"),
            "--solution-dir",
            str(solution),
            "--editor",
            "code --goto",
        ],
    )

    assert result.exit_code == 0
    assert "Opened:" in result.output
    mock_run.assert_called_once_with(
        ["code", "--goto", str(solution / "App" / "VM" / "CustomerViewModel.cs")],
        check=True,
    )


@pytest.mark.unit
@pytest.mark.mock
def test_editor_from_settings(solution, mocker):
    mocker.patch("main.get_config_file", return_value={"editor": "subl"})
    mock_run = mocker.patch("adapters.editor.subprocess.run")

    result = runner.invoke(
        app,
        [
            str(solution / "App" / "UI" / "CustomerView.xaml"),
            "--solution-dir",
            str(solution),
        ],
        env={"MVVMJUMP_EDITOR": ""},
    )

    assert result.exit_code == 0
    assert mock_run.call_args.args[0][0] == "subl"


@pytest.mark.unit
def test_no_active_document(solution, no_settings):
    result = runner.invoke(app, ["--solution-dir", str(solution)])

    assert result.exit_code == 1
    assert "No active document" in result.output


@pytest.mark.unit
def test_unrecognized_file(solution, no_settings):
    result = runner.invoke(
        app,
        [str(solution / "App" / "Notes.txt"), "--solution-dir", str(solution), "-p"],
    )

    assert result.exit_code == 1
    assert "neither a View nor a ViewModel" in result.output


@pytest.mark.unit
def test_file_outside_projects(solution, tmp_path_factory, no_settings):
    elsewhere = tmp_path_factory.mktemp("elsewhere") / "OrderView.xaml"
    elsewhere.touch()

    result = runner.invoke(
        app, [str(elsewhere), "--solution-dir", str(solution), "-p"]
    )

    assert result.exit_code == 1
    assert "No project contains" in result.output


@pytest.mark.unit
def test_counterpart_missing(solution, no_settings):
    view = solution / "App" / "UI" / "OrderView.xaml"
    view.touch()

    result = runner.invoke(app, [str(view), "--solution-dir", str(solution), "-p"])

    assert result.exit_code == 1
    assert "find a counterpart" in result.output


@pytest.mark.unit
def test_framework_option_changes_convention(tmp_path, no_settings):
    for rel in ("App/App.csproj", "App/MainView.axaml", "App/MainViewModel.cs"):
        (tmp_path / rel).parent.mkdir(parents=True, exist_ok=True)
        (tmp_path / rel).touch()

    result = runner.invoke(
        app,
        [
            str(tmp_path / "App" / "MainViewModel.cs"),
            "--solution-dir",
            str(tmp_path),
            "--framework",
            "avalonia",
            "-p",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == str(tmp_path / "App" / "MainView.axaml")


@pytest.mark.unit
@pytest.mark.mock
def test_invalid_framework_prompts(solution, no_settings, mocker):
    mock_select = mocker.patch(
        "main.make_framework_selection", return_value=SupportedFramework.WPF
    )

    result = runner.invoke(
        app,
        [
            str(solution / "App" / "UI" / "CustomerView.xaml"),
            "--solution-dir",
            str(solution),
            "--framework",
            "Qt",
            "-p",
        ],
    )

    assert result.exit_code == 0
    assert "Not a valid framework" in result.output
    mock_select.assert_called_once()


@pytest.mark.unit
@pytest.mark.mock
def test_settings_read_error(solution, mocker):
    mocker.patch(
        "main.get_config_file",
        side_effect=SettingsReadError(file_path="/home/u/.mvvmjump/settings.json"),
    )

    result = runner.invoke(
        app, [str(solution / "App" / "UI" / "CustomerView.xaml"), "-p"]
    )

    assert result.exit_code == 1
    assert "Settings Error" in result.output


@pytest.mark.unit
@pytest.mark.mock
def test_editor_launch_error(solution, no_settings, mocker):
    mocker.patch(
        "adapters.editor.CliEditorHost.open_file",
        side_effect=EditorLaunchError("Editor exited with status 2", command=["vim"]),
    )

    result = runner.invoke(
        app,
        [str(solution / "App" / "UI" / "CustomerView.xaml"), "--solution-dir", str(solution)],
    )

    assert result.exit_code == 1
    assert "Editor Error" in result.output


@pytest.mark.unit
@pytest.mark.mock
def test_configure_runs_settings_editor(mocker):
    mock_edit = mocker.patch("main.edit_settings")

    result = runner.invoke(app, ["--configure"])

    assert result.exit_code == 0
    mock_edit.assert_called_once()


# ============================================================================
# Tests for normalize_framework
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("wpf", SupportedFramework.WPF),
        ("  Avalonia ", SupportedFramework.AVALONIA),
        ("wpf (visual basic)", SupportedFramework.WPF_VB),
    ],
)
def test_normalize_framework(value, expected):
    assert normalize_framework(value) is expected


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "Qt"])
def test_normalize_framework_invalid(value):
    with pytest.raises(ValueError):
        normalize_framework(value)


# ============================================================================
# Tests for symlinked workspaces, discovery and --search-all
# ============================================================================


@pytest.mark.unit
def test_symlinked_solution_dir(tmp_path, no_settings):
    """Active file and --solution-dir given through a symlink still resolve."""
    real = tmp_path / "real"
    for rel in ("App/App.csproj", "App/CustomerView.xaml", "App/VM/CustomerViewModel.cs"):
        (real / rel).parent.mkdir(parents=True, exist_ok=True)
        (real / rel).touch()
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported on this platform")

    result = runner.invoke(
        app,
        [
            str(link / "App" / "CustomerView.xaml"),
            "--solution-dir",
            str(link),
            "--print-only",
        ],
    )

    assert result.exit_code == 0
    assert (
        Path(result.output.strip()).resolve()
        == (real / "App" / "VM" / "CustomerViewModel.cs").resolve()
    )


@pytest.mark.unit
@pytest.mark.mock
def test_unrecognized_file_skips_project_discovery(solution, no_settings, mocker):
    mock_discover = mocker.patch("adapters.editor.discover_project_paths")

    result = runner.invoke(
        app,
        [str(solution / "App" / "Notes.txt"), "--solution-dir", str(solution), "-p"],
    )

    assert result.exit_code == 1
    assert "neither a View nor a ViewModel" in result.output
    mock_discover.assert_not_called()


@pytest.mark.unit
def test_counterpart_in_bin_needs_search_all(solution, no_settings):
    view = solution / "App" / "UI" / "OrderView.xaml"
    view.touch()
    view_model = solution / "App" / "bin" / "OrderViewModel.cs"
    view_model.parent.mkdir()
    view_model.touch()
    args = [str(view), "--solution-dir", str(solution), "-p"]

    skipped = runner.invoke(app, args)
    searched = runner.invoke(app, [*args, "--search-all"])

    assert skipped.exit_code == 1
    assert searched.exit_code == 0
    assert searched.output.strip() == str(view_model)
