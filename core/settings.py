import json
from pathlib import Path

from core.exceptions import SettingsReadError, SettingsWriteError


CONFIG_DIR = Path.home() / ".mvvmjump"
CONFIG_FILE = CONFIG_DIR / "settings.json"


def get_config_file(config_file: Path | None = None) -> dict:
    """
    Load the user's settings.

    Args:
        config_file: Settings file to read. Defaults to ~/.mvvmjump/settings.json.

    Returns:
        dict: The stored settings ("framework", "editor"), or an empty dict if
        the file does not exist.

    Raises:
        SettingsReadError: If the file cannot be read or does not hold a JSON object.
    """
    config_file = config_file or CONFIG_FILE
    if not config_file.exists():
        return {}

    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsReadError(
            message=f"Failed to read settings file: {config_file}",
            file_path=str(config_file),
            original_exception=e,
        ) from e

    if not isinstance(data, dict):
        raise SettingsReadError(
            message=f"Settings file does not contain a JSON object: {config_file}",
            file_path=str(config_file),
        )
    return data


def save_config(
    framework: str, editor: str | None, config_file: Path | None = None
) -> None:
    """
    Store the user's settings, replacing any previous ones.

    Args:
        framework: Name of the selected framework (a SupportedFramework value).
        editor: Editor command line, or None/empty to use the OS default opener.
        config_file: Settings file to write. Defaults to ~/.mvvmjump/settings.json.

    Raises:
        SettingsWriteError: If the directory or file cannot be written.
    """
    config_file = config_file or CONFIG_FILE
    data = json.dumps({"framework": framework, "editor": editor or None}, indent=2)

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(data, encoding="utf-8")
    except OSError as e:
        raise SettingsWriteError(
            message=f"Failed to write settings file: {config_file}",
            file_path=str(config_file),
            original_exception=e,
        ) from e
