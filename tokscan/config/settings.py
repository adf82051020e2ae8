"""
settings.py

Application configuration management for tokscan.

Features:
- Centralized configuration using Pydantic settings
- Location of the per-user variables file
- Loading of variable mappings from JSON

Usage:
Import appsettings for application configuration values.
"""

import json
from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic_settings import BaseSettings, SettingsConfigDict
from tokscan.lib.log import LOG
from tokscan.models.dataModel import Delimiters

# Per-user configuration directory and default variables file
CONFIG_DIR: Final[Path] = Path(user_config_dir("tokscan", ""))
VARS_FILE: Final[Path] = CONFIG_DIR / "vars.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with the
    TOKSCAN_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        open_token: Marker opening a variable span
        close_token: Marker closing a variable span
        enable_default_value: Allow `${key:default}` syntax
        default_value_separator: Separator between key and default value
        file_open_token: Marker opening a file inclusion span
        file_close_token: Marker closing a file inclusion span
        file_max_size: Largest file (in bytes) that may be included
        file_base_path: Directory that included files must live under
    """

    beQuiet: bool = False

    open_token: str = "${"
    close_token: str = "}"
    enable_default_value: bool = False
    default_value_separator: str = ":"

    file_open_token: str = "%{"
    file_close_token: str = "}"
    file_max_size: int = 1024 * 1024
    file_base_path: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="TOKSCAN_",
        case_sensitive=False,
        extra="allow",
    )


def delimiters_get(settings: App, include: bool = False) -> Delimiters:
    """
    Build the validated delimiter pair from settings.

    Args:
        settings: Application settings
        include: Return the file inclusion pair instead of the variable pair

    Returns:
        Delimiters: The frozen delimiter pair

    Raises:
        pydantic.ValidationError: If either token is empty
    """
    if include:
        return Delimiters(open=settings.file_open_token, close=settings.file_close_token)
    return Delimiters(open=settings.open_token, close=settings.close_token)


def variables_load(path: Path) -> dict[str, str]:
    """
    Load a variable mapping from a JSON file.

    A missing file is not an error and yields an empty mapping; the JSON
    document must otherwise be an object. Values are kept as their text form.

    Args:
        path: Location of the JSON file

    Returns:
        dict[str, str]: Variable names mapped to values

    Raises:
        ValueError: If the file cannot be read, is not valid JSON, or is not
            a JSON object
    """
    if not path.exists():
        LOG(f"Variables file not found, using empty mapping: {path}")
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read variables file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in variables file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Variables file {path} must contain a JSON object")

    return {str(key): str(value) for key, value in data.items()}


appsettings: Final[App] = App()
