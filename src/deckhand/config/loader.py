"""Configuration file locations and TOML reading/writing."""

import os
import tempfile
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from .exceptions import ConfigFileReadError, ConfigFileWriteError

GLOBAL_CONFIG_FILE = "config.toml"
PROJECT_CONFIG_FILE = "Deckhand.toml"
ERROR_LOG_FILE = "logs.txt"


def get_config_home() -> Path:
    """Get the deckhand config home directory.

    Priority:
    1. $DECKHAND_CONFIG_HOME if set
    2. $XDG_CONFIG_HOME/deckhand if XDG_CONFIG_HOME is set
    3. ~/.config/deckhand (default)

    Returns:
        Path to the deckhand config home directory.
    """
    if config_home := os.environ.get("DECKHAND_CONFIG_HOME"):
        return Path(config_home)

    if xdg_config_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config_home) / "deckhand"

    return Path.home() / ".config" / "deckhand"


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dict.

    Args:
        path: Path to the TOML file.

    Returns:
        Dictionary of configuration values.

    Raises:
        ConfigFileReadError: If the file can't be read or isn't valid TOML.
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigFileReadError(path, e.strerror or str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileReadError(path, f"invalid TOML: {e}") from e


def write_toml_file(path: Path, data: dict[str, Any]) -> None:
    """Write a dict to a TOML file, replacing any existing file.

    The content is written to a temporary file in the same directory and
    then moved over the target, so readers never see a partial file.

    Raises:
        ConfigFileWriteError: If the directory or file can't be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
    except OSError as e:
        raise ConfigFileWriteError(path, e.strerror or str(e)) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            tomli_w.dump(data, f)
        os.replace(tmp_path, path)
    except (OSError, TypeError) as e:
        tmp_path.unlink(missing_ok=True)
        raise ConfigFileWriteError(path, str(e)) from e
