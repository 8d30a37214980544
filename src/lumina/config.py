"""Load lumina settings from a TOML file.

Example ``settings.toml``::

    data-dir = "/srv/lumina"
    log-level = "INFO"
"""

from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path


def _user_config_dir() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def default_settings_path() -> Path:
    """Return the default settings file location.

    Falls back to the current directory when no home directory is known.
    """
    try:
        root = _user_config_dir()
    except RuntimeError:
        root = Path(".")
    return root / "lumina" / "settings.toml"


DEFAULT_SETTINGS_PATH = default_settings_path()


@dataclass
class Settings:
    """Lumina startup settings."""

    data_dir: str | None = None
    log_level: str = "WARNING"


def load_settings(path: Path | str) -> Settings:
    """Load settings from a TOML file.

    Returns a :class:`Settings` with defaults for any missing keys.
    If the file does not exist, returns a default :class:`Settings`.
    """
    path = Path(path)
    if not path.is_file():
        return Settings()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Settings(
        data_dir=data.get("data-dir", Settings.data_dir),
        log_level=str(data.get("log-level", Settings.log_level)).upper(),
    )
