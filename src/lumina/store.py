"""Persisted application state: API key, playlist and current index.

Everything lives in one pretty-printed JSON document::

    <data dir>/com.lumina.musicplayer/config.json

    {
      "api_key": "...",
      "playlist": [ ... ],
      "current_song_index": 3
    }

Fields are written only once they have been set; an unset field is left out
of the document rather than written as ``null``.  Playlist entries are opaque
JSON values and are stored exactly as given.

Loading never fails: a missing, unreadable or malformed document reads as an
empty :class:`AppConfig`.  Every read-modify-write goes through
:meth:`ConfigStore.update`, which holds the store lock for the whole cycle,
so updates of different fields made through one store do not overwrite
each other.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

logger = logging.getLogger(__name__)

APP_IDENTIFIER = "com.lumina.musicplayer"
CONFIG_FILENAME = "config.json"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _data_root() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def default_data_dir() -> Path:
    """Return the per-application data directory for this platform.

    Falls back to the current directory when no home directory is known.
    """
    try:
        root = _data_root()
    except RuntimeError:
        root = Path(".")
    return root / APP_IDENTIFIER


class MalformedConfigError(ValueError):
    """Raised when a config document does not have the expected shape."""


@dataclass
class AppConfig:
    """The persisted document.  ``None`` means the field was never set."""

    api_key: str | None = None
    playlist: list[Any] | None = None
    current_song_index: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AppConfig:
        if not isinstance(data, dict):
            raise MalformedConfigError("config document is not a JSON object")

        api_key = data.get("api_key")
        if api_key is not None and not isinstance(api_key, str):
            raise MalformedConfigError("api_key must be a string")

        playlist = data.get("playlist")
        if playlist is not None and not isinstance(playlist, list):
            raise MalformedConfigError("playlist must be an array")

        index = data.get("current_song_index")
        if index is not None:
            if isinstance(index, bool) or not isinstance(index, int):
                raise MalformedConfigError("current_song_index must be an integer")
            if not _INT32_MIN <= index <= _INT32_MAX:
                raise MalformedConfigError("current_song_index is out of range")

        return cls(api_key=api_key, playlist=playlist, current_song_index=index)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.api_key is not None:
            data["api_key"] = self.api_key
        if self.playlist is not None:
            data["playlist"] = self.playlist
        if self.current_song_index is not None:
            data["current_song_index"] = self.current_song_index
        return data


class ConfigStore:
    """Owns all reads and writes of the config document in *base_dir*."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)
        self._lock = threading.RLock()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def path(self) -> Path:
        return self._base_dir / CONFIG_FILENAME

    def load(self) -> AppConfig:
        """Read the document, or return an empty :class:`AppConfig`."""
        with self._lock:
            try:
                self._base_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning("Cannot create data directory %s: %s", self._base_dir, exc)

            path = self.path
            try:
                text = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.debug("No config file at %s, using defaults", path)
                return AppConfig()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Cannot read config file %s: %s", path, exc)
                return AppConfig()

            try:
                return AppConfig.from_dict(json.loads(text))
            except ValueError as exc:
                logger.warning("Ignoring malformed config file %s: %s", path, exc)
                return AppConfig()

    def save(self, config: AppConfig) -> None:
        """Overwrite the document with *config*.

        The new content is written to a temporary file in the same directory
        and then moved over the old one.  Raises :class:`OSError` on failure.
        """
        content = json.dumps(config.to_dict(), indent=2, ensure_ascii=False)
        with self._lock:
            path = self.path
            try:
                self._base_dir.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{CONFIG_FILENAME}.", suffix=".tmp", dir=self._base_dir
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as f:
                        f.write(content)
                    os.replace(tmp_name, path)
                except BaseException:
                    Path(tmp_name).unlink(missing_ok=True)
                    raise
            except OSError as exc:
                logger.error("Failed to write config file %s: %s", path, exc)
                raise
            logger.debug("Saved config file %s", path)

    def update(self, mutate: Callable[[AppConfig], None]) -> AppConfig:
        """Load, apply *mutate* in place, save, and return the new document."""
        with self._lock:
            config = self.load()
            mutate(config)
            self.save(config)
            return config


class ApiKeyService:
    """Access to the ``api_key`` field."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    def get(self) -> str:
        return self._store.load().api_key or ""

    def set(self, api_key: str) -> None:
        if not isinstance(api_key, str):
            raise TypeError(f"api key must be a string, not {type(api_key).__name__}")

        def _mutate(config: AppConfig) -> None:
            config.api_key = api_key

        self._store.update(_mutate)

    def exists(self) -> bool:
        """Return ``True`` once a key has been stored, even an empty one."""
        return self._store.load().api_key is not None


class PlaylistService:
    """Access to the ``playlist`` field.  Entries are stored as given."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    def get(self) -> list[Any]:
        playlist = self._store.load().playlist
        return playlist if playlist is not None else []

    def save(self, items: Sequence[Any]) -> None:
        if isinstance(items, (str, bytes, dict)):
            raise TypeError("playlist must be a sequence of entries")

        def _mutate(config: AppConfig) -> None:
            config.playlist = list(items)

        self._store.update(_mutate)


class IndexService:
    """Access to the ``current_song_index`` field; ``-1`` means no selection."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    def get(self) -> int:
        index = self._store.load().current_song_index
        return index if index is not None else -1

    def save(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an integer, not {type(index).__name__}")
        if not _INT32_MIN <= index <= _INT32_MAX:
            raise ValueError(f"index out of range: {index}")

        def _mutate(config: AppConfig) -> None:
            config.current_song_index = index

        self._store.update(_mutate)
