"""Entry points invoked by the front end.

Each method is an independent unit of work.  Filesystem failures surface as
:class:`CommandError` carrying a short message; "not found" is never an
error and shows up as ``False``, ``None`` or an empty list instead.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from lumina.files import (
    FileBuffer,
    FileInfo,
    InvalidPathError,
    TrackMetadata,
    extract_metadata,
    file_exists,
    get_file_info,
    read_file_buffer,
)
from lumina.integrations import (
    CodecProbe,
    NullCodecProbe,
    NullPresenceBroadcaster,
    PresenceBroadcaster,
)
from lumina.library import filter_audio_paths, scan_folder
from lumina.store import ApiKeyService, ConfigStore, IndexService, PlaylistService

logger = logging.getLogger(__name__)

FolderPicker = Callable[[], str | None]
FilePicker = Callable[[], Sequence[str]]


class CommandError(Exception):
    """Raised when a command fails; ``str(exc)`` describes the failure."""


class CommandSurface:
    """Wires the file operations and the persisted state together."""

    def __init__(
        self,
        store: ConfigStore,
        *,
        presence: PresenceBroadcaster | None = None,
        codec_probe: CodecProbe | None = None,
        folder_picker: FolderPicker | None = None,
        file_picker: FilePicker | None = None,
    ) -> None:
        self._store = store
        self._api_key = ApiKeyService(store)
        self._playlist = PlaylistService(store)
        self._index = IndexService(store)
        self._presence = presence if presence is not None else NullPresenceBroadcaster()
        self._codec_probe = codec_probe if codec_probe is not None else NullCodecProbe()
        self._folder_picker = folder_picker
        self._file_picker = file_picker

    @property
    def store(self) -> ConfigStore:
        return self._store

    # -- files ---------------------------------------------------------------

    def read_file_buffer(self, path: str) -> FileBuffer | None:
        try:
            return read_file_buffer(path)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            raise CommandError(str(exc)) from exc

    def file_exists(self, path: str) -> bool:
        return file_exists(path)

    def get_file_info(self, path: str) -> FileInfo:
        try:
            return get_file_info(path)
        except InvalidPathError as exc:
            raise CommandError(str(exc)) from exc

    def extract_metadata(self, path: str) -> TrackMetadata:
        try:
            return extract_metadata(path)
        except InvalidPathError as exc:
            raise CommandError(str(exc)) from exc

    def scan_folder(self, directory: str) -> list[str]:
        try:
            return scan_folder(directory)
        except OSError as exc:
            logger.warning("Cannot list %s: %s", directory, exc)
            raise CommandError(str(exc)) from exc

    # -- pickers -------------------------------------------------------------

    def open_folder_dialog(self) -> list[str]:
        """Ask the folder picker for a directory and scan it.

        Returns an empty list when there is no picker or the user cancels.
        """
        if self._folder_picker is None:
            return []
        directory = self._folder_picker()
        if not directory:
            return []
        return self.scan_folder(directory)

    def open_file_dialog(self) -> list[str]:
        """Return the audio files chosen with the file picker."""
        if self._file_picker is None:
            return []
        return filter_audio_paths(self._file_picker() or [])

    # -- api key -------------------------------------------------------------

    def get_api_key(self) -> str:
        return self._api_key.get()

    def set_api_key(self, api_key: str) -> bool:
        try:
            self._api_key.set(api_key)
        except (OSError, TypeError) as exc:
            raise CommandError(str(exc)) from exc
        return True

    def has_api_key(self) -> bool:
        return self._api_key.exists()

    # -- playlist ------------------------------------------------------------

    def save_playlist(self, items: Sequence[Any]) -> bool:
        try:
            self._playlist.save(items)
        except (OSError, TypeError) as exc:
            raise CommandError(str(exc)) from exc
        return True

    def get_playlist(self) -> list[Any]:
        return self._playlist.get()

    def save_current_index(self, index: int) -> bool:
        try:
            self._index.save(index)
        except (OSError, TypeError, ValueError) as exc:
            raise CommandError(str(exc)) from exc
        return True

    def get_current_index(self) -> int:
        return self._index.get()

    # -- integrations --------------------------------------------------------

    def update_discord_presence(self, data: Any) -> bool:
        return self._presence.update(data)

    def clear_discord_presence(self) -> bool:
        return self._presence.clear()

    def check_codec_support(self) -> bool:
        return self._codec_probe.supported()
