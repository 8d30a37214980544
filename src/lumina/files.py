"""Read audio files and describe them for the front end.

Nothing here parses audio containers or embedded tags: the artist and title
of a track are inferred from its file name only.
"""

from __future__ import annotations

import base64
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lumina.mime import mime_type_for
from lumina.naming import UNKNOWN_ALBUM, infer_artist_title


class InvalidPathError(ValueError):
    """Raised when a path has no file-name component to describe."""


@dataclass(frozen=True)
class FileBuffer:
    """The whole content of a file, base64-encoded for transport."""

    buffer: str
    mime_type: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"buffer": self.buffer, "mimeType": self.mime_type, "name": self.name}


@dataclass(frozen=True)
class FileInfo:
    """Name-derived description of a file; ``size`` is ``None`` if unknown."""

    title: str
    artist: str
    name: str
    size: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "artist": self.artist,
            "name": self.name,
        }
        if self.size is not None:
            data["size"] = self.size
        return data


@dataclass(frozen=True)
class TrackMetadata:
    """Basic metadata used when no tag reader is available."""

    title: str
    artist: str
    album: str = UNKNOWN_ALBUM
    cover: str | None = None
    duration: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
        }
        if self.cover is not None:
            data["cover"] = self.cover
        if self.duration is not None:
            data["duration"] = self.duration
        return data


def file_exists(path: str | Path) -> bool:
    """Return ``True`` if *path* exists.  Never raises."""
    try:
        return os.path.exists(path)
    except (TypeError, ValueError):
        return False


def read_file_buffer(path: str | Path) -> FileBuffer | None:
    """Load *path* into memory and encode it for transport.

    Returns ``None`` if the path does not exist.  Raises :class:`OSError` if
    it exists but cannot be read.  The whole file is buffered at once.
    """
    path = Path(path)
    if not file_exists(path):
        return None

    data = path.read_bytes()
    return FileBuffer(
        buffer=base64.b64encode(data).decode("ascii"),
        mime_type=mime_type_for(path.suffix),
        name=path.name or "unknown",
    )


def _stem(name: str) -> str:
    # "Song." has the stem "Song"; ".hidden" has no extension.
    idx = name.rfind(".")
    if idx <= 0:
        return name
    return name[:idx]


def _split_name(path: str | Path) -> tuple[str, str]:
    name = Path(path).name
    if name in ("", ".", ".."):
        raise InvalidPathError(f"Path has no file name: {str(path)!r}")
    return name, _stem(name)


def get_file_info(path: str | Path) -> FileInfo:
    """Describe *path* from its name and, when available, its size.

    The file does not need to exist; ``size`` is then ``None``.
    Raises :class:`InvalidPathError` for a path without a file name.
    """
    name, stem = _split_name(path)
    try:
        size: int | None = os.stat(path).st_size
    except (OSError, ValueError):
        size = None

    artist, title = infer_artist_title(stem)
    return FileInfo(title=title, artist=artist, name=name, size=size)


def extract_metadata(path: str | Path) -> TrackMetadata:
    """Return the basic :class:`TrackMetadata` for *path*."""
    info = get_file_info(path)
    return TrackMetadata(title=info.title, artist=info.artist)
