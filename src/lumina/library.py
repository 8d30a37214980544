"""Audio file catalog: lists the playable files of a folder.

Only the direct entries of the folder are considered; sub-directories are not
descended into.  An entry is kept when its extension, compared
case-insensitively, is one of :data:`AUDIO_EXTENSIONS`::

    <folder>/
        01 - Intro.mp3        kept
        Artist - Song.FLAC    kept
        cover.jpg             dropped
        README                dropped (no extension)

Paths are returned absolute and sorted by their full path string, so
track-number prefixes produce the expected order.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS: frozenset[str] = frozenset(
    {".mp3", ".wav", ".ogg", ".flac", ".m4a", ".aac", ".wma"}
)


def is_audio_path(path: str | Path) -> bool:
    """Return ``True`` if *path* carries a recognised audio extension."""
    return Path(path).suffix.lower() in AUDIO_EXTENSIONS


def scan_folder(directory: str | Path) -> list[str]:
    """Return the sorted absolute paths of the audio files in *directory*.

    Raises :class:`OSError` if the directory itself cannot be listed.
    Entries are matched by name only, so a sub-directory or a dangling
    symlink with an audio extension is listed too.
    """
    root = os.path.abspath(directory)
    paths: list[str] = []
    with os.scandir(root) as entries:
        for entry in entries:
            if is_audio_path(entry.name):
                paths.append(os.path.join(root, entry.name))

    paths.sort()
    logger.debug("Found %d audio file(s) in %s", len(paths), root)
    return paths


def filter_audio_paths(paths: Iterable[str]) -> list[str]:
    """Keep the entries of *paths* that carry a recognised audio extension.

    Order is preserved; nothing is looked up on disk.
    """
    return [str(p) for p in paths if is_audio_path(p)]
