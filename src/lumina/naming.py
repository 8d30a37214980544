"""Infer artist and title from a file-name stem.

Recognised shapes::

    Daft Punk - One More Time   -> ("Daft Punk", "One More Time")
    03 - Track Name             -> ("Unknown Artist", "Track Name")
    justtitle                   -> ("Unknown Artist", "justtitle")

Only the first ``" - "`` counts; everything after it is the title, including
any further separators.  A track number is recognised only when the left part
is made of ASCII digits.
"""

from __future__ import annotations

SEPARATOR = " - "
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"

_ASCII_DIGITS = frozenset("0123456789")


def _is_track_number(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits.
    return all(ch in _ASCII_DIGITS for ch in text)


def infer_artist_title(stem: str) -> tuple[str, str]:
    """Return ``(artist, title)`` parsed from *stem*."""
    idx = stem.find(SEPARATOR)
    if idx < 0:
        return UNKNOWN_ARTIST, stem

    left = stem[:idx].strip()
    right = stem[idx + len(SEPARATOR):].strip()
    if _is_track_number(left):
        return UNKNOWN_ARTIST, right
    return left, right
