"""Map audio file extensions to playback MIME types."""

from __future__ import annotations

MIME_TYPES: dict[str, str] = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "flac": "audio/flac",
    "m4a": "audio/mp4",
    "aac": "audio/aac",
    "wma": "audio/x-ms-wma",
}

DEFAULT_MIME_TYPE = "audio/mpeg"


def mime_type_for(extension: str | None) -> str:
    """Return the MIME type for *extension* (case-insensitive).

    A leading dot is accepted, so both ``"flac"`` and ``".FLAC"`` resolve to
    ``"audio/flac"``.  Unknown or missing extensions fall back to
    :data:`DEFAULT_MIME_TYPE`.
    """
    if not extension:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(extension.lstrip(".").lower(), DEFAULT_MIME_TYPE)
