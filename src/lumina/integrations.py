"""Optional integrations behind small capability interfaces.

The command surface talks to a :class:`PresenceBroadcaster` (shares "now
playing" with a chat client) and a :class:`CodecProbe` (reports whether an
extra codec is available).  Neither has a real backend yet; the defaults
do nothing and report fixed answers.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class PresenceBroadcaster(Protocol):
    def update(self, data: Any) -> bool: ...

    def clear(self) -> bool: ...


class CodecProbe(Protocol):
    def supported(self) -> bool: ...


class NullPresenceBroadcaster:
    """Accepts every update and publishes nothing."""

    def update(self, data: Any) -> bool:
        return True

    def clear(self) -> bool:
        return True


class NullCodecProbe:
    """Reports the codec as unavailable."""

    def supported(self) -> bool:
        return False


class SoundfileCodecProbe:
    """Reports whether libsndfile can handle the container *fmt*.

    Requires the ``soundfile`` package (``pip install lumina[codec]``).
    Reports ``False`` when the package or libsndfile cannot be loaded.
    """

    def __init__(self, fmt: str = "FLAC") -> None:
        self._fmt = fmt.upper()

    @property
    def format(self) -> str:
        return self._fmt

    def supported(self) -> bool:
        try:
            import soundfile as sf
        except (ImportError, OSError) as exc:
            logger.debug("soundfile unavailable: %s", exc)
            return False

        return self._fmt in sf.available_formats()
