"""In-memory cache for synthesized reference audio."""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional


def make_cache_key(text: str, pace: float, speaker: str, pitch: float, model: str) -> str:
    return f"{text}_{pace}_{speaker}_{pitch}_{model}"


class AudioCache:
    """Least-recently-used store of base64 audio keyed by text and voice settings.

    ``max_entries=None`` keeps everything until ``clear()`` is called.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive or None")
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            audio = self._entries.get(key)
            if audio is not None:
                self._entries.move_to_end(key)
            return audio

    def put(self, key: str, audio_base64: str) -> None:
        with self._lock:
            self._entries[key] = audio_base64
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
