"""In-memory record of pronunciation scores per shloka."""
from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple


class ScoreBook:
    """Pronunciation attempts keyed by shloka id (e.g. ``"2.47"``)."""

    def __init__(self):
        self._scores: Dict[str, List[int]] = {}
        self._lock = threading.Lock()

    def add_score(self, shloka_id: str, score: int) -> None:
        if not 0 <= score <= 100:
            raise ValueError(f"Score must be within 0-100, got {score}")
        with self._lock:
            self._scores.setdefault(shloka_id, []).append(score)

    def best_score(self, shloka_id: str) -> Optional[int]:
        with self._lock:
            attempts = self._scores.get(shloka_id)
            return max(attempts) if attempts else None

    def scores(self, shloka_id: str) -> Tuple[int, ...]:
        with self._lock:
            return tuple(self._scores.get(shloka_id, ()))

    def reset(self) -> None:
        with self._lock:
            self._scores.clear()
