"""Current score tracking and the persisted best score."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import SCORE_FILE, TICKS_PER_POINT

logger = logging.getLogger(__name__)


def display_points(score: int) -> int:
    """Convert a tick score into the points shown to the player."""
    return score // TICKS_PER_POINT


class ScoreKeeper:
    """Tracks the running score and keeps the best one in a small JSON file.

    A missing or unreadable file counts as a best score of 0. Write failures
    are logged and the in-memory best is kept.
    """

    def __init__(self, path: Path | str | None = SCORE_FILE) -> None:
        self.path = Path(path) if path is not None else None
        self._current = 0
        self._best = self.load_best_score()

    def current_score(self) -> int:
        return self._current

    def best_score(self) -> int:
        return self._best

    def track(self, score: int) -> None:
        self._current = score

    def load_best_score(self) -> int:
        if self.path is None or not self.path.exists():
            return 0
        try:
            with open(self.path, "r") as f:
                value = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable best score file {self.path}: {e}")
            return 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning(f"Ignoring invalid best score {value!r} in {self.path}")
            return 0
        logger.info(f"Loaded best score {value}")
        return value

    def record_score(self, score: int) -> bool:
        """Raise the best score to ``score`` if greater. Returns True if it changed."""
        self._current = score
        if score <= self._best:
            return False
        self._best = score
        self._save()
        return True

    def _save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(self._best, f)
        except OSError as e:
            logger.error(f"Failed to save best score: {e}")
