"""The running score and the table of best scores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

MAX_HIGH_SCORES = 10
DEFAULT_PLAYER_NAME = "Player"

_log = logging.getLogger(__name__)


@dataclass
class Score:
    """Stars collected in the current game."""

    value: int = 0


@dataclass
class HighScores:
    """Best scores, highest first, at most ``MAX_HIGH_SCORES`` entries."""

    scores: list[tuple[str, int]] = field(default_factory=list)

    def record(self, name: str, score: int) -> list[tuple[str, int]]:
        """Add a finished game's score and return the updated table."""
        self.scores.append((name, score))
        self.scores.sort(key=lambda entry: entry[1], reverse=True)
        del self.scores[MAX_HIGH_SCORES:]
        _log.info("High Scores: %s", self.scores)
        return self.scores