"""Shared constants and enumerations for the puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Difficulty(str, Enum):
    """Puzzle difficulty tiers."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    EXPERT = "EXPERT"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


class AnchorPolicy(str, Enum):
    """Row used for the first (anchor) word."""

    CENTER = "CENTER"
    UPPER_THIRD = "UPPER_THIRD"

    def anchor_row(self, grid_size: int) -> int:
        if self is AnchorPolicy.UPPER_THIRD:
            return grid_size // 3
        return grid_size // 2


class PuzzleStatus(str, Enum):
    LOADING = "LOADING"
    PLAYING = "PLAYING"
    COMPLETED = "COMPLETED"


DEFAULT_GRID_SIZE = 15
HINT_COUNT = 3
# XP deducted per number of hints revealed before solving.
HINT_PENALTIES: Tuple[int, ...] = (0, 15, 30, 45)
BASE_WORD_XP = 100
MIN_WORD_XP = 20


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
