"""Data models supporting the puzzle builder and the play session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import HINT_COUNT, Direction
from .exceptions import MalformedWordError


@dataclass(frozen=True)
class WordEntry:
    """An answer with its clue, category and three hints of rising specificity.

    ``hints`` is either empty (no hints supplied, as for hand-built grids) or
    exactly ``HINT_COUNT`` entries long. Use ``make_entry`` to pad partial lists.
    """

    answer: str
    clue: str = ""
    category: str = ""
    hints: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        hints = tuple(self.hints)
        if hints and len(hints) != HINT_COUNT:
            raise MalformedWordError(f"{self.answer!r} needs {HINT_COUNT} hints, got {len(hints)}")
        object.__setattr__(self, "hints", hints)


@dataclass
class Cell:
    """Represents a grid cell with solve state."""

    letter: Optional[str] = None
    member_word_indices: List[int] = field(default_factory=list)
    player_input: str = ""
    is_revealed: bool = False

    @property
    def is_black(self) -> bool:
        return not self.member_word_indices


@dataclass(frozen=True)
class Placement:
    """Anchor and direction chosen for a word."""

    row: int
    col: int
    direction: Direction

    def cells(self, length: int) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(length)]


@dataclass
class PlacedWord:
    """A word entry that has been assigned a position on the grid."""

    entry: WordEntry
    row: int
    col: int
    direction: Direction
    is_solved: bool = False
    hints_revealed_count: int = 0

    @property
    def answer(self) -> str:
        return self.entry.answer

    @property
    def clue(self) -> str:
        return self.entry.clue

    @property
    def category(self) -> str:
        return self.entry.category

    @property
    def hints(self) -> Tuple[str, ...]:
        return self.entry.hints

    @property
    def length(self) -> int:
        return len(self.entry.answer)

    @property
    def placement(self) -> Placement:
        return Placement(self.row, self.col, self.direction)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return self.placement.cells(self.length)


@dataclass
class Progress:
    """Player progression carried between puzzles."""

    xp: int = 0
    level: int = 1
    completed_puzzles: int = 0
    has_seen_tutorial: bool = False
    high_score: int = 0
