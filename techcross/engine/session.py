"""Play session: owns one built puzzle and the player's progress."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    BASE_WORD_XP,
    DEFAULT_GRID_SIZE,
    HINT_PENALTIES,
    MIN_WORD_XP,
    AnchorPolicy,
    Direction,
    PuzzleStatus,
)
from ..core.exceptions import SessionError
from ..core.models import PlacedWord, Progress, WordEntry
from ..utils.logger import get_logger
from .builder import BuilderConfig, GridBuilder, GridBuildResult
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)


def xp_for_hints(hints_used: int) -> int:
    """XP earned for a solved word after ``hints_used`` reveals."""

    penalty = HINT_PENALTIES[hints_used] if 0 <= hints_used < len(HINT_PENALTIES) else 0
    return max(MIN_WORD_XP, BASE_WORD_XP - penalty)


class PuzzleSession:
    """Interaction controller for a single player.

    The built grid and placed words are replaced wholesale by :meth:`start`;
    afterwards only the per-cell and per-word solve state changes.
    """

    def __init__(
        self,
        progress: Optional[Progress] = None,
        anchor_policy: AnchorPolicy = AnchorPolicy.CENTER,
    ) -> None:
        self.progress = progress or Progress()
        self.anchor_policy = anchor_policy
        self.status = PuzzleStatus.LOADING
        self.level = self.progress.level
        self.result: Optional[GridBuildResult] = None
        self.current_word_index: Optional[int] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self, level: int, words: Sequence[WordEntry], grid_size: int = DEFAULT_GRID_SIZE
    ) -> GridBuildResult:
        """Build a new puzzle for ``level``.

        The previous puzzle is discarded before building, so a failed build
        leaves the session in LOADING with no result and the old level.
        """

        self.status = PuzzleStatus.LOADING
        self.result = None
        self.current_word_index = None
        builder = GridBuilder(BuilderConfig(grid_size=grid_size, anchor_policy=self.anchor_policy))
        result = builder.build(words)
        self.level = level
        self.result = result
        self.status = PuzzleStatus.PLAYING
        LOGGER.info("Level %s ready with %s words", level, len(result.placed_words))
        return result

    def advance_level(self) -> int:
        if self.status != PuzzleStatus.COMPLETED:
            raise SessionError("Current puzzle is not completed")
        self.progress.level += 1
        self.progress.completed_puzzles += 1
        self.level = self.progress.level
        return self.level

    def mark_tutorial_seen(self) -> None:
        self.progress.has_seen_tutorial = True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def grid(self) -> PuzzleGrid:
        return self._require_result().grid

    @property
    def placed_words(self) -> List[PlacedWord]:
        return self._require_result().placed_words

    @property
    def is_complete(self) -> bool:
        return self.result is not None and all(w.is_solved for w in self.placed_words)

    @staticmethod
    def clue_number(index: int) -> int:
        return index + 1

    def clues(self, direction: Direction) -> List[Tuple[int, PlacedWord]]:
        return [
            (self.clue_number(i), word)
            for i, word in enumerate(self.placed_words)
            if word.direction == direction
        ]

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def select_word(self, index: int) -> PlacedWord:
        word = self._playable_word(index)
        self.current_word_index = index
        return word

    def reveal_hint(self, index: int) -> str:
        word = self._playable_word(index)
        if word.hints_revealed_count >= len(word.hints):
            raise SessionError(f"All hints for word #{index} are already revealed")
        hint = word.hints[word.hints_revealed_count]
        word.hints_revealed_count += 1
        return hint

    def submit_answer(self, index: int, answer: str) -> int:
        """Return XP earned, or 0 when ``answer`` is wrong."""

        word = self._playable_word(index)
        if answer.strip().upper() != word.answer:
            return 0

        word.is_solved = True
        for letter, (r, c) in zip(word.answer, word.cells):
            cell = self.grid.cell(r, c)
            cell.player_input = letter
            cell.is_revealed = True

        earned = xp_for_hints(word.hints_revealed_count)
        self.progress.xp += earned
        self.progress.high_score = max(self.progress.high_score, self.progress.xp)
        self.current_word_index = None
        LOGGER.debug("Solved %s for %s XP", word.answer, earned)

        if self.is_complete:
            self.status = PuzzleStatus.COMPLETED
            LOGGER.info("Level %s completed", self.level)
        return earned

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_result(self) -> GridBuildResult:
        if self.result is None:
            raise SessionError("No puzzle has been started")
        return self.result

    def _playable_word(self, index: int) -> PlacedWord:
        if self.status != PuzzleStatus.PLAYING:
            raise SessionError(f"Puzzle is {self.status.value}, not PLAYING")
        words = self.placed_words
        if not 0 <= index < len(words):
            raise SessionError(f"Unknown word index {index}")
        word = words[index]
        if word.is_solved:
            raise SessionError(f"Word #{index} is already solved")
        return word
