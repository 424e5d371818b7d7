"""Deterministic rule validation for built puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..core.exceptions import ValidationError
from ..core.models import PlacedWord
from .grid import PuzzleGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a built grid and its placed words."""

    def validate(self, grid: PuzzleGrid, placed_words: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(grid, placed_words)
            self._check_overlaps(placed_words)
            self._check_cells_match_words(grid, placed_words)
            self._check_letters_valid(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, grid: PuzzleGrid, placed_words: Sequence[PlacedWord]) -> None:
        for index, word in enumerate(placed_words):
            for row, col in word.cells:
                if not grid.bounds.contains(row, col):
                    raise ValidationError(
                        f"Word #{index} {word.answer} leaves the grid at ({row},{col})"
                    )

    def _check_overlaps(self, placed_words: Sequence[PlacedWord]) -> None:
        claimed: Dict[Tuple[int, int], Tuple[int, str]] = {}
        for index, word in enumerate(placed_words):
            for letter, pos in zip(word.answer, word.cells):
                previous = claimed.get(pos)
                if previous is not None and previous[1] != letter:
                    raise ValidationError(
                        f"Letter conflict at {pos}: word #{previous[0]} has '{previous[1]}', "
                        f"word #{index} has '{letter}'"
                    )
                claimed.setdefault(pos, (index, letter))

    def _check_cells_match_words(
        self, grid: PuzzleGrid, placed_words: Sequence[PlacedWord]
    ) -> None:
        expected: Dict[Tuple[int, int], List[int]] = {}
        for index, word in enumerate(placed_words):
            for pos in word.cells:
                expected.setdefault(pos, []).append(index)

        for r, c, cell in grid.iter_cells():
            members = expected.get((r, c), [])
            if sorted(cell.member_word_indices) != members:
                raise ValidationError(
                    f"Cell ({r},{c}) lists words {cell.member_word_indices}, expected {members}"
                )
            if cell.is_black != (cell.letter is None):
                raise ValidationError(f"Cell ({r},{c}) black flag disagrees with its letter")
            for index in members:
                word = placed_words[index]
                offset = max(r - word.row, c - word.col)
                if word.answer[offset] != cell.letter:
                    raise ValidationError(
                        f"Cell ({r},{c}) holds '{cell.letter}' but word #{index} expects "
                        f"'{word.answer[offset]}'"
                    )

    def _check_letters_valid(self, grid: PuzzleGrid) -> None:
        for r, c, cell in grid.iter_cells():
            if cell.letter is not None and not ("A" <= cell.letter <= "Z" and len(cell.letter) == 1):
                raise ValidationError(f"Invalid letter '{cell.letter}' at ({r},{c})")
