"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..core.constants import Bounds
from ..core.exceptions import ValidationError
from ..core.models import Cell, Placement


class PuzzleGrid:
    """Square cell matrix with the placement checks used by the builder."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(size)
        self.cells: List[List[Cell]] = [[Cell() for _ in range(size)] for _ in range(size)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def fits(self, answer: str, placement: Placement) -> bool:
        return all(self.bounds.contains(r, c) for r, c in placement.cells(len(answer)))

    def can_place(self, answer: str, placement: Placement) -> bool:
        """True when the word stays in bounds and agrees with every occupied cell."""

        if not self.fits(answer, placement):
            return False
        for letter, (r, c) in zip(answer, placement.cells(len(answer))):
            cell = self.cells[r][c]
            if not cell.is_black and cell.letter != letter:
                return False
        return True

    def count_intersections(self, answer: str, placement: Placement) -> int:
        return sum(
            1 for r, c in placement.cells(len(answer)) if not self.cells[r][c].is_black
        )

    @property
    def filled_count(self) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if not cell.is_black)

    @property
    def filled_ratio(self) -> float:
        total = self.size * self.size
        return self.filled_count / total if total else 0.0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, answer: str, placement: Placement, word_index: int) -> None:
        if not self.can_place(answer, placement):
            raise ValidationError(
                f"Cannot place {answer} at ({placement.row},{placement.col}) {placement.direction.value}"
            )
        for letter, (r, c) in zip(answer, placement.cells(len(answer))):
            cell = self.cells[r][c]
            cell.letter = letter
            cell.member_word_indices.append(word_index)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [
                {
                    "letter": cell.letter,
                    "is_black": cell.is_black,
                    "member_word_indices": list(cell.member_word_indices),
                    "player_input": cell.player_input,
                    "is_revealed": cell.is_revealed,
                }
                for cell in row
            ]
            for row in self.cells
        ]
