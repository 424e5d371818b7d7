"""Greedy crossword layout.

Words are placed longest first. The first word that fits is laid ACROSS at
the anchor row, centred horizontally. Every later word takes the first legal
position in row-major order (ACROSS before DOWN at each anchor) that crosses
at least one letter already on the grid; words with no such position are
dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, AnchorPolicy, Direction
from ..core.exceptions import InvalidConfigurationError, MalformedWordError
from ..core.models import PlacedWord, Placement, WordEntry
from ..utils.logger import get_logger
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)

ANSWER_RE = re.compile(r"[A-Z]+")
SCAN_DIRECTIONS = (Direction.ACROSS, Direction.DOWN)


@dataclass
class BuilderConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    anchor_policy: AnchorPolicy = AnchorPolicy.CENTER


@dataclass
class GridBuildResult:
    grid: PuzzleGrid
    placed_words: List[PlacedWord]
    dropped_words: List[WordEntry] = field(default_factory=list)


class GridBuilder:
    """Builds a square puzzle grid from a word list."""

    def __init__(self, config: Optional[BuilderConfig] = None) -> None:
        self.config = config or BuilderConfig()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, words: Sequence[WordEntry]) -> GridBuildResult:
        size = self.config.grid_size
        self._check_inputs(words, size)

        grid = PuzzleGrid(size)
        placed: List[PlacedWord] = []
        dropped: List[WordEntry] = []

        # sorted() is stable, so equal lengths keep their input order.
        for entry in sorted(words, key=lambda w: -len(w.answer)):
            if placed:
                placement = self._find_placement(grid, entry.answer)
            else:
                placement = self._anchor_placement(entry.answer)

            if placement is None:
                LOGGER.debug("Dropping %s: no legal crossing position", entry.answer)
                dropped.append(entry)
                continue

            index = len(placed)
            grid.place_word(entry.answer, placement, index)
            placed.append(
                PlacedWord(
                    entry=entry,
                    row=placement.row,
                    col=placement.col,
                    direction=placement.direction,
                )
            )
            LOGGER.debug(
                "Placed #%s %s at (%s,%s) %s",
                index,
                entry.answer,
                placement.row,
                placement.col,
                placement.direction.value,
            )

        if not placed:
            raise InvalidConfigurationError(
                f"No word fits a {size}x{size} grid "
                f"(shortest answer has {min(len(w.answer) for w in words)} letters)"
            )

        LOGGER.info(
            "Built %sx%s grid with %s words (%s dropped)", size, size, len(placed), len(dropped)
        )
        return GridBuildResult(grid=grid, placed_words=placed, dropped_words=dropped)

    # ------------------------------------------------------------------
    # Placement helpers
    # ------------------------------------------------------------------
    def _anchor_placement(self, answer: str) -> Optional[Placement]:
        size = self.config.grid_size
        if len(answer) > size:
            return None
        row = self.config.anchor_policy.anchor_row(size)
        return Placement(row, (size - len(answer)) // 2, Direction.ACROSS)

    def _find_placement(self, grid: PuzzleGrid, answer: str) -> Optional[Placement]:
        """First-fit scan: row-major anchors, ACROSS then DOWN, must cross a letter."""

        for row in range(grid.size):
            for col in range(grid.size):
                for direction in SCAN_DIRECTIONS:
                    candidate = Placement(row, col, direction)
                    if not grid.can_place(answer, candidate):
                        continue
                    if grid.count_intersections(answer, candidate) > 0:
                        return candidate
        return None

    @staticmethod
    def _check_inputs(words: Sequence[WordEntry], size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidConfigurationError(f"Grid size must be a positive integer, got {size!r}")
        if not words:
            raise InvalidConfigurationError("Word list is empty")
        for entry in words:
            if not ANSWER_RE.fullmatch(entry.answer or ""):
                raise MalformedWordError(
                    f"Answer {entry.answer!r} must be non-empty and contain only A-Z"
                )


def build_grid(
    words: Sequence[WordEntry],
    grid_size: int = DEFAULT_GRID_SIZE,
    anchor_policy: AnchorPolicy = AnchorPolicy.CENTER,
) -> GridBuildResult:
    """Build a puzzle for ``words`` on a ``grid_size`` square grid."""

    return GridBuilder(BuilderConfig(grid_size=grid_size, anchor_policy=anchor_policy)).build(words)
