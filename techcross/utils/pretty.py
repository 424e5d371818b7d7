"""Pretty-print helpers for puzzle grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import Cell, PlacedWord
    from ..engine.builder import GridBuildResult
    from ..engine.grid import PuzzleGrid


BLACK_SYMBOL = "#"


def cell_symbol(cell: Cell, *, show_answers: bool = True) -> str:
    if cell.is_black:
        return BLACK_SYMBOL
    if show_answers or cell.is_revealed:
        return cell.letter or "?"
    return cell.player_input or "."


def format_grid(grid: PuzzleGrid, *, show_answers: bool = True) -> str:
    header_cells = [f"{c:>2}" for c in range(grid.size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.size - 1))
    for r in range(grid.size):
        row_cells = [cell_symbol(grid.cell(r, c), show_answers=show_answers) for c in range(grid.size)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(placed_words: Sequence[PlacedWord]) -> str:
    """List clues numbered by placement order, ACROSS block first."""

    lines = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value)
        for index, word in enumerate(placed_words):
            if word.direction != direction:
                continue
            status = " [solved]" if word.is_solved else ""
            lines.append(f"  {index + 1:>2}. {word.clue} ({word.length}){status}")
    return "\n".join(lines)


def print_puzzle_stats(result: GridBuildResult, *, stream=None) -> None:
    """Print grid, clue list and placement stats for a built puzzle."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)
    print(file=stream)
    print(format_clues(result.placed_words), file=stream)

    total_cells = grid.size * grid.size
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {grid.filled_count} ({grid.filled_ratio * 100:.0f}%)", file=stream)
    print(f"  Placed words:  {len(result.placed_words)}", file=stream)
    if result.dropped_words:
        dropped = ", ".join(w.answer for w in result.dropped_words)
        print(f"  Dropped:       {len(result.dropped_words)} ({dropped})", file=stream)
