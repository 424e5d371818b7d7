"""Tech-term crossword game with AI-sourced clues.

This package exposes the public API surface via:

- ``techcross.engine.builder.GridBuilder``: lays a word list out on a square grid.
- ``techcross.engine.session.PuzzleSession``: tracks solving, hints and XP.
- ``techcross.data.word_source`` helpers: Gemini, fallback and user word lists.
"""

from .engine.builder import BuilderConfig, GridBuilder, GridBuildResult, build_grid
from .engine.session import PuzzleSession

__all__ = [
    "BuilderConfig",
    "GridBuilder",
    "GridBuildResult",
    "PuzzleSession",
    "build_grid",
]

__version__ = "0.1.0"
