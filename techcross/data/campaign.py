"""Level progression rules: topic, difficulty, word count and grid size per level."""

from __future__ import annotations

from typing import Tuple

from ..core.constants import DEFAULT_GRID_SIZE, Difficulty


# Topics cycle so consecutive levels never repeat a subject.
TOPICS: Tuple[str, ...] = (
    "Binary & Logic Gates",
    "HTML & CSS Foundations",
    "Variable Types & Memory",
    "HTTP & Web Protocols",
    "Basic Data Structures (Arrays/Lists)",
    "SQL & Database Basics",
    "Operating System Kernels",
    "Cloud Computing Fundamentals",
    "Cybersecurity Threats",
    "Asynchronous Programming",
    "System Design & Scalability",
    "Machine Learning Basics",
)

BASE_WORD_COUNT = 5
MAX_WORD_BONUS = 10


def _check_level(level: int) -> None:
    if level < 1:
        raise ValueError(f"Levels start at 1, got {level}")


def topic_for_level(level: int) -> str:
    _check_level(level)
    return TOPICS[(level - 1) % len(TOPICS)]


def difficulty_for_level(level: int) -> Difficulty:
    _check_level(level)
    if level < 5:
        return Difficulty.EASY
    if level < 10:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def word_count_for_level(level: int) -> int:
    """Six words at level 1, growing by one per level up to fifteen."""

    _check_level(level)
    return BASE_WORD_COUNT + min(level, MAX_WORD_BONUS)


def grid_size_for_level(level: int) -> int:
    _check_level(level)
    return DEFAULT_GRID_SIZE
