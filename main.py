"""CLI entrypoint for the tech crossword builder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from techcross.core.constants import AnchorPolicy
from techcross.core.exceptions import CrosswordError
from techcross.data.campaign import grid_size_for_level, topic_for_level
from techcross.data.progress_store import ProgressStore
from techcross.data.word_source import (
    FallbackWordSource,
    GeminiWordSource,
    UserWordListSource,
    WordSource,
    load_level_words,
)
from techcross.engine.builder import BuilderConfig, GridBuilder, GridBuildResult
from techcross.engine.validator import GridValidator
from techcross.utils.logger import configure_logging, get_logger
from techcross.utils.pretty import print_puzzle_stats


LOGGER = get_logger("techcross.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a tech-term crossword for a campaign level",
    )
    parser.add_argument("--level", type=int, help="Campaign level (drives topic and word count, default 1)")
    parser.add_argument(
        "--progress",
        type=Path,
        metavar="FILE",
        help="Saved progress JSON; its level is used when --level is not given",
    )
    parser.add_argument("--grid-size", type=int, help="Grid side length (default depends on level)")
    parser.add_argument(
        "--anchor",
        type=str,
        choices=[p.value for p in AnchorPolicy],
        default=AnchorPolicy.CENTER.value,
        help="Row used for the first word",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Clue) instead of Gemini",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip Gemini and use the built-in fallback word list",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and clues instead of JSON")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def result_payload(level: int, result: GridBuildResult, validation_messages: List[str]) -> Dict[str, Any]:
    return {
        "level": level,
        "grid_size": result.grid.size,
        "grid": result.grid.to_jsonable(),
        "placed_words": [
            {
                "number": index + 1,
                "answer": word.answer,
                "clue": word.clue,
                "category": word.category,
                "hints": list(word.hints),
                "row": word.row,
                "col": word.col,
                "direction": word.direction.value,
                "is_solved": word.is_solved,
                "hints_revealed_count": word.hints_revealed_count,
            }
            for index, word in enumerate(result.placed_words)
        ],
        "dropped_words": [word.answer for word in result.dropped_words],
        "validation": validation_messages,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(log_level)

    level = args.level
    if level is None:
        level = ProgressStore(args.progress).load().level if args.progress else 1
    if level < 1:
        parser.error("--level must be at least 1")

    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    primary: WordSource | None = None
    fallbacks: List[WordSource] = [FallbackWordSource()]
    if user_words:
        primary = UserWordListSource(user_words)
        fallbacks = []
    elif not args.offline:
        primary = GeminiWordSource()

    LOGGER.info("Level %s: %s", level, topic_for_level(level))
    grid_size = args.grid_size if args.grid_size is not None else grid_size_for_level(level)
    builder = GridBuilder(BuilderConfig(grid_size=grid_size, anchor_policy=AnchorPolicy(args.anchor)))
    try:
        words = load_level_words(primary, fallbacks, level)
        result = builder.build(words)
    except CrosswordError as exc:
        LOGGER.error("Puzzle generation failed: %s", exc)
        return 1

    validation = GridValidator().validate(result.grid, result.placed_words)

    if args.pretty:
        print_puzzle_stats(result)
        return 0 if validation.ok else 1

    output_text = json.dumps(result_payload(level, result, validation.messages), indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0 if validation.ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
