"""Word list providers for puzzle levels."""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional, Protocol, Sequence

from ..core.constants import HINT_COUNT
from ..core.exceptions import WordSourceError
from ..core.models import WordEntry
from ..io.gemini_client import GeminiClient
from ..utils.logger import get_logger
from .campaign import difficulty_for_level, topic_for_level, word_count_for_level
from .normalization import clean_word


LOGGER = get_logger(__name__)


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def generate(self, level: int) -> List[WordEntry]:
        ...


def make_entry(answer: str, clue: str = "", category: str = "", hints: Iterable[str] = ()) -> WordEntry:
    """Normalize ``answer`` and force exactly three hints."""

    hint_list = [str(h) for h in hints][:HINT_COUNT]
    cleaned = clean_word(answer)
    while len(hint_list) < HINT_COUNT:
        if len(hint_list) == HINT_COUNT - 1 and cleaned:
            hint_list.append(f"Starts with {cleaned[0]}")
        else:
            hint_list.append(clue or category or "No hint available")
    return WordEntry(answer=cleaned, clue=clue, category=category, hints=tuple(hint_list))


class GeminiWordSource:
    """LLM-powered provider using the Gemini API."""

    PROMPT = (
        "Act as a CS Professor. Generate level {level} of a tech crossword campaign.\n"
        "Topic: {topic}. Difficulty: {difficulty}.\n"
        "Return {count} unique tech terms related to {topic}.\n"
        "Ensure clues are professional and hints are progressive.\n"
        "Format: JSON array of {{answer, clue, category, hints[3]}}.\n"
        "Hints: 1) Broad context, 2) Technical detail, 3) Starting letter/pattern.\n"
        "Exclude common words used in previous levels. Focus on specific technical terminology."
    )

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        self._client = client

    def generate(self, level: int) -> List[WordEntry]:
        client = self._client or GeminiClient()
        text = client.generate_text(self.render_prompt(level), response_mime_type="application/json")
        return self.parse_response(text)

    @classmethod
    def render_prompt(cls, level: int) -> str:
        return cls.PROMPT.format(
            level=level,
            topic=topic_for_level(level),
            difficulty=difficulty_for_level(level).value,
            count=word_count_for_level(level),
        )

    @staticmethod
    def parse_response(text: str) -> List[WordEntry]:
        stripped = (text or "").strip()
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            inner = "\n".join(lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:])
            stripped = inner.strip()
        try:
            data: Any = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise WordSourceError(f"Gemini returned malformed JSON: {exc}") from exc
        if not isinstance(data, list):
            raise WordSourceError("Gemini response is not a JSON array")

        entries: List[WordEntry] = []
        for item in data:
            if not isinstance(item, dict) or not isinstance(item.get("answer"), str):
                continue
            hints = item.get("hints")
            entry = make_entry(
                item["answer"],
                clue=str(item.get("clue") or ""),
                category=str(item.get("category") or ""),
                hints=hints if isinstance(hints, list) else (),
            )
            if entry.answer:
                entries.append(entry)
        return entries


FALLBACK_WORDS: Sequence[WordEntry] = (
    WordEntry("CACHE", "High-speed data storage layer", "Memory", ("Near CPU", "Speeds up access", "C_C_E")),
    WordEntry("INDEX", "Speeds up database queries", "Data", ("B-Tree", "Not a full scan", "I_D_X")),
    WordEntry("PROXY", "Intermediate server for requests", "Network", ("Forward or Reverse", "Privacy layer", "P_O_Y")),
    WordEntry("STORM", "Distributed real-time computation system", "Big Data", ("Apache project", "Stream processing", "S_O_M")),
)


class FallbackWordSource:
    """Static word list for offline play or provider failures."""

    def __init__(self, words: Optional[Sequence[WordEntry]] = None) -> None:
        self.words = list(words or FALLBACK_WORDS)

    def generate(self, level: int) -> List[WordEntry]:
        return list(self.words)


class UserWordListSource:
    """Returns a user-supplied list of ``ANSWER`` or ``ANSWER:Clue`` items."""

    def __init__(self, raw_words: List[str]) -> None:
        self._entries: List[WordEntry] = []
        for item in raw_words:
            item = item.strip()
            if not item:
                continue
            word, _, clue = item.partition(":")
            entry = make_entry(word, clue=clue.strip(), category="Custom")
            if entry.answer:
                self._entries.append(entry)

    def generate(self, level: int) -> List[WordEntry]:
        return list(self._entries)


def load_level_words(
    primary: Optional[WordSource],
    fallbacks: Sequence[WordSource],
    level: int,
) -> List[WordEntry]:
    """Return the first non-empty word list from primary then each fallback."""

    for source in ([primary] if primary else []) + list(fallbacks):
        try:
            words = source.generate(level)
        except Exception as exc:
            LOGGER.warning("Word source %s failed: %s", type(source).__name__, exc)
            continue
        if words:
            LOGGER.info("Loaded %s words for level %s from %s", len(words), level, type(source).__name__)
            return words
        LOGGER.warning("Word source %s returned no words", type(source).__name__)
    raise WordSourceError(f"No word source produced words for level {level}")
