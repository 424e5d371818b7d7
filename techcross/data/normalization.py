"""Shared helpers for answer normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase A-Z representation of ``text``.

    Accented Latin letters are folded to their base letter; everything else
    that is not a letter (spaces, hyphens, digits, dots) is dropped, so
    ``"Node.js"`` becomes ``"NODEJS"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_word = WORD_RE.sub("", "".join(ch for ch in decomposed if not unicodedata.combining(ch)))
    return ascii_word.upper()


__all__ = ["clean_word"]
