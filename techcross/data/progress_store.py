"""Persistent player progress.

Progress is kept as a single JSON document (``local_db/progress.json`` by
default) holding the fields of :class:`~techcross.core.models.Progress`.
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path

from ..core.models import Progress
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_PROGRESS_PATH = Path("local_db/progress.json")


class ProgressStore:
    """Load and save :class:`Progress` as JSON."""

    def __init__(self, path: Path | str = DEFAULT_PROGRESS_PATH) -> None:
        self.path = Path(path)

    def load(self) -> Progress:
        if not self.path.exists():
            LOGGER.debug("No saved progress at %s", self.path)
            return Progress()
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            LOGGER.warning("Progress read error (%s): %s", self.path, exc)
            return Progress()
        if not isinstance(doc, dict):
            LOGGER.warning("Progress file %s does not hold an object", self.path)
            return Progress()

        known = {f.name for f in fields(Progress)}
        return Progress(**{k: v for k, v in doc.items() if k in known})

    def save(self, progress: Progress) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(progress), indent=2), encoding="utf-8")
        LOGGER.info("Progress saved: level %s, %s XP", progress.level, progress.xp)
