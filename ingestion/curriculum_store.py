"""
Curriculum store — loads the song curriculum JSON file once.

Side-effect module (file I/O). Lives in ingestion/ per architecture rules.
The loaded store is read-only and shared by every request.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from core.curriculum.catalog import build_curriculum_context, tier_counts
from core.curriculum.types import SongRecord

logger = logging.getLogger(__name__)

_OPTIONAL_FIELDS = (
    "skill_category",
    "secondary_skill_category",
    "existing_masterclass",
    "potential_masterclass",
)


def _optional_text(value: Any) -> str | None:
    """Normalize an optional text field: blanks and nulls become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_song(raw: Any) -> SongRecord:
    """Build a ``SongRecord`` from one JSON object.

    Args:
        raw: Object with ``title``, ``artist``, ``difficulty_level`` and
            any of the optional skill/masterclass keys.

    Returns:
        The parsed record.

    Raises:
        ValueError: If the entry is not an object, a required key is
            missing or the tier is unknown.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"song entry must be a JSON object, got {type(raw).__name__}: {raw!r}")
    missing = [key for key in ("title", "artist", "difficulty_level") if not raw.get(key)]
    if missing:
        raise ValueError(f"song entry missing required fields {missing}: {raw!r}")
    return SongRecord(
        title=str(raw["title"]),
        artist=str(raw["artist"]),
        difficulty_level=str(raw["difficulty_level"]).strip(),
        **{name: _optional_text(raw.get(name)) for name in _OPTIONAL_FIELDS},
    )


class CurriculumStore:
    """Immutable, in-memory song curriculum.

    Built once from a list of records (or from a JSON file via
    ``from_file``) and never mutated afterwards. The rendered catalog
    text is a pure function of the songs, so it is built once too.
    """

    def __init__(self, songs: list[SongRecord] | tuple[SongRecord, ...]) -> None:
        self._songs: tuple[SongRecord, ...] = tuple(songs)
        self._context: str | None = None

    @classmethod
    def from_file(cls, path: Path) -> CurriculumStore:
        """Load a curriculum from a JSON array of song objects.

        Args:
            path: Path to the curriculum JSON file.

        Returns:
            A populated ``CurriculumStore``.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a JSON array of valid songs.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Curriculum file {path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise ValueError(f"Curriculum file {path} must contain a JSON array")

        store = cls([parse_song(entry) for entry in data])
        logger.info("Curriculum loaded: %d songs from %s", len(store), path)
        return store

    def context(self) -> str:
        """Return the rendered curriculum catalog for prompts."""
        if self._context is None:
            self._context = build_curriculum_context(self._songs)
        return self._context

    def tier_counts(self) -> dict[str, int]:
        """Return the song count per tier."""
        return tier_counts(self._songs)

    def __len__(self) -> int:
        return len(self._songs)
