"""
Curriculum types — song records and the difficulty tier ladder.

Pure module: no I/O. Records are loaded from disk by
``ingestion/curriculum_store.py``.
"""

from dataclasses import dataclass

TIERS: tuple[str, ...] = ("Foundation", "Developing", "Competent", "Advanced", "Master")
"""Difficulty tiers from easiest to hardest. Each has sub-levels 1-3."""


@dataclass(frozen=True)
class SongRecord:
    """A single song in the curriculum.

    Attributes:
        title: Song title.
        artist: Performing artist.
        difficulty_level: Tier name plus sub-level, e.g. ``"Competent 2"``.
        skill_category: Main skill the song teaches, if any.
        secondary_skill_category: Additional skill the song touches on, if any.
        existing_masterclass: Course that already covers the song, if any.
        potential_masterclass: Course that would complement the song, if any.
    """

    title: str
    artist: str
    difficulty_level: str
    skill_category: str | None = None
    secondary_skill_category: str | None = None
    existing_masterclass: str | None = None
    potential_masterclass: str | None = None

    def __post_init__(self) -> None:
        """Validate that the difficulty level starts with a known tier."""
        if not any(self.difficulty_level.startswith(tier) for tier in TIERS):
            raise ValueError(
                f"difficulty_level must start with one of {list(TIERS)}, "
                f"got {self.difficulty_level!r} for {self.title!r}"
            )
