"""Song curriculum: record types, tier filtering and catalog rendering."""

from core.curriculum.catalog import (
    build_curriculum_context,
    format_song_line,
    songs_by_tier,
    tier_counts,
)
from core.curriculum.types import TIERS, SongRecord

__all__ = [
    "TIERS",
    "SongRecord",
    "build_curriculum_context",
    "format_song_line",
    "songs_by_tier",
    "tier_counts",
]
