"""
Curriculum catalog — tier filtering and prompt context rendering.

Pure functions over a sequence of ``SongRecord``. No I/O, no side effects.
The rendered catalog is the block the LLM picks song recommendations from.
"""

from collections.abc import Sequence

from core.curriculum.types import TIERS, SongRecord


def songs_by_tier(tier: str, songs: Sequence[SongRecord]) -> list[SongRecord]:
    """Return the songs whose difficulty level starts with ``tier``.

    Matching is a literal string prefix, so ``"Foundation"`` matches
    ``"Foundation 1"`` through ``"Foundation 3"``. Store order is kept.

    Args:
        tier: Tier name, e.g. ``"Advanced"``.
        songs: The curriculum to filter.

    Returns:
        Ordered list of matching records (possibly empty).
    """
    return [song for song in songs if song.difficulty_level.startswith(tier)]


def format_song_line(song: SongRecord) -> str:
    """Render one song as a markdown bullet for the curriculum context."""
    line = f"- **{song.title}** by {song.artist} [{song.difficulty_level}]"
    if song.skill_category:
        line += f" | Skill: {song.skill_category}"
    if song.secondary_skill_category:
        line += f" + {song.secondary_skill_category}"
    if song.existing_masterclass:
        line += f" | [COURSE: {song.existing_masterclass}]"
    if song.potential_masterclass:
        line += f" | [SUPPORTS: {song.potential_masterclass}]"
    return line


def build_curriculum_context(songs: Sequence[SongRecord]) -> str:
    """Render the whole curriculum as a text catalog grouped by tier.

    Every tier gets a ``## {tier} Level ({n} songs)`` heading in ladder
    order, including tiers with no songs.

    Args:
        songs: The curriculum to render.

    Returns:
        Multi-line catalog text. Deterministic for a given curriculum.
    """
    context = "# CURRICULUM DATABASE\n\n"
    context += f"You have access to {len(songs)} songs organized by difficulty level.\n"
    context += (
        "Difficulty uses a belt system: Foundation (easiest) → Developing → "
        "Competent → Advanced → Master (hardest).\n"
    )
    context += "Each belt has sub-levels 1-3 (1=easier end, 3=harder end of that belt).\n\n"

    for tier in TIERS:
        tier_songs = songs_by_tier(tier, songs)
        context += f"## {tier} Level ({len(tier_songs)} songs)\n"
        for song in tier_songs:
            context += format_song_line(song) + "\n"
        context += "\n"

    return context


def tier_counts(songs: Sequence[SongRecord]) -> dict[str, int]:
    """Return the number of songs in each tier, in ladder order."""
    return {tier: len(songs_by_tier(tier, songs)) for tier in TIERS}
