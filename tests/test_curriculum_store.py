"""
Tests for ingestion/curriculum_store.py — JSON loading and the read-only store.

Uses pytest's ``tmp_path`` for curriculum files; no real data file needed.
"""

import json
from pathlib import Path

import pytest

from core.curriculum.types import SongRecord
from ingestion.curriculum_store import CurriculumStore, parse_song


def _write_curriculum(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "curriculum_data.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseSong:
    """Test conversion of one JSON object to a SongRecord."""

    def test_full_entry(self) -> None:
        song = parse_song(
            {
                "title": "Little Wing",
                "artist": "Jimi Hendrix",
                "difficulty_level": "Competent 2",
                "skill_category": "Chord Embellishments",
                "secondary_skill_category": "Triads",
                "existing_masterclass": "Hendrix Rhythm Style",
                "potential_masterclass": None,
            }
        )
        assert song == SongRecord(
            title="Little Wing",
            artist="Jimi Hendrix",
            difficulty_level="Competent 2",
            skill_category="Chord Embellishments",
            secondary_skill_category="Triads",
            existing_masterclass="Hendrix Rhythm Style",
        )

    def test_blank_optional_fields_become_none(self) -> None:
        song = parse_song(
            {
                "title": "Song",
                "artist": "Artist",
                "difficulty_level": "Foundation 1",
                "skill_category": "  ",
                "potential_masterclass": "",
            }
        )
        assert song.skill_category is None
        assert song.potential_masterclass is None

    def test_missing_required_field_raises(self) -> None:
        with pytest.raises(ValueError, match="missing required fields"):
            parse_song({"title": "Song", "difficulty_level": "Foundation 1"})

    def test_unknown_tier_raises(self) -> None:
        with pytest.raises(ValueError, match="difficulty_level"):
            parse_song({"title": "Song", "artist": "Artist", "difficulty_level": "Novice 1"})

    @pytest.mark.parametrize("raw", ["Wonderwall", 42, None, ["title", "artist"]])
    def test_non_object_entry_raises(self, raw) -> None:
        with pytest.raises(ValueError, match="must be a JSON object"):
            parse_song(raw)


class TestCurriculumStoreFromFile:
    """Test loading the curriculum JSON file."""

    def test_loads_songs(self, tmp_path: Path) -> None:
        path = _write_curriculum(
            tmp_path,
            [
                {"title": "B", "artist": "X", "difficulty_level": "Master 1"},
                {"title": "A", "artist": "Y", "difficulty_level": "Foundation 1"},
            ],
        )
        store = CurriculumStore.from_file(path)
        assert len(store) == 2
        assert store.tier_counts()["Master"] == 1
        assert store.tier_counts()["Foundation"] == 1
        assert "- **B** by X [Master 1]" in store.context()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CurriculumStore.from_file(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValueError, match="not valid JSON"):
            CurriculumStore.from_file(path)

    def test_non_object_entry_in_file_raises(self, tmp_path: Path) -> None:
        path = _write_curriculum(
            tmp_path,
            [{"title": "A", "artist": "Y", "difficulty_level": "Foundation 1"}, "B by X"],
        )
        with pytest.raises(ValueError, match="must be a JSON object"):
            CurriculumStore.from_file(path)

    def test_non_array_raises(self, tmp_path: Path) -> None:
        path = _write_curriculum(tmp_path, {"songs": []})
        with pytest.raises(ValueError, match="JSON array"):
            CurriculumStore.from_file(path)

    def test_bundled_curriculum_loads(self) -> None:
        path = Path(__file__).parent.parent / "data" / "curriculum_data.json"
        store = CurriculumStore.from_file(path)
        assert len(store) > 0
        assert sum(store.tier_counts().values()) == len(store)


class TestCurriculumStore:
    """Test the in-memory store."""

    def test_store_copies_input_list(self, fixture_songs: tuple[SongRecord, ...]) -> None:
        songs = list(fixture_songs)
        store = CurriculumStore(songs)
        songs.clear()
        assert len(store) == len(fixture_songs)

    def test_context_is_cached(self, fixture_curriculum: CurriculumStore) -> None:
        assert fixture_curriculum.context() is fixture_curriculum.context()

    def test_context_headings(self, fixture_curriculum: CurriculumStore) -> None:
        context = fixture_curriculum.context()
        assert "## Competent Level (2 songs)" in context
        assert "## Master Level (0 songs)" in context

    def test_tier_counts(self, fixture_curriculum: CurriculumStore) -> None:
        counts = fixture_curriculum.tier_counts()
        assert counts["Advanced"] == 2
        assert list(counts) == ["Foundation", "Developing", "Competent", "Advanced", "Master"]
