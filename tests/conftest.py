"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat override/stub boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_curriculum_store, get_generation_provider
from api.main import app
from core.curriculum.types import SongRecord
from core.generation.base import GenerationRequest, GenerationResponse
from ingestion.curriculum_store import CurriculumStore

# ---------------------------------------------------------------------------
# Fixture curriculum
# ---------------------------------------------------------------------------

FIXTURE_SONGS: tuple[SongRecord, ...] = (
    SongRecord(
        title="Wonderwall",
        artist="Oasis",
        difficulty_level="Foundation 2",
        skill_category="Strumming",
        existing_masterclass="Open Chord Essentials",
    ),
    SongRecord(
        title="Under the Bridge",
        artist="Red Hot Chili Peppers",
        difficulty_level="Competent 1",
        skill_category="Triads",
        secondary_skill_category="Chord Embellishments",
        potential_masterclass="Triads Unlocked",
    ),
    SongRecord(
        title="Little Wing",
        artist="Jimi Hendrix",
        difficulty_level="Competent 2",
    ),
    SongRecord(
        title="Sweet Child O' Mine",
        artist="Guns N' Roses",
        difficulty_level="Advanced 1",
        skill_category="Alternate Picking",
    ),
    SongRecord(
        title="Cliffs of Dover",
        artist="Eric Johnson",
        difficulty_level="Advanced 3",
    ),
)
"""Five songs across three tiers; Developing and Master are empty."""


# ---------------------------------------------------------------------------
# Stub generation provider
# ---------------------------------------------------------------------------


class StubGenerationProvider:
    """Deterministic generation provider — no API calls.

    Records every request in ``requests``. Raises ``error`` if set,
    otherwise returns ``content``.
    """

    def __init__(self, content: str = "<h2>Your plan</h2>", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.requests: list[GenerationRequest] = []

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return GenerationResponse(
            content=self.content,
            model="stub-model",
            usage_input_tokens=1200,
            usage_output_tokens=400,
        )


@pytest.fixture()
def fixture_curriculum() -> CurriculumStore:
    """``CurriculumStore`` over ``FIXTURE_SONGS``."""
    return CurriculumStore(FIXTURE_SONGS)


@pytest.fixture()
def stub_provider() -> StubGenerationProvider:
    """A fresh ``StubGenerationProvider`` returning a small HTML plan."""
    return StubGenerationProvider()


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client(fixture_curriculum: CurriculumStore, stub_provider: StubGenerationProvider):
    """FastAPI ``TestClient`` with curriculum and generator overridden.

    The stub provider is accessible as ``client.provider``.
    """
    app.dependency_overrides[get_curriculum_store] = lambda: fixture_curriculum
    app.dependency_overrides[get_generation_provider] = lambda: stub_provider

    with TestClient(app) as c:
        c.provider = stub_provider  # type: ignore[attr-defined]
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def fixture_songs() -> tuple[SongRecord, ...]:
    """The raw ``FIXTURE_SONGS`` tuple."""
    return FIXTURE_SONGS


@pytest.fixture()
def make_provider():
    """Factory for ``StubGenerationProvider`` with custom content or error."""
    return StubGenerationProvider
