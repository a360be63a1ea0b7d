"""
Pydantic schemas for the ``/api/generate-plan`` endpoint.

Every field of the request is optional: a missing or null score group
becomes an empty mapping and missing struggles become an empty list.
"""

from pydantic import BaseModel, Field

from core.assessment.types import Assessment

ScoreGroup = dict[str, int | float] | None


class PlanRequest(BaseModel):
    """Request body for ``POST /api/generate-plan``."""

    scales: ScoreGroup = Field(default=None, description="Scale scores, skill name → 1-5.")
    triads: ScoreGroup = Field(default=None, description="Triad scores, skill name → 1-5.")
    chords: ScoreGroup = Field(default=None, description="Chord scores, skill name → 1-5.")
    arpeggios: ScoreGroup = Field(default=None, description="Arpeggio scores, skill name → 1-5.")
    navigation: ScoreGroup = Field(
        default=None,
        description="Fretboard navigation scores, skill name → 1-5.",
    )
    technique: ScoreGroup = Field(default=None, description="Technique scores, skill name → 1-5.")
    struggles: list[str] | None = Field(
        default=None,
        description="Free-text problems the player wants help with.",
    )

    def to_assessment(self) -> Assessment:
        """Convert to the core ``Assessment`` type, defaulting missing fields."""
        return Assessment(
            scales=dict(self.scales or {}),
            triads=dict(self.triads or {}),
            chords=dict(self.chords or {}),
            arpeggios=dict(self.arpeggios or {}),
            navigation=dict(self.navigation or {}),
            technique=dict(self.technique or {}),
            struggles=tuple(self.struggles or ()),
        )


class PlanResponse(BaseModel):
    """Successful plan generation."""

    plan: str = Field(..., description="Practice plan as an HTML fragment.")


class ErrorResponse(BaseModel):
    """Failed plan generation."""

    error: str = Field(..., description="Human-readable failure message.")


class CurriculumSummary(BaseModel):
    """Loaded curriculum size, overall and per tier."""

    total: int = Field(..., description="Number of songs in the curriculum.")
    tiers: dict[str, int] = Field(..., description="Song count per tier, easiest first.")
