"""
Assessment types — the self-assessment payload and its computed score.

Pure module: no I/O. The API layer converts the request body into an
``Assessment``; missing groups default to empty containers.
"""

from dataclasses import dataclass, field
from typing import Any

SCORE_GROUPS: tuple[str, ...] = (
    "scales",
    "triads",
    "chords",
    "arpeggios",
    "navigation",
    "technique",
)
"""Score groups in merge order. Later groups win on a name collision."""


@dataclass(frozen=True)
class Assessment:
    """A guitarist's self-assessment.

    Each score group maps a skill name to a self-rated score, expected on
    a 1-5 scale. Scores are not range-checked.

    Attributes:
        scales: Scale knowledge scores.
        triads: Triad knowledge scores.
        chords: Chord vocabulary scores.
        arpeggios: Arpeggio scores.
        navigation: Fretboard navigation scores.
        technique: Picking/fretting technique scores.
        struggles: Free-text problems the player reported.
    """

    scales: dict[str, float] = field(default_factory=dict)
    triads: dict[str, float] = field(default_factory=dict)
    chords: dict[str, float] = field(default_factory=dict)
    arpeggios: dict[str, float] = field(default_factory=dict)
    navigation: dict[str, float] = field(default_factory=dict)
    technique: dict[str, float] = field(default_factory=dict)
    struggles: tuple[str, ...] = ()

    def score_groups(self) -> list[dict[str, float]]:
        """Return the six score groups in merge order."""
        return [getattr(self, name) for name in SCORE_GROUPS]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view, groups first then struggles."""
        data: dict[str, Any] = {name: dict(getattr(self, name)) for name in SCORE_GROUPS}
        data["struggles"] = list(self.struggles)
        return data


@dataclass(frozen=True)
class AssessmentScore:
    """Summary numbers computed from an ``Assessment``.

    Attributes:
        average_score: Mean of every score, 0.0 when there are none.
        weak_areas: Skill names at or below the weak-area threshold,
            in merge order. Not truncated.
    """

    average_score: float
    weak_areas: tuple[str, ...]
