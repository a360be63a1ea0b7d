"""
Assessment scoring — average skill level and weak-area detection.

Pure functions. No I/O, no side effects.
"""

import math
from collections.abc import Sequence

from core.assessment.types import Assessment, AssessmentScore

WEAK_AREA_THRESHOLD: float = 2
"""Scores at or below this value mark a weak area."""

MAX_SCORE: float = 5
"""Top of the self-assessment scale, used for the percentage."""

MAX_WEAK_AREAS_SHOWN: int = 5
"""Weak areas listed in the prompt summary."""

NO_WEAK_AREAS_TEXT = "Overall development needed"
NO_STRUGGLES_TEXT = "None specified"


def merge_scores(assessment: Assessment) -> dict[str, float]:
    """Flatten all score groups into one mapping.

    On a name collision the later group's value wins while the key
    keeps the position of its first occurrence.
    """
    merged: dict[str, float] = {}
    for group in assessment.score_groups():
        merged.update(group)
    return merged


def score_assessment(assessment: Assessment) -> AssessmentScore:
    """Compute the average score and weak areas for an assessment.

    Args:
        assessment: The self-assessment to score.

    Returns:
        ``AssessmentScore`` with ``average_score`` 0.0 for an empty
        assessment and ``weak_areas`` in merge order.
    """
    merged = merge_scores(assessment)
    average = sum(merged.values()) / len(merged) if merged else 0.0
    weak = tuple(name for name, score in merged.items() if score <= WEAK_AREA_THRESHOLD)
    return AssessmentScore(average_score=average, weak_areas=weak)


def format_level_percent(average_score: float) -> str:
    """Render an average score as a whole percentage of the scale.

    Halves round away from zero: an average of 3.125 renders as ``"63"``.
    Negative averages keep their sign, so -0.5% renders as ``"-1"`` and
    -0.4% as ``"-0"``.
    """
    percent = average_score / MAX_SCORE * 100
    if percent < 0:
        return f"-{math.floor(-percent + 0.5)}"
    return str(math.floor(percent + 0.5))


def format_weak_areas(weak_areas: Sequence[str]) -> str:
    """Render the first few weak areas as a comma-separated list."""
    if not weak_areas:
        return NO_WEAK_AREAS_TEXT
    return ", ".join(weak_areas[:MAX_WEAK_AREAS_SHOWN])


def format_struggles(struggles: Sequence[str]) -> str:
    """Render reported struggles as a comma-separated list."""
    if not struggles:
        return NO_STRUGGLES_TEXT
    return ", ".join(struggles)
