"""Guitar self-assessment types and scoring."""

from core.assessment.scoring import (
    WEAK_AREA_THRESHOLD,
    format_level_percent,
    format_struggles,
    format_weak_areas,
    merge_scores,
    score_assessment,
)
from core.assessment.types import SCORE_GROUPS, Assessment, AssessmentScore

__all__ = [
    "SCORE_GROUPS",
    "WEAK_AREA_THRESHOLD",
    "Assessment",
    "AssessmentScore",
    "format_level_percent",
    "format_struggles",
    "format_weak_areas",
    "merge_scores",
    "score_assessment",
]
