"""
Tests for core/practice_plan/prompts.py — system and user prompt templates.

Validates that the prompts carry the persona, recommendation rules,
score summary and output-format instructions the plan depends on.
"""

import json

from core.assessment.scoring import score_assessment
from core.assessment.types import Assessment
from core.practice_plan.prompts import (
    SYSTEM_PROMPT,
    build_assessment_summary,
    build_system_prompt,
    build_user_prompt,
)

CONTEXT = "# CURRICULUM DATABASE\n\n## Foundation Level (0 songs)\n"


def _user_prompt(assessment: Assessment) -> str:
    return build_user_prompt(assessment, score_assessment(assessment), CONTEXT)


class TestSystemPrompt:
    """Test the system prompt content and structure."""

    def test_guitar_teacher_persona(self) -> None:
        assert "guitar teacher" in SYSTEM_PROMPT

    def test_two_part_structure(self) -> None:
        assert "PART 1 - ASSESSMENT" in SYSTEM_PROMPT
        assert "PART 2 - SONG RECOMMENDATIONS" in SYSTEM_PROMPT

    def test_recommendation_ceiling(self) -> None:
        assert "Recommend EXACTLY 5-7 songs. Not more." in SYSTEM_PROMPT

    def test_masterclass_tag_rules(self) -> None:
        assert "[COURSE: X]" in SYSTEM_PROMPT
        assert "[SUPPORTS: X]" in SYSTEM_PROMPT

    def test_build_system_prompt_returns_same(self) -> None:
        assert build_system_prompt() == SYSTEM_PROMPT


class TestAssessmentSummary:
    """Test the headline block of the user prompt."""

    def test_scales_and_technique_example(self) -> None:
        assessment = Assessment(scales={"majorScale": 1}, technique={"alternatePicking": 4})
        summary = build_assessment_summary(assessment, score_assessment(assessment))
        assert "- Average technical level: 50%" in summary
        assert "- Main weak areas: majorScale" in summary
        assert "- Self-reported struggles: None specified" in summary

    def test_empty_assessment(self) -> None:
        summary = build_assessment_summary(Assessment(), score_assessment(Assessment()))
        assert "- Average technical level: 0%" in summary
        assert "- Main weak areas: Overall development needed" in summary
        assert "- Self-reported struggles: None specified" in summary

    def test_only_first_five_weak_areas(self) -> None:
        assessment = Assessment(chords={f"chord{i}": 1 for i in range(7)})
        summary = build_assessment_summary(assessment, score_assessment(assessment))
        assert "chord4" in summary.split("Detailed scores:")[0]
        assert "chord5" not in summary.split("Detailed scores:")[0]

    def test_struggles_listed(self) -> None:
        assessment = Assessment(struggles=("barre chords", "soloing"))
        summary = build_assessment_summary(assessment, score_assessment(assessment))
        assert "- Self-reported struggles: barre chords, soloing" in summary

    def test_detailed_scores_are_indented_json(self) -> None:
        assessment = Assessment(triads={"majorTriads": 3}, struggles=("timing",))
        summary = build_assessment_summary(assessment, score_assessment(assessment))
        detailed = summary.split("Detailed scores:\n", 1)[1]
        assert json.loads(detailed) == assessment.to_dict()
        assert '  "triads": {' in detailed


class TestBuildUserPrompt:
    """Test the complete user prompt."""

    def test_contains_curriculum_context(self) -> None:
        assert CONTEXT in _user_prompt(Assessment())

    def test_summary_before_curriculum_before_task(self) -> None:
        prompt = _user_prompt(Assessment())
        assert prompt.index("ASSESSMENT RESULTS:") < prompt.index("# CURRICULUM DATABASE")
        assert prompt.index("# CURRICULUM DATABASE") < prompt.index("TASK:")

    def test_html_format_instructions(self) -> None:
        prompt = _user_prompt(Assessment())
        assert '<div class="song-recommendation">' in prompt
        for tag in ("<h2>", "<h3>", "<p>", "<ul>", "<li>"):
            assert tag in prompt

    def test_task_asks_for_five_to_seven_songs(self) -> None:
        assert "Recommend exactly 5-7 songs" in _user_prompt(Assessment())
