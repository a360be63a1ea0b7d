"""
Prompt templates for the practice-plan generator.

Pure functions that build the system and user prompts. No I/O, no side effects.

The system prompt fixes the teacher persona, the two-part response shape
and the recommendation rules. The user prompt carries everything specific
to one player: the score summary, the raw assessment and the curriculum
catalog the recommendations must come from.
"""

import json

from core.assessment.scoring import format_level_percent, format_struggles, format_weak_areas
from core.assessment.types import Assessment, AssessmentScore

SYSTEM_PROMPT = """\
You are an experienced guitar teacher creating a personalized practice plan for a student.

Your response has two parts:

PART 1 - ASSESSMENT (3-4 paragraphs):
- Give an honest overview of where they're at based on their scores
- Identify their 2-3 most important areas to develop
- Explain WHY these areas matter for their playing
- Be direct and specific, not generic

PART 2 - SONG RECOMMENDATIONS (exactly 5-7 songs):
- Pick songs that directly address their weak areas
- Match difficulty to their level using the difficulty_level field (e.g. "Competent 2") \
- don't jump too far ahead
- For each song: one clear sentence on why it helps, plus mention the masterclass if one exists
- Order from most accessible to most challenging
- Where a song has a secondary_skill_category, mention it briefly

Rules:
- Recommend EXACTLY 5-7 songs. Not more.
- If a song has [COURSE: X] - say "covered in X"
- If a song has [SUPPORTS: X] - say "X masterclass would complement this"
- Tone: direct, encouraging, British guitar teacher. No corporate speak. No waffle.
- Be concise. Every sentence should earn its place.\
"""

FORMAT_INSTRUCTIONS = (
    "Format as clean HTML for embedding in a web page. "
    "Use <h2>, <h3>, <p>, <ul>, <li> tags. "
    'Wrap each song in <div class="song-recommendation"> tags. '
    "Keep it tight - no padding, no repetition."
)


def build_system_prompt() -> str:
    """Return the system prompt for the practice-plan generator."""
    return SYSTEM_PROMPT


def build_assessment_summary(assessment: Assessment, score: AssessmentScore) -> str:
    """Render the headline numbers and the raw scores for the prompt.

    Args:
        assessment: The player's self-assessment.
        score: Score computed from ``assessment``.

    Returns:
        Summary block: level percentage, weak areas, struggles and
        the assessment as indented JSON.
    """
    detailed = json.dumps(assessment.to_dict(), indent=2, ensure_ascii=False)
    return (
        "ASSESSMENT RESULTS:\n"
        f"- Average technical level: {format_level_percent(score.average_score)}%\n"
        f"- Main weak areas: {format_weak_areas(score.weak_areas)}\n"
        f"- Self-reported struggles: {format_struggles(assessment.struggles)}\n"
        "\n"
        "Detailed scores:\n"
        f"{detailed}"
    )


def build_user_prompt(
    assessment: Assessment,
    score: AssessmentScore,
    curriculum_context: str,
) -> str:
    """Build the user prompt for one practice-plan request.

    The prompt structure is:

    1. **Assessment summary** — level, weak areas, struggles, raw scores.
    2. **Curriculum** — the catalog from ``build_curriculum_context()``.
    3. **Task** — what to write, followed by the HTML format rules.

    Args:
        assessment: The player's self-assessment.
        score: Score computed from ``assessment``.
        curriculum_context: Pre-rendered curriculum catalog.

    Returns:
        The complete user prompt string.
    """
    summary = build_assessment_summary(assessment, score)
    return (
        f"\n{summary}\n"
        "\n"
        f"{curriculum_context}\n"
        "\n"
        "TASK: \n"
        "1. Write a detailed assessment of this player (3-4 paragraphs) covering their "
        "current level, what's holding them back, and what to prioritise\n"
        "2. Recommend exactly 5-7 songs from the curriculum that will move the needle "
        "on their weakest areas\n"
        "3. For each song: one clear reason why it helps, difficulty level, "
        "and any relevant masterclass\n"
        "\n"
        f"{FORMAT_INSTRUCTIONS}"
    )
