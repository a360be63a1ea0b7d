"""Practice-plan prompt assembly and reply cleanup."""

from core.practice_plan.cleanup import clean_plan_text
from core.practice_plan.prompts import (
    SYSTEM_PROMPT,
    build_assessment_summary,
    build_system_prompt,
    build_user_prompt,
)

__all__ = [
    "SYSTEM_PROMPT",
    "build_assessment_summary",
    "build_system_prompt",
    "build_user_prompt",
    "clean_plan_text",
]
