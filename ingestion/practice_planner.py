"""
Practice planner — turns an assessment into a generated practice plan.

Pipeline:
    1. Score the assessment (average level + weak areas)
    2. Render the curriculum catalog
    3. Build system + user prompts
    4. Generate the plan via the LLM provider
    5. Strip markdown fences from the reply

Lives in ingestion/ because step 4 performs network I/O. Every other step
is a pure function from core/. Provider errors are not caught here; the
HTTP layer turns them into error responses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.assessment.scoring import score_assessment
from core.assessment.types import Assessment, AssessmentScore
from core.generation.base import GenerationProvider, GenerationRequest
from core.practice_plan.cleanup import clean_plan_text
from core.practice_plan.prompts import build_system_prompt, build_user_prompt
from ingestion.curriculum_store import CurriculumStore

logger = logging.getLogger(__name__)

PLAN_TEMPERATURE = 1.0
"""Sampling temperature for plan generation (Messages API default)."""


@dataclass(frozen=True)
class PlanResult:
    """A generated practice plan.

    Attributes:
        plan: Cleaned HTML plan text. May be empty if the model returned no text.
        score: The score the prompt was built from.
        model: Model identifier reported by the provider.
        usage_input_tokens: Input tokens consumed.
        usage_output_tokens: Output tokens generated.
    """

    plan: str
    score: AssessmentScore
    model: str
    usage_input_tokens: int
    usage_output_tokens: int


class PracticePlanner:
    """Builds practice plans from assessments.

    Args:
        provider: LLM backend satisfying ``GenerationProvider``.
        curriculum: Read-only song curriculum the plan recommends from.
        max_tokens: Token budget for one plan.
    """

    def __init__(
        self,
        provider: GenerationProvider,
        curriculum: CurriculumStore,
        *,
        max_tokens: int = 2500,
    ) -> None:
        self._provider = provider
        self._curriculum = curriculum
        self._max_tokens = max_tokens

    def build_request(self, assessment: Assessment) -> tuple[GenerationRequest, AssessmentScore]:
        """Score the assessment and assemble the generation request.

        Pure apart from reading the (immutable) curriculum.
        """
        score = score_assessment(assessment)
        user_prompt = build_user_prompt(assessment, score, self._curriculum.context())
        request = GenerationRequest(
            system_prompt=build_system_prompt(),
            user_prompt=user_prompt,
            temperature=PLAN_TEMPERATURE,
            max_tokens=self._max_tokens,
        )
        return request, score

    def create_plan(self, assessment: Assessment) -> PlanResult:
        """Generate a practice plan for one assessment.

        Args:
            assessment: The player's self-assessment.

        Returns:
            ``PlanResult`` with the cleaned plan text and usage metadata.

        Raises:
            RuntimeError: If the generation provider fails.
        """
        request, score = self.build_request(assessment)
        logger.info(
            "Generating plan: avg=%.2f weak_areas=%d struggles=%d",
            score.average_score,
            len(score.weak_areas),
            len(assessment.struggles),
        )

        response = self._provider.generate(request)
        plan = clean_plan_text(response.content)
        if not plan:
            logger.warning("Model %s returned no plan text", response.model)

        return PlanResult(
            plan=plan,
            score=score,
            model=response.model,
            usage_input_tokens=response.usage_input_tokens,
            usage_output_tokens=response.usage_output_tokens,
        )
