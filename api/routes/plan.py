"""
api/routes/plan.py — Practice plan endpoints.

Endpoints:
    POST /api/generate-plan — Generate a practice plan from a self-assessment
    GET  /api/curriculum    — Loaded curriculum size per tier

Thin controllers. Scoring and prompt assembly live in core/, the LLM call
in ingestion/practice_planner.py.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import Curriculum, get_practice_planner
from api.schemas.plan import CurriculumSummary, ErrorResponse, PlanRequest, PlanResponse
from infrastructure.metrics import LatencyTimer, record_plan_request, record_plan_tokens
from ingestion.practice_planner import PracticePlanner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["practice-plan"])

Planner = Annotated[PracticePlanner, Depends(get_practice_planner)]

FALLBACK_ERROR_MESSAGE = "Failed to generate practice plan"


@router.post(
    "/generate-plan",
    response_model=PlanResponse,
    responses={500: {"model": ErrorResponse}},
)
def generate_plan(planner: Planner, body: PlanRequest | None = None) -> PlanResponse | JSONResponse:
    """Generate a personalized practice plan.

    Scores the assessment, builds the prompt from the scores and the
    curriculum, and asks the LLM for an HTML plan. An omitted body is
    treated as an empty assessment.

    Args:
        planner: Injected ``PracticePlanner``.
        body: The self-assessment.

    Returns:
        PlanResponse with the HTML plan.

    Raises:
        500: Generation failed. Body is ``{"error": message}``.
    """
    assessment = (body or PlanRequest()).to_assessment()

    try:
        with LatencyTimer() as timer:
            result = planner.create_plan(assessment)
    except Exception as exc:
        logger.exception("Practice plan generation failed")
        record_plan_request(status="error", latency_seconds=timer.elapsed)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or FALLBACK_ERROR_MESSAGE},
        )

    record_plan_request(status="success", latency_seconds=timer.elapsed)
    record_plan_tokens(
        input_tokens=result.usage_input_tokens,
        output_tokens=result.usage_output_tokens,
    )
    logger.info(
        "Plan generated: model=%s in=%d out=%d %.2fs",
        result.model,
        result.usage_input_tokens,
        result.usage_output_tokens,
        timer.elapsed,
    )
    return PlanResponse(plan=result.plan)


@router.get("/curriculum", response_model=CurriculumSummary)
def curriculum_summary(curriculum: Curriculum) -> CurriculumSummary:
    """Return how many songs the loaded curriculum holds per tier."""
    return CurriculumSummary(total=len(curriculum), tiers=curriculum.tier_counts())
