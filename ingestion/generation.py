"""
Anthropic client for plan generation.

Implements ``GenerationProvider`` from core/generation/base.py over the
Anthropic Messages API. Network I/O, so it lives in ingestion/.

Usage::

    provider = AnthropicGenerationProvider()  # reads ANTHROPIC_API_KEY
    response = provider.generate(request)
"""

import os

import anthropic
from dotenv import load_dotenv

from core.generation.base import GenerationRequest, GenerationResponse

PLAN_MODEL = "claude-sonnet-4-5-20250929"
"""Every plan is written by this model."""


class AnthropicGenerationProvider:
    """
    Sends one prompt pair to Claude and returns the first text block.

    The system prompt goes in the ``system`` parameter and the user
    prompt is the single conversation turn. A reply with no text block
    gives empty content, not an error.

    Satisfies the ``GenerationProvider`` protocol.
    """

    def __init__(self, *, api_key: str | None = None) -> None:
        load_dotenv()
        resolved_key = api_key or os.environ.get("ANTHROPIC_API_KEY", "")
        if not resolved_key:
            raise ValueError(
                "ANTHROPIC_API_KEY must be set in the environment or passed explicitly"
            )
        self._client = anthropic.Anthropic(api_key=resolved_key)

    def generate(self, request: GenerationRequest) -> GenerationResponse:
        """Ask the model for a practice plan.

        Args:
            request: Prompt pair with temperature and token budget.

        Returns:
            GenerationResponse with the reply text and token usage.

        Raises:
            RuntimeError: If the API call fails for any reason.
        """
        try:
            reply = self._client.messages.create(
                model=PLAN_MODEL,
                system=request.system_prompt,
                messages=[{"role": "user", "content": request.user_prompt}],
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            )
        except Exception as exc:
            raise RuntimeError(f"Anthropic generation failed: {exc}") from exc

        text = next((block.text for block in reply.content if block.type == "text"), "")
        return GenerationResponse(
            content=text,
            model=reply.model,
            usage_input_tokens=reply.usage.input_tokens,
            usage_output_tokens=reply.usage.output_tokens,
        )
