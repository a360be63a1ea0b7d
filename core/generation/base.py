"""
Text-generation contract for the practice-plan pipeline.

A plan is produced from exactly one prompt pair: the fixed teacher
persona (system prompt) and the per-student request (user prompt).
The LLM client that fulfils a request lives in ingestion/; this module
only holds the value types and the protocol, with no I/O.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class GenerationRequest:
    """One prompt pair plus sampling settings.

    Attributes:
        system_prompt: Persona and output rules. Must not be blank.
        user_prompt: Assessment summary, curriculum and task. Must not be blank.
        temperature: Sampling temperature, between 0.0 and 1.0 (the
            Messages API range).
        max_tokens: Token budget for the reply. Must be positive.
    """

    system_prompt: str
    user_prompt: str
    temperature: float = 1.0
    max_tokens: int = 2500

    def __post_init__(self) -> None:
        """Reject blank prompts and out-of-range sampling settings."""
        if not self.system_prompt.strip():
            raise ValueError("system_prompt must not be blank")
        if not self.user_prompt.strip():
            raise ValueError("user_prompt must not be blank")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0.0 and 1.0, got {self.temperature}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True)
class GenerationResponse:
    """Raw reply from the LLM.

    Attributes:
        content: Reply text. Empty when the reply held no text block.
        model: Model identifier reported by the API.
        usage_input_tokens: Prompt tokens billed.
        usage_output_tokens: Reply tokens billed.
    """

    content: str
    model: str
    usage_input_tokens: int
    usage_output_tokens: int


@runtime_checkable
class GenerationProvider(Protocol):
    """Anything that turns a prompt pair into reply text.

    Implementations raise ``RuntimeError`` when the call fails.
    """

    def generate(self, request: GenerationRequest) -> GenerationResponse: ...
