"""
FastAPI dependency providers.

Provides lazily created singletons for the configuration, the curriculum
store, the generation provider and the practice planner so they are built
once and reused across requests. Tests replace any of them through
``app.dependency_overrides``.
"""

import os
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from fastapi import Depends

from core.config import DEFAULT_CURRICULUM_PATH, PlannerConfig
from core.generation.base import GenerationProvider
from ingestion.curriculum_store import CurriculumStore
from ingestion.generation import AnthropicGenerationProvider
from ingestion.practice_planner import PracticePlanner


class ProviderUnavailableError(RuntimeError):
    """Raised when the generation provider cannot be configured."""


def load_config_from_env() -> PlannerConfig:
    """Build a ``PlannerConfig`` from environment variables (and ``.env``).

    Reads ``PLAN_MAX_TOKENS`` and ``CURRICULUM_PATH``. Unset variables
    keep the defaults.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_dotenv()
    max_tokens_raw = os.environ.get("PLAN_MAX_TOKENS", "").strip()
    curriculum_raw = os.environ.get("CURRICULUM_PATH", "").strip()
    try:
        max_tokens = int(max_tokens_raw) if max_tokens_raw else PlannerConfig.max_tokens
    except ValueError as exc:
        raise ValueError(f"PLAN_MAX_TOKENS must be an integer, got {max_tokens_raw!r}") from exc
    return PlannerConfig(
        max_tokens=max_tokens,
        curriculum_path=Path(curriculum_raw) if curriculum_raw else DEFAULT_CURRICULUM_PATH,
    )


_config: PlannerConfig | None = None


def get_config() -> PlannerConfig:
    """Return the ``PlannerConfig`` singleton, read from the environment once."""
    global _config  # noqa: PLW0603
    if _config is None:
        _config = load_config_from_env()
    return _config


_curriculum_store: CurriculumStore | None = None


def get_curriculum_store() -> CurriculumStore:
    """
    Return the read-only ``CurriculumStore`` singleton.

    The curriculum file is read on first call (normally at application
    startup) and never again for the lifetime of the process.
    """
    global _curriculum_store  # noqa: PLW0603
    if _curriculum_store is None:
        _curriculum_store = CurriculumStore.from_file(get_config().curriculum_path)
    return _curriculum_store


_generation_provider: GenerationProvider | None = None


def get_generation_provider() -> GenerationProvider:
    """
    Return a cached generation provider singleton.

    Built on first call, which reads ``ANTHROPIC_API_KEY``. The provider
    is reused thereafter.

    Raises:
        ProviderUnavailableError: If the provider cannot be built,
            typically because its API key is not set.
    """
    global _generation_provider  # noqa: PLW0603
    if _generation_provider is None:
        try:
            _generation_provider = AnthropicGenerationProvider()
        except ValueError as exc:
            raise ProviderUnavailableError(str(exc)) from exc
    return _generation_provider


Curriculum = Annotated[CurriculumStore, Depends(get_curriculum_store)]
Generator = Annotated[GenerationProvider, Depends(get_generation_provider)]
Config = Annotated[PlannerConfig, Depends(get_config)]


def get_practice_planner(
    provider: Generator,
    curriculum: Curriculum,
    config: Config,
) -> PracticePlanner:
    """Build a ``PracticePlanner`` from the injected collaborators."""
    return PracticePlanner(provider, curriculum, max_tokens=config.max_tokens)
