"""
Configuration dataclass for the practice-plan service.

Immutable config object that decouples parameter passing from the code
that uses the values. Reading the environment happens in the API layer
(``api/deps.py``); everything else takes a config instance.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CURRICULUM_PATH = Path(__file__).parent.parent / "data" / "curriculum_data.json"


@dataclass(frozen=True)
class PlannerConfig:
    """
    Settings for the practice-plan pipeline.

    Attributes:
        max_tokens: Token budget for one generated plan. Defaults to 2500,
            enough for the assessment plus seven recommendations.
        curriculum_path: JSON file holding the song curriculum.

    Example:
        >>> config = PlannerConfig(max_tokens=2000)
    """

    max_tokens: int = 2500
    curriculum_path: Path = DEFAULT_CURRICULUM_PATH

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
