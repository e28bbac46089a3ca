import logging

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

CATEGORIES = ("language", "framework", "tool", "platform", "soft_skill", "domain")


def _default_base_hours() -> dict[str, int]:
    return {
        "language": 15,
        "framework": 20,
        "tool": 8,
        "platform": 12,
        "soft_skill": 5,
        "domain": 10,
    }


class Settings(BaseSettings):
    # Mention confidence policy
    exact_match_confidence: float = Field(1.0, ge=0.0, le=1.0)
    alias_match_confidence: float = Field(0.9, ge=0.0, le=1.0)
    skills_section_boost: float = Field(0.1, ge=0.0, le=1.0)
    profile_confidence: float = Field(0.8, ge=0.0, le=1.0)
    manual_confidence: float = Field(1.0, ge=0.0, le=1.0)

    # Required-skill weighting
    core_weight: float = Field(1.0, ge=0.0, le=1.0)
    nice_to_have_weight: float = Field(0.4, ge=0.0, le=1.0)
    trending_multiplier: float = Field(1.15, ge=1.0)
    frequency_step: float = Field(0.1, ge=0.0)
    max_frequency_bonus: float = Field(0.3, ge=0.0)

    # Skills implied by broad phrases or the role title, never named outright
    infer_contextual_skills: bool = True
    contextual_skill_weight: float = Field(0.6, ge=0.0, le=1.0)
    role_implied_skill_weight: float = Field(0.5, ge=0.0, le=1.0)
    role_title_window: int = Field(200, ge=0)

    # Gap priority bands (weight >= threshold)
    high_priority_threshold: float = Field(0.7, ge=0.0, le=1.0)
    medium_priority_threshold: float = Field(0.4, ge=0.0, le=1.0)

    # Learning-hour estimation
    category_base_hours: dict[str, int] = Field(default_factory=_default_base_hours)
    high_priority_hours_multiplier: float = Field(1.5, ge=1.0)

    # Scheduler chunking: <= single -> 1 task, <= double -> 2 tasks, else 3
    single_chunk_max_hours: int = Field(6, gt=0)
    double_chunk_max_hours: int = Field(16, gt=0)
    default_weekly_hours: int = Field(10, gt=0)

    max_ngram_tokens: int = Field(4, ge=1, le=8)
    max_related_skills: int = Field(3, ge=0)
    log_level: str = "INFO"

    model_config = {"env_prefix": "SKILLPATH_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("category_base_hours")
    @classmethod
    def _validate_base_hours(cls, value: dict[str, int]) -> dict[str, int]:
        missing = [c for c in CATEGORIES if c not in value]
        if missing:
            raise ValueError(f"category_base_hours is missing categories: {', '.join(missing)}")
        if any(hours <= 0 for hours in value.values()):
            raise ValueError("category_base_hours values must be positive")
        return value

    @model_validator(mode="after")
    def _validate_ordering(self) -> "Settings":
        if self.medium_priority_threshold > self.high_priority_threshold:
            raise ValueError("medium_priority_threshold must not exceed high_priority_threshold")
        if self.single_chunk_max_hours > self.double_chunk_max_hours:
            raise ValueError("single_chunk_max_hours must not exceed double_chunk_max_hours")
        return self


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the package logger."""
    logging.getLogger("skillpath").setLevel((level or settings.log_level).upper())
