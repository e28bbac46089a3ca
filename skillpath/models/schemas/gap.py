"""Gap analysis contracts: job requirements in, prioritized deficiencies out."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillpath.models.schemas.taxonomy import CanonicalSkill

RequirementPriority = Literal["core", "nice_to_have"]
GapPriority = Literal["high", "medium", "low"]

# Lower rank sorts first
PRIORITY_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


class RequiredSkill(BaseModel):
    """A skill the job asks for, weighted by how much it matters."""
    model_config = ConfigDict(frozen=True)

    skill: CanonicalSkill
    priority: RequirementPriority = "core"
    weight: float = Field(1.0, ge=0.0, le=1.0)
    frequency: int = Field(1, ge=1)  # occurrences in the job text
    inferred_from: str | None = None  # phrase or role that implied the skill


class MissingSkill(BaseModel):
    skill: CanonicalSkill
    priority: GapPriority
    weight: float = Field(0.0, ge=0.0, le=1.0)
    estimated_hours: int = Field(..., gt=0)
    required_priority: RequirementPriority = "core"
    reason: str = ""
    related_skills: list[str] = []  # candidate skills that give a head start


class SkillGapResult(BaseModel):
    """Structured output of the gap analyzer.

    ``degraded`` is set when there was nothing to measure against (no
    required skills, or all of them weigh zero); ``match_percentage`` is
    then 0 rather than a misleading 100.
    """
    match_percentage: int = Field(0, ge=0, le=100)
    matched_skills: list[CanonicalSkill] = []
    missing_skills: list[MissingSkill] = []
    extra_skills: list[str] = []  # candidate skills the job did not ask for
    degraded: bool = False


class GapSummary(BaseModel):
    match_percentage: int = 0
    high_priority_count: int = 0
    total_hours: int = 0
    critical_gaps: list[str] = []
    recommendation: str = ""
