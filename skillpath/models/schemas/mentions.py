"""Extractor output: skill occurrences found in a document."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillpath.models.schemas.taxonomy import CanonicalSkill

SourceTag = Literal["resume", "job_description", "profile"]


class TextSpan(BaseModel):
    """Character offsets into the original text plus the 1-based line number."""
    model_config = ConfigDict(frozen=True)

    start: int = 0
    end: int = 0
    line: int = 0


class SkillMention(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: CanonicalSkill
    matched_text: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: SourceTag
    span: TextSpan | None = None  # None for mentions injected without text
    section: str | None = None
    occurrences: int = Field(1, ge=1)

    @property
    def name(self) -> str:
        return self.skill.name
