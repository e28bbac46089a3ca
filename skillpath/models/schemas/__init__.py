"""Engine contracts shared by the taxonomy, extractor, analyzer and scheduler."""

from skillpath.models.schemas.gap import (
    GapSummary,
    MissingSkill,
    RequiredSkill,
    SkillGapResult,
)
from skillpath.models.schemas.mentions import SkillMention, TextSpan
from skillpath.models.schemas.roadmap import Milestone, Resource, Roadmap, RoadmapWeek, Task
from skillpath.models.schemas.taxonomy import CanonicalSkill

__all__ = [
    "CanonicalSkill",
    "SkillMention",
    "TextSpan",
    "RequiredSkill",
    "MissingSkill",
    "SkillGapResult",
    "GapSummary",
    "Task",
    "Resource",
    "RoadmapWeek",
    "Milestone",
    "Roadmap",
]
