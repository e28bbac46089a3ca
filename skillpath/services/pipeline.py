"""End-to-end analysis: job text + candidate evidence -> gap -> learning plan.

Flow:
    job_text
      └─ build_required_skills()        → list[RequiredSkill]
    resume_text / profile / manual skills
      ├─ SkillMentionExtractor.extract() → resume mentions
      ├─ profile_mentions()              → profile mentions
      ├─ mentions_from_records()         → manual mentions
      └─ merge_mentions()                → candidate mentions
                     ↓
    SkillGapAnalyzer.analyze(required, candidate)  → SkillGapResult
                     ↓
    RoadmapScheduler.build_roadmap(missing, weekly_hours)  → Roadmap
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from skillpath.config import Settings
from skillpath.config import settings as default_settings
from skillpath.models.schemas.gap import GapSummary, RequiredSkill, SkillGapResult
from skillpath.models.schemas.mentions import SkillMention
from skillpath.models.schemas.roadmap import Roadmap
from skillpath.services.adapters import mentions_from_records, profile_mentions
from skillpath.services.gap_analyzer import SkillGapAnalyzer, summarize_gap
from skillpath.services.requirements import build_required_skills
from skillpath.services.roadmap_scheduler import RoadmapScheduler
from skillpath.services.skill_extractor import SkillMentionExtractor, merge_mentions
from skillpath.services.taxonomy import TaxonomyRegistry, get_default_registry

logger = logging.getLogger(__name__)


class AnalysisReport(BaseModel):
    """Every intermediate product of one analysis request."""
    required_skills: list[RequiredSkill] = []
    candidate_mentions: list[SkillMention] = []
    gap: SkillGapResult
    summary: GapSummary
    roadmap: Roadmap


def analyze_profile(
    job_text: str,
    resume_text: str,
    profile_skills: Iterable[str] = (),
    manual_skills: Iterable[Mapping[str, Any] | str] = (),
    weekly_hours: int | None = None,
    registry: TaxonomyRegistry | None = None,
    settings: Settings | None = None,
) -> AnalysisReport:
    """Run extraction, gap analysis and scheduling for one candidate and job.

    Raises:
        InvalidScheduleError: ``weekly_hours`` is not a positive integer.
    """
    cfg = settings or default_settings
    registry = registry or get_default_registry()
    hours = cfg.default_weekly_hours if weekly_hours is None else weekly_hours

    extractor = SkillMentionExtractor(registry, cfg)

    # --- Job side ---
    required = build_required_skills(job_text, extractor, cfg)

    # --- Candidate side: resume first, so its provenance wins on overlap ---
    candidate = merge_mentions(
        extractor.extract(resume_text, "resume"),
        profile_mentions(profile_skills, registry, confidence=cfg.profile_confidence),
        mentions_from_records(manual_skills, "profile", registry, confidence=cfg.manual_confidence),
    )

    # --- Gap + plan ---
    gap = SkillGapAnalyzer(registry, cfg).analyze(required, candidate)
    roadmap = RoadmapScheduler(cfg).build_roadmap(gap.missing_skills, hours)

    logger.info(
        "Analysis complete: %d%% match, %d missing skills, %d-week plan",
        gap.match_percentage,
        len(gap.missing_skills),
        roadmap.total_weeks,
    )
    return AnalysisReport(
        required_skills=required,
        candidate_mentions=candidate,
        gap=gap,
        summary=summarize_gap(gap),
        roadmap=roadmap,
    )
