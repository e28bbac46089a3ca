"""Skill gap analysis: required skills vs. the candidate's resolved skills.

A required skill is matched when any candidate mention resolves to the same
canonical skill; confidence does not gate matching. The match percentage is
weighted by each requirement's weight, and missing skills come back in a
deterministic total order: priority band, then weight, then the order in
which the job listed them.
"""

import logging
import math
from collections.abc import Sequence

from skillpath.config import Settings
from skillpath.config import settings as default_settings
from skillpath.models.schemas.gap import (
    PRIORITY_RANK,
    GapPriority,
    GapSummary,
    MissingSkill,
    RequiredSkill,
    SkillGapResult,
)
from skillpath.models.schemas.mentions import SkillMention
from skillpath.models.schemas.taxonomy import CanonicalSkill
from skillpath.services.taxonomy import TaxonomyRegistry, get_default_registry

logger = logging.getLogger(__name__)


def gap_priority(weight: float, settings: Settings | None = None) -> GapPriority:
    cfg = settings or default_settings
    if weight >= cfg.high_priority_threshold:
        return "high"
    if weight >= cfg.medium_priority_threshold:
        return "medium"
    return "low"


def estimate_hours(skill: CanonicalSkill, priority: GapPriority, settings: Settings | None = None) -> int:
    """Learning hours from the per-category base cost, scaled up for high priority."""
    cfg = settings or default_settings
    hours = float(cfg.category_base_hours[skill.category])
    if priority == "high":
        hours *= cfg.high_priority_hours_multiplier
    return max(1, math.ceil(hours))


def priority_sort_key(skill: MissingSkill, position: int) -> tuple[int, float, int]:
    return PRIORITY_RANK[skill.priority], -skill.weight, position


def order_missing(missing: Sequence[MissingSkill]) -> list[MissingSkill]:
    """Priority descending, weight descending, then original position."""
    ranked = sorted(enumerate(missing), key=lambda pair: priority_sort_key(pair[1], pair[0]))
    return [skill for _, skill in ranked]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _missing_reason(req: RequiredSkill) -> str:
    if req.inferred_from:
        return f"Implied by \"{req.inferred_from}\" in the job description"
    if req.priority == "core" and req.frequency >= 3:
        return f"Core requirement mentioned {req.frequency} times in the job description"
    if req.priority == "core":
        return "Core requirement for this role"
    if req.skill.trending:
        return "In-demand skill that would make you a stronger candidate"
    return "Nice-to-have skill that would strengthen your application"


class SkillGapAnalyzer:
    def __init__(
        self,
        registry: TaxonomyRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry or get_default_registry()
        self.settings = settings or default_settings

    def analyze(
        self,
        required: Sequence[RequiredSkill],
        candidate: Sequence[SkillMention],
    ) -> SkillGapResult:
        # First listing of a skill wins if the job side repeats it
        unique: dict[str, RequiredSkill] = {}
        for req in required:
            unique.setdefault(req.skill.name, req)
        if len(unique) < len(required):
            logger.debug("Dropped %d duplicate required skills", len(required) - len(unique))

        candidate_names: dict[str, None] = dict.fromkeys(m.skill.name for m in candidate)

        matched: list[CanonicalSkill] = []
        missing: list[MissingSkill] = []
        total_weight = 0.0
        matched_weight = 0.0

        for name, req in unique.items():
            total_weight += req.weight
            if name in candidate_names:
                matched.append(req.skill)
                matched_weight += req.weight
                continue

            priority = gap_priority(req.weight, self.settings)
            missing.append(
                MissingSkill(
                    skill=req.skill,
                    priority=priority,
                    weight=req.weight,
                    estimated_hours=estimate_hours(req.skill, priority, self.settings),
                    required_priority=req.priority,
                    reason=_missing_reason(req),
                    related_skills=self.registry.related(
                        name, candidate_names, limit=self.settings.max_related_skills
                    ),
                )
            )

        degraded = total_weight <= 0
        if degraded:
            match_percentage = 0
            logger.info("Gap analysis degraded: no weighted requirements to match against")
        else:
            match_percentage = min(100, max(0, _round_half_up(100 * matched_weight / total_weight)))

        extra = [name for name in candidate_names if name not in unique]

        return SkillGapResult(
            match_percentage=match_percentage,
            matched_skills=matched,
            missing_skills=order_missing(missing),
            extra_skills=extra,
            degraded=degraded,
        )


def summarize_gap(result: SkillGapResult) -> GapSummary:
    """Headline numbers and a recommendation for a gap result."""
    high = [m for m in result.missing_skills if m.priority == "high"]
    total_hours = sum(m.estimated_hours for m in result.missing_skills if m.priority != "low")

    if result.degraded:
        recommendation = "No required skills were recognised in the job description."
    elif result.match_percentage >= 80:
        recommendation = "Excellent match! Focus on highlighting your relevant experience."
    elif result.match_percentage >= 60:
        recommendation = "Good foundation. Address high-priority gaps to strengthen your application."
    elif result.match_percentage >= 40:
        recommendation = "Moderate match. Consider upskilling before applying or emphasize transferable skills."
    else:
        recommendation = "Significant skill gap. This role may require substantial learning investment."

    return GapSummary(
        match_percentage=result.match_percentage,
        high_priority_count=len(high),
        total_hours=total_hours,
        critical_gaps=[m.skill.name for m in high[:5]],
        recommendation=recommendation,
    )
