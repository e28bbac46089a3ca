"""Job-side requirements: which skills a job asks for and how much each matters."""

import logging
import re

from skillpath.config import Settings
from skillpath.config import settings as default_settings
from skillpath.models.schemas.gap import RequiredSkill, RequirementPriority
from skillpath.models.schemas.taxonomy import CanonicalSkill
from skillpath.services.context_data import CONTEXTUAL_SKILL_MAP, ROLE_IMPLIED_SKILLS
from skillpath.services.section_parser import segment
from skillpath.services.skill_extractor import SkillMentionExtractor

logger = logging.getLogger(__name__)

NICE_TO_HAVE_SECTIONS = frozenset({"nice_to_have"})

# Job-posting boilerplate; skills named here are not requirements
IGNORED_SECTIONS = frozenset({"benefits"})


def _phrase_pattern(phrase: str) -> re.Pattern:
    words = [re.escape(word) for word in re.split(r"[\s\-/]+", phrase) if word]
    return re.compile(r"(?<![A-Za-z0-9])" + r"[\s\-/]+".join(words) + r"(?![A-Za-z0-9])", re.IGNORECASE)


_CONTEXT_PATTERNS = [(phrase, _phrase_pattern(phrase), skills) for phrase, skills in CONTEXTUAL_SKILL_MAP.items()]
_ROLE_PATTERNS = [(role, _phrase_pattern(role), skills) for role, skills in ROLE_IMPLIED_SKILLS.items()]


def derive_weight(
    skill: CanonicalSkill,
    priority: RequirementPriority,
    frequency: int = 1,
    settings: Settings | None = None,
) -> float:
    """Weight of a required skill, capped at 1.0.

    core/nice-to-have base weight, boosted for trending skills and for
    skills the posting repeats (up to ``max_frequency_bonus``).
    """
    cfg = settings or default_settings
    weight = cfg.core_weight if priority == "core" else cfg.nice_to_have_weight
    if skill.trending:
        weight *= cfg.trending_multiplier
    bonus = min(cfg.max_frequency_bonus, cfg.frequency_step * max(0, frequency - 1))
    return round(min(1.0, weight * (1.0 + bonus)), 4)


def build_required_skills(
    job_text: str,
    extractor: SkillMentionExtractor | None = None,
    settings: Settings | None = None,
) -> list[RequiredSkill]:
    """Derive RequiredSkill entries from job-description text.

    A skill is ``nice_to_have`` only if every occurrence sits in a
    nice-to-have/preferred section; otherwise it is ``core``. Output order
    is first occurrence. Skills only implied by context (see
    ``infer_contextual_skills``) follow as ``nice_to_have`` entries; a skill
    the posting names explicitly is never replaced by its inferred form.
    """
    extractor = extractor or SkillMentionExtractor(settings=settings)
    cfg = settings or extractor.settings

    frequency: dict[str, int] = {}
    optional_only: dict[str, bool] = {}
    skills: dict[str, CanonicalSkill] = {}

    for mention in extractor.scan(job_text, "job_description"):
        if mention.section in IGNORED_SECTIONS:
            continue
        name = mention.skill.name
        in_optional = mention.section in NICE_TO_HAVE_SECTIONS
        if name not in skills:
            skills[name] = mention.skill
            frequency[name] = 0
            optional_only[name] = True
        frequency[name] += 1
        optional_only[name] = optional_only[name] and in_optional

    required: list[RequiredSkill] = []
    for name, skill in skills.items():
        priority: RequirementPriority = "nice_to_have" if optional_only[name] else "core"
        required.append(
            RequiredSkill(
                skill=skill,
                priority=priority,
                weight=derive_weight(skill, priority, frequency[name], cfg),
                frequency=frequency[name],
            )
        )

    if cfg.infer_contextual_skills:
        for name, (weight, source) in infer_contextual_skills(job_text, cfg).items():
            skill = extractor.registry.get(name)
            if skill is None or name in skills:
                continue
            required.append(
                RequiredSkill(skill=skill, priority="nice_to_have", weight=weight, inferred_from=source)
            )

    logger.info(
        "Job requires %d skills (%d core)",
        len(required),
        sum(1 for r in required if r.priority == "core"),
    )
    return required


def infer_contextual_skills(job_text: str, settings: Settings | None = None) -> dict[str, tuple[float, str]]:
    """Skills a posting implies without naming them, as name -> (weight, source).

    Broad phrases ("microservices architecture") are searched in the posting
    body outside ignored sections; role names ("devops") only in the first
    ``role_title_window`` characters, where the title sits. A skill implied
    more than once keeps its highest weight; on a tie the first source wins.
    """
    cfg = settings or default_settings
    inferred: dict[str, tuple[float, str]] = {}

    def _imply(skill_names: list[str], weight: float, source: str) -> None:
        for name in skill_names:
            if name not in inferred or inferred[name][0] < weight:
                inferred[name] = (weight, source)

    body = [seg.text for seg in segment(job_text or "") if seg.section not in IGNORED_SECTIONS]
    for phrase, pattern, skill_names in _CONTEXT_PATTERNS:
        if any(pattern.search(line) for line in body):
            _imply(skill_names, cfg.contextual_skill_weight, phrase)

    title_area = (job_text or "")[: cfg.role_title_window]
    for role, pattern, skill_names in _ROLE_PATTERNS:
        if pattern.search(title_area):
            _imply(skill_names, cfg.role_implied_skill_weight, f"{role} role")

    if inferred:
        logger.debug("Inferred %d skills from job context", len(inferred))
    return inferred
