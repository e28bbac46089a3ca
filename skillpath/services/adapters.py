"""Boundary adapters for skill records produced outside the engine.

Upstream collaborators (GitHub profile fetchers, manual entry forms, stored
profiles) name the skill field differently. The mapping lives here, in one
explicit place; the engine itself only sees SkillMention.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from skillpath.config import settings as default_settings
from skillpath.models.schemas.mentions import SkillMention, SourceTag
from skillpath.services.taxonomy import TaxonomyRegistry, get_default_registry

logger = logging.getLogger(__name__)

# Checked in order; the first non-empty string wins
SKILL_NAME_FIELDS: tuple[str, ...] = ("canonical_name", "canonical", "skill_name", "name")


def skill_name_of(record: Any) -> str | None:
    """Pull the skill name out of a loosely shaped record.

    Anything that is neither a string nor a mapping has no name.
    """
    if isinstance(record, str):
        return record.strip() or None
    if not isinstance(record, Mapping):
        return None
    for field in SKILL_NAME_FIELDS:
        value = record.get(field)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _record_confidence(record: Any, default: float) -> float:
    if isinstance(record, Mapping):
        for field in ("confidence", "confidence_score"):
            value = record.get(field)
            if isinstance(value, (int, float)) and not isinstance(value, bool) and 0.0 <= value <= 1.0:
                return float(value)
    return default


def mentions_from_records(
    records: Iterable[Any] | None,
    source: SourceTag = "profile",
    registry: TaxonomyRegistry | None = None,
    confidence: float | None = None,
) -> list[SkillMention]:
    """Resolve external skill records into pre-resolved mentions.

    Records without a usable name, or whose name does not resolve through
    the taxonomy, are skipped with a warning. A record's own
    ``confidence``/``confidence_score`` is used when present, otherwise
    ``confidence`` (default: the configured profile confidence).
    """
    registry = registry or get_default_registry()
    default_confidence = default_settings.profile_confidence if confidence is None else confidence

    mentions: list[SkillMention] = []
    for record in records or ():
        raw_name = skill_name_of(record)
        if raw_name is None:
            logger.warning("Skipping %s record without a skill name: %r", source, record)
            continue
        skill = registry.resolve(raw_name)
        if skill is None:
            logger.warning("Skipping unknown %s skill %r", source, raw_name)
            continue

        mentions.append(
            SkillMention(
                skill=skill,
                matched_text=raw_name,
                confidence=_record_confidence(record, default_confidence),
                source=source,
            )
        )
    return mentions


def profile_mentions(
    names: Iterable[str],
    registry: TaxonomyRegistry | None = None,
    confidence: float | None = None,
) -> list[SkillMention]:
    """Mentions for skills taken from a developer profile (e.g. GitHub languages)."""
    return mentions_from_records(names, source="profile", registry=registry, confidence=confidence)
