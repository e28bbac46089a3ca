"""Taxonomy-driven skill extraction from resumes and job descriptions.

Text is segmented into lines (see ``section_parser``), each line is split
into word tokens, and token n-grams are resolved against the taxonomy
leftmost-longest: at every position the longest resolvable phrase wins and
its tokens are consumed, so "Node.js" is one mention and never also "node"
and "js". Tokens are whole words, which keeps "R" from matching inside
"Architecture". Each token position is looked up at most ``max_n`` times, so
extraction is linear in the length of the text.
"""

import logging
import re
from collections.abc import Iterable

from skillpath.config import Settings
from skillpath.config import settings as default_settings
from skillpath.models.schemas.mentions import SkillMention, SourceTag, TextSpan
from skillpath.services.section_parser import REQUIREMENT_LIST_SECTIONS, SKILL_LIST_SECTIONS, Segment, segment
from skillpath.services.taxonomy import TOKEN_RE, TaxonomyRegistry, get_default_registry, normalize_token
from skillpath.services.taxonomy_data import AMBIGUOUS_TERMS

logger = logging.getLogger(__name__)

# Characters allowed between two tokens of one phrase ("ci/cd", "front-end",
# "machine learning"). Anything else (commas, "and", brackets) breaks it.
_JOINER_RE = re.compile(r"[ \t\-/]*")

# Leading list decoration ignored when deciding if a span opens a sentence
_BULLETS = " \t-*•>#"


class SkillMentionExtractor:
    """Turn unstructured text into confidence-scored skill mentions.

    Confidence policy comes from ``Settings``: an exact canonical name or
    label scores ``exact_match_confidence``, any other alias
    ``alias_match_confidence``, and mentions inside a skills section get
    ``skills_section_boost`` on top (capped at 1.0).

    Keys in ``ambiguous_terms`` ("go", "r", "express") are also plain English,
    so outside a skills list they only count when written like a skill: not
    all lowercase, not glued to "&" ("R&D"), and not the first word of a
    sentence unless the line is a requirement bullet. Dotted spellings
    ("node.js") always count. Pass an empty collection to turn this off.
    """

    def __init__(
        self,
        registry: TaxonomyRegistry | None = None,
        settings: Settings | None = None,
        ambiguous_terms: Iterable[str] | None = None,
    ) -> None:
        self.registry = registry or get_default_registry()
        self.settings = settings or default_settings
        if ambiguous_terms is None:
            ambiguous_terms = AMBIGUOUS_TERMS
        self.ambiguous_terms = frozenset(normalize_token(term) for term in ambiguous_terms)
        self._max_n = max(1, min(self.registry.max_phrase_tokens, self.settings.max_ngram_tokens))

    def extract(self, text: str, source: SourceTag) -> list[SkillMention]:
        """One mention per canonical skill, ordered by first occurrence."""
        mentions = collapse_mentions(self.scan(text, source))
        logger.debug("Extracted %d distinct skills from %s text", len(mentions), source)
        return mentions

    def scan(self, text: str, source: SourceTag) -> list[SkillMention]:
        """Every skill occurrence in text order, without deduplication."""
        found: list[SkillMention] = []
        for seg in segment(text or ""):
            found.extend(self._scan_segment(seg, source))
        return found

    def _scan_segment(self, seg: Segment, source: SourceTag) -> list[SkillMention]:
        line = seg.text
        tokens = [(m.start(), m.end()) for m in TOKEN_RE.finditer(line)]
        if not tokens:
            return []

        # joinable[k]: token k and token k+1 may belong to one phrase
        joinable = [
            _JOINER_RE.fullmatch(line, tokens[k][1], tokens[k + 1][0]) is not None
            for k in range(len(tokens) - 1)
        ]

        mentions: list[SkillMention] = []
        i = 0
        while i < len(tokens):
            width = 1
            for n in range(min(self._max_n, len(tokens) - i), 0, -1):
                if n > 1 and not all(joinable[i : i + n - 1]):
                    continue
                start, end = tokens[i][0], tokens[i + n - 1][1]
                match = self.registry.lookup(line[start:end])
                if match is None or not self._plausible(line, start, end, seg.section):
                    continue
                mentions.append(
                    SkillMention(
                        skill=match.skill,
                        matched_text=line[start:end],
                        confidence=self._confidence(match.exact, seg.section),
                        source=source,
                        span=TextSpan(start=seg.start + start, end=seg.start + end, line=seg.line),
                        section=seg.section,
                    )
                )
                width = n
                break
            i += width
        return mentions

    def _plausible(self, line: str, start: int, end: int, section: str) -> bool:
        span = line[start:end]
        if normalize_token(span) not in self.ambiguous_terms:
            return True
        if "." in span or section in SKILL_LIST_SECTIONS:
            return True
        if span == span.lower():
            return False
        if line[start - 1 : start] == "&" or line[end : end + 1] == "&":
            return False
        if section in REQUIREMENT_LIST_SECTIONS:
            return True
        prefix = line[:start].rstrip().rstrip(_BULLETS)
        return bool(prefix) and prefix[-1] not in ".!?:"

    def _confidence(self, exact: bool, section: str) -> float:
        if exact:
            score = self.settings.exact_match_confidence
        else:
            score = self.settings.alias_match_confidence
        if section in SKILL_LIST_SECTIONS:
            score += self.settings.skills_section_boost
        return round(min(1.0, score), 4)


def collapse_mentions(mentions: Iterable[SkillMention]) -> list[SkillMention]:
    """Deduplicate mentions per canonical skill.

    The earliest mention's provenance is kept, its confidence is raised to
    the highest seen for that skill (never averaged) and ``occurrences``
    accumulates. Output order is first appearance.
    """
    kept: dict[str, SkillMention] = {}
    best: dict[str, float] = {}
    counts: dict[str, int] = {}

    for mention in mentions:
        name = mention.skill.name
        if name not in kept:
            kept[name] = mention
            best[name] = mention.confidence
            counts[name] = mention.occurrences
        else:
            best[name] = max(best[name], mention.confidence)
            counts[name] += mention.occurrences

    return [
        mention.model_copy(update={"confidence": best[name], "occurrences": counts[name]})
        for name, mention in kept.items()
    ]


def merge_mentions(*groups: Iterable[SkillMention]) -> list[SkillMention]:
    """Union candidate mentions from several sources (resume, profile, manual).

    Groups are read in the order given, so a skill keeps the provenance of
    the first group that mentions it.
    """
    return collapse_mentions(m for group in groups for m in group)
