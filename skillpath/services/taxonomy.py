"""Skill taxonomy registry: canonicalizes free-form skill mentions.

The registry is built once from static entries and is read-only afterwards,
so one instance can be shared by any number of concurrent callers. Lookup
keys are produced by :func:`normalize_token`, which is applied identically
to taxonomy aliases and to text spans found by the extractor.
"""

import logging
import re
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple

from pydantic import ValidationError
from rapidfuzz import fuzz, process

from skillpath.errors import TaxonomyConfigError
from skillpath.models.schemas.taxonomy import CanonicalSkill

logger = logging.getLogger(__name__)

# A token is a maximal run of word characters, optionally introduced by a dot
# so that "Node.js", "ASP.NET" and "OAuth 2.0" split into joinable pieces.
# Underscores stay inside the token: "machine_learning" is one token whose
# key is "machine learning", while "my_python_lib" never yields "python".
TOKEN_RE = re.compile(r"\.?[A-Za-z0-9][A-Za-z0-9+#_]*")

_BRACKETS_RE = re.compile(r"[()\[\]{}]")
_SEPARATORS_RE = re.compile(r"[\s_\-]+")
_EDGE_PUNCT = " \t\r\n,;:!?'\"`*"


def normalize_token(raw: str) -> str:
    """Normalize a skill token or phrase into a lookup key.

    Case-insensitive; brackets and slashes are dropped, a trailing ``.js``
    is stripped, and runs of whitespace, hyphens and underscores collapse to
    a single space. ``"Node.js"`` and ``"node"`` share the key ``"node"``;
    ``"CI/CD"`` becomes ``"cicd"``.
    """
    text = _BRACKETS_RE.sub(" ", (raw or "").lower())
    text = text.strip(_EDGE_PUNCT).rstrip(".")
    if text.endswith(".js") and len(text) > 3:
        text = text[:-3]
    text = text.replace("/", "")
    return _SEPARATORS_RE.sub(" ", text).strip()


def count_tokens(phrase: str) -> int:
    return len(TOKEN_RE.findall(phrase))


class AliasMatch(NamedTuple):
    skill: CanonicalSkill
    exact: bool  # True when the key came from the skill's own name or label


@dataclass(frozen=True)
class _Claim:
    skill_name: str
    raw: str
    canonical: bool


class TaxonomyRegistry:
    """Immutable alias -> canonical skill index.

    Build with :meth:`from_entries`. Alias collisions across distinct skills
    are settled here, at build time: a skill's own name or label beats
    another skill's alias, otherwise the longer raw alias wins. A collision
    that cannot be settled raises :class:`TaxonomyConfigError`.
    """

    def __init__(self, skills: Iterable[CanonicalSkill]) -> None:
        self._skills: dict[str, CanonicalSkill] = {}
        for skill in skills:
            if skill.name in self._skills:
                raise TaxonomyConfigError(f"Duplicate canonical skill name: {skill.name!r}")
            self._skills[skill.name] = skill

        for skill in self._skills.values():
            if skill.parent is not None and skill.parent not in self._skills:
                raise TaxonomyConfigError(
                    f"Skill {skill.name!r} has unknown parent {skill.parent!r}"
                )

        self._index: dict[str, AliasMatch] = self._build_index()
        self._keys: tuple[str, ...] = tuple(sorted(self._index))
        self.max_phrase_tokens = max(
            (count_tokens(raw) for skill in self._skills.values() for raw in skill.search_keys),
            default=1,
        )
        logger.info(
            "Taxonomy registry built: %d skills, %d lookup keys",
            len(self._skills),
            len(self._index),
        )

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> "TaxonomyRegistry":
        """Build a registry from plain mappings (see ``taxonomy_data``)."""
        skills: list[CanonicalSkill] = []
        for entry in entries:
            raw_name = str(entry.get("name", "")).strip().lower()
            if not raw_name:
                raise TaxonomyConfigError(f"Taxonomy entry without a name: {dict(entry)!r}")
            try:
                skills.append(
                    CanonicalSkill(
                        name=raw_name,
                        label=entry.get("label", ""),
                        category=entry.get("category"),
                        aliases=tuple(entry.get("aliases", ())),
                        weight=entry.get("weight", 0.5),
                        trending=bool(entry.get("trending", False)),
                        parent=entry.get("parent"),
                    )
                )
            except ValidationError as exc:
                raise TaxonomyConfigError(f"Invalid taxonomy entry {raw_name!r}: {exc}") from exc
        return cls(skills)

    # -- build ---------------------------------------------------------------

    def _build_index(self) -> dict[str, AliasMatch]:
        claims: dict[str, list[_Claim]] = defaultdict(list)
        for skill in self._skills.values():
            own = [skill.name] + ([skill.label] if skill.label else [])
            for raw in own:
                key = normalize_token(raw)
                if not key:
                    raise TaxonomyConfigError(f"Skill {skill.name!r} normalizes to an empty key")
                claims[key].append(_Claim(skill.name, raw, True))
            for raw in skill.aliases:
                key = normalize_token(raw)
                if key:
                    claims[key].append(_Claim(skill.name, raw, False))

        index: dict[str, AliasMatch] = {}
        for key, key_claims in claims.items():
            owner = self._settle(key, key_claims)
            exact = any(c.canonical for c in key_claims if c.skill_name == owner)
            index[key] = AliasMatch(self._skills[owner], exact)
        return index

    @staticmethod
    def _settle(key: str, key_claims: list[_Claim]) -> str:
        owners = {c.skill_name for c in key_claims}
        if len(owners) == 1:
            return key_claims[0].skill_name

        canonical_owners = {c.skill_name for c in key_claims if c.canonical}
        if len(canonical_owners) > 1:
            raise TaxonomyConfigError(
                f"Key {key!r} is the name of several skills: {sorted(canonical_owners)}"
            )
        if canonical_owners:
            winner = next(iter(canonical_owners))
        else:
            longest: dict[str, int] = {}
            for claim in key_claims:
                longest[claim.skill_name] = max(longest.get(claim.skill_name, 0), len(claim.raw))
            best = max(longest.values())
            leaders = sorted(name for name, length in longest.items() if length == best)
            if len(leaders) > 1:
                raise TaxonomyConfigError(
                    f"Alias {key!r} is claimed equally by {leaders}; make one alias more specific"
                )
            winner = leaders[0]

        logger.warning(
            "Alias collision on %r between %s resolved in favour of %r",
            key,
            sorted(owners),
            winner,
        )
        return winner

    # -- lookup --------------------------------------------------------------

    def lookup(self, token: str) -> AliasMatch | None:
        """Resolve a token and report whether it matched a name or an alias."""
        key = normalize_token(token)
        if not key:
            return None
        return self._index.get(key)

    def resolve(self, token: str) -> CanonicalSkill | None:
        match = self.lookup(token)
        return match.skill if match else None

    def get(self, name: str) -> CanonicalSkill | None:
        """Fetch by canonical name only (no alias resolution)."""
        return self._skills.get(name)

    def suggest(self, token: str, limit: int = 5, score_cutoff: float = 80.0) -> list[CanonicalSkill]:
        """Closest canonical skills for a token that may be misspelled."""
        key = normalize_token(token)
        if not key:
            return []
        exact = self._index.get(key)
        if exact:
            return [exact.skill]

        suggestions: list[CanonicalSkill] = []
        for choice, _score, _idx in process.extract(
            key, self._keys, scorer=fuzz.WRatio, limit=None, score_cutoff=score_cutoff
        ):
            skill = self._index[choice].skill
            if skill not in suggestions:
                suggestions.append(skill)
            if len(suggestions) >= limit:
                break
        return suggestions

    # -- structure -----------------------------------------------------------

    def by_category(self, category: str) -> list[CanonicalSkill]:
        return [s for s in self._skills.values() if s.category == category]

    def trending(self) -> list[CanonicalSkill]:
        return [s for s in self._skills.values() if s.trending]

    def children_of(self, name: str) -> list[CanonicalSkill]:
        return [s for s in self._skills.values() if s.parent == name]

    def related(self, name: str, known: Iterable[str], limit: int = 3) -> list[str]:
        """Skills from ``known`` that relate to ``name`` through the taxonomy.

        Parent and children come first, then skills of the same category, in
        taxonomy order.
        """
        skill = self._skills.get(name)
        if skill is None or limit <= 0:
            return []
        known_set = set(known) - {name}

        related: list[str] = []
        if skill.parent in known_set:
            related.append(skill.parent)
        related.extend(c.name for c in self.children_of(name) if c.name in known_set)
        related.extend(
            s.name
            for s in self._skills.values()
            if s.category == skill.category and s.name in known_set and s.name not in related
        )
        return related[:limit]

    def aliases(self) -> dict[str, str]:
        """Flattened key -> canonical name map."""
        return {key: match.skill.name for key, match in self._index.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._skills

    def __iter__(self) -> Iterator[CanonicalSkill]:
        return iter(self._skills.values())

    def __len__(self) -> int:
        return len(self._skills)


# ---------------------------------------------------------------------------
# Process-wide default registry, built lazily on first use
# ---------------------------------------------------------------------------

_default_registry: TaxonomyRegistry | None = None


def get_default_registry() -> TaxonomyRegistry:
    """Get the bundled taxonomy, building it on first access."""
    global _default_registry
    if _default_registry is None:
        from skillpath.services.taxonomy_data import SKILL_TAXONOMY

        _default_registry = TaxonomyRegistry.from_entries(SKILL_TAXONOMY)
    return _default_registry


def clear_default_registry() -> None:
    """Drop the cached default registry. Useful for testing."""
    global _default_registry
    _default_registry = None
