"""Taxonomy entry: one canonical skill and the spellings that resolve to it."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillCategory = Literal["language", "framework", "tool", "platform", "soft_skill", "domain"]


class CanonicalSkill(BaseModel):
    """Immutable taxonomy record.

    ``name`` is the identity (lowercase, unique across the registry);
    ``label`` is how the skill is usually written, e.g. "Node.js" for
    ``nodejs``.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    label: str = ""
    category: SkillCategory
    aliases: tuple[str, ...] = ()
    weight: float = Field(0.5, ge=0.0, le=1.0)  # importance used for ranking
    trending: bool = False
    parent: str | None = None  # canonical name of the broader skill, if any

    @property
    def display_name(self) -> str:
        return self.label or self.name

    @property
    def search_keys(self) -> tuple[str, ...]:
        """Every raw spelling that should resolve to this skill: name, label, aliases."""
        keys = [self.name, self.label, *self.aliases]
        return tuple(dict.fromkeys(k for k in keys if k))
