"""Shared fixtures: a small taxonomy and tuned settings."""

import pytest

from skillpath.config import Settings
from skillpath.services.skill_extractor import SkillMentionExtractor
from skillpath.services.taxonomy import TaxonomyRegistry, clear_default_registry

FIXTURE_TAXONOMY = [
    {"name": "javascript", "label": "JavaScript", "category": "language", "trending": True, "aliases": ["js"]},
    {"name": "typescript", "label": "TypeScript", "category": "language", "aliases": ["ts"], "parent": "javascript"},
    {"name": "python", "label": "Python", "category": "language", "trending": True, "aliases": ["py"]},
    {"name": "r", "label": "R", "category": "language", "aliases": ["rstats"]},
    {"name": "react", "label": "React", "category": "framework", "trending": True, "parent": "javascript"},
    {"name": "nodejs", "label": "Node.js", "category": "platform", "parent": "javascript"},
    {"name": "docker", "label": "Docker", "category": "tool", "trending": True, "aliases": ["containers"]},
    {"name": "kubernetes", "label": "Kubernetes", "category": "tool", "aliases": ["k8s"], "parent": "docker"},
    {"name": "ci/cd", "label": "CI/CD", "category": "tool",
     "aliases": ["ci/cd pipelines", "continuous integration"]},
    {"name": "machine learning", "label": "Machine Learning", "category": "domain", "aliases": ["ml"]},
    {"name": "communication", "label": "Communication", "category": "soft_skill"},
]


@pytest.fixture(autouse=True)
def _reset_default_registry():
    """Each test starts without a cached default taxonomy."""
    clear_default_registry()
    yield
    clear_default_registry()


@pytest.fixture
def registry() -> TaxonomyRegistry:
    return TaxonomyRegistry.from_entries(FIXTURE_TAXONOMY)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def extractor(registry, settings) -> SkillMentionExtractor:
    return SkillMentionExtractor(registry, settings)
