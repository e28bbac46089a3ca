"""Tests for the taxonomy registry and token normalization."""

import logging

import pytest

from skillpath.errors import TaxonomyConfigError
from skillpath.models.schemas.taxonomy import CanonicalSkill
from skillpath.services.taxonomy import (
    TaxonomyRegistry,
    clear_default_registry,
    get_default_registry,
    normalize_token,
)


class TestNormalizeToken:
    def test_case_insensitive(self):
        assert normalize_token("TypeScript") == "typescript"

    def test_strips_trailing_js(self):
        assert normalize_token("Node.js") == "node"
        assert normalize_token("React.JS") == "react"

    def test_bare_js_is_kept(self):
        assert normalize_token(".js") == ".js"

    def test_removes_slash(self):
        assert normalize_token("CI/CD") == "cicd"

    def test_collapses_separators(self):
        assert normalize_token("machine_learning") == "machine learning"
        assert normalize_token("front--end  dev") == "front end dev"

    def test_drops_brackets_and_edge_punctuation(self):
        assert normalize_token("(Python),") == "python"
        assert normalize_token("Docker.") == "docker"

    def test_empty(self):
        assert normalize_token("") == ""
        assert normalize_token(" ,; ") == ""


class TestResolve:
    def test_canonical_name_round_trips(self, registry):
        for skill in registry:
            assert registry.resolve(skill.name) == skill

    def test_label_and_alias(self, registry):
        assert registry.resolve("Node.js").name == "nodejs"
        assert registry.resolve("NODE").name == "nodejs"
        assert registry.resolve("k8s").name == "kubernetes"
        assert registry.resolve("CI/CD Pipelines").name == "ci/cd"

    def test_unknown_and_empty(self, registry):
        assert registry.resolve("cobol") is None
        assert registry.resolve("") is None
        assert registry.resolve("   ") is None

    def test_lookup_reports_exactness(self, registry):
        assert registry.lookup("Kubernetes").exact is True
        assert registry.lookup("k8s").exact is False

    def test_get_is_canonical_only(self, registry):
        assert registry.get("kubernetes").label == "Kubernetes"
        assert registry.get("k8s") is None

    def test_alias_map_is_a_function(self, registry):
        aliases = registry.aliases()
        for key, name in aliases.items():
            assert registry.resolve(key).name == name

    def test_max_phrase_tokens_counts_raw_phrases(self, registry):
        # "ci/cd pipelines" is three word tokens
        assert registry.max_phrase_tokens == 3

    def test_search_keys(self, registry):
        assert registry.get("nodejs").search_keys == ("nodejs", "Node.js")
        assert registry.get("kubernetes").search_keys == ("kubernetes", "Kubernetes", "k8s")

    def test_contains_and_len(self, registry):
        assert "python" in registry
        assert "py" not in registry
        assert len(registry) == 11


class TestCollisions:
    def test_name_beats_foreign_alias(self, caplog):
        entries = [
            {"name": "java", "category": "language"},
            {"name": "javascript", "category": "language", "aliases": ["java"]},
        ]
        with caplog.at_level(logging.WARNING, logger="skillpath.services.taxonomy"):
            reg = TaxonomyRegistry.from_entries(entries)
        assert reg.resolve("java").name == "java"
        assert "collision" in caplog.text

    def test_longer_alias_wins(self):
        entries = [
            {"name": "nodejs", "category": "platform", "aliases": ["node.js"]},
            {"name": "node-red", "category": "tool", "aliases": ["node"]},
        ]
        reg = TaxonomyRegistry.from_entries(entries)
        assert reg.resolve("node").name == "nodejs"

    def test_equal_aliases_raise(self):
        entries = [
            {"name": "machine learning", "category": "domain", "aliases": ["ml"]},
            {"name": "ml ops", "category": "domain", "aliases": ["ML"]},
        ]
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry.from_entries(entries)

    def test_two_names_same_key_raise(self):
        entries = [
            {"name": "ci/cd", "category": "tool"},
            {"name": "cicd", "category": "tool"},
        ]
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry.from_entries(entries)


class TestBuildValidation:
    def test_duplicate_name(self):
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry(
                [
                    CanonicalSkill(name="python", category="language"),
                    CanonicalSkill(name="python", category="language"),
                ]
            )

    def test_unknown_parent(self):
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry.from_entries([{"name": "react", "category": "framework", "parent": "javascript"}])

    def test_invalid_category(self):
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry.from_entries([{"name": "cobol", "category": "mainframe"}])

    def test_missing_name(self):
        with pytest.raises(TaxonomyConfigError):
            TaxonomyRegistry.from_entries([{"category": "tool"}])

    def test_names_are_lowercased(self):
        reg = TaxonomyRegistry.from_entries([{"name": "Docker", "category": "tool"}])
        assert "docker" in reg


class TestStructure:
    def test_by_category(self, registry):
        assert [s.name for s in registry.by_category("tool")] == ["docker", "kubernetes", "ci/cd"]

    def test_trending(self, registry):
        assert [s.name for s in registry.trending()] == ["javascript", "python", "react", "docker"]

    def test_children_of(self, registry):
        assert [s.name for s in registry.children_of("javascript")] == ["typescript", "react", "nodejs"]

    def test_related_parent_first_then_category(self, registry):
        related = registry.related("typescript", ["python", "react", "javascript"])
        assert related == ["javascript", "python"]

    def test_related_children_then_category(self, registry):
        assert registry.related("docker", ["ci/cd", "kubernetes"]) == ["kubernetes", "ci/cd"]

    def test_related_respects_limit(self, registry):
        assert registry.related("typescript", ["javascript", "python", "r"], limit=1) == ["javascript"]

    def test_related_unknown_skill(self, registry):
        assert registry.related("cobol", ["python"]) == []


class TestSuggest:
    def test_exact_hit(self, registry):
        assert [s.name for s in registry.suggest("Python")] == ["python"]

    def test_misspelling(self, registry):
        suggestions = registry.suggest("pyhton")
        assert suggestions
        assert suggestions[0].name == "python"

    def test_nothing_close(self, registry):
        assert registry.suggest("zzzzzz") == []
        assert registry.suggest("") == []


class TestDefaultRegistry:
    def test_cached(self):
        assert get_default_registry() is get_default_registry()

    def test_clear(self):
        first = get_default_registry()
        clear_default_registry()
        assert get_default_registry() is not first

    def test_bundled_taxonomy_round_trips(self):
        reg = get_default_registry()
        assert len(reg) > 50
        for skill in reg:
            assert reg.resolve(skill.name) == skill

    def test_bundled_parents_exist(self):
        reg = get_default_registry()
        for skill in reg:
            if skill.parent is not None:
                assert skill.parent in reg
