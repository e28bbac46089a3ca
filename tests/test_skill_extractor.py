"""Tests for taxonomy-driven skill extraction."""

import time

import pytest

from skillpath.config import Settings
from skillpath.models.schemas.mentions import SkillMention
from skillpath.services.skill_extractor import SkillMentionExtractor, collapse_mentions, merge_mentions
from skillpath.services.taxonomy import TaxonomyRegistry


def _names(mentions):
    return [m.skill.name for m in mentions]


class TestExtract:
    def test_experience_sentence(self, extractor):
        mentions = extractor.extract("Experience with React, Node.js and TypeScript", "resume")
        assert _names(mentions) == ["react", "nodejs", "typescript"]
        assert [m.confidence for m in mentions] == [1.0, 1.0, 1.0]
        assert all(m.source == "resume" for m in mentions)

    def test_experience_sentence_with_bundled_taxonomy(self):
        mentions = SkillMentionExtractor().extract(
            "Experience with React, Node.js and TypeScript", "resume"
        )
        assert _names(mentions) == ["react", "nodejs", "typescript"]
        assert [m.confidence for m in mentions] == [1.0, 1.0, 1.0]

    def test_dotted_name_is_one_mention(self, extractor):
        mentions = extractor.extract("Built services on Node.js", "resume")
        assert _names(mentions) == ["nodejs"]
        assert mentions[0].matched_text == "Node.js"
        assert mentions[0].occurrences == 1

    def test_word_boundary(self, extractor):
        assert extractor.extract("Software Architecture and design", "resume") == []
        assert _names(extractor.extract("Proficient in R and Python", "resume")) == ["r", "python"]

    def test_longest_phrase_wins(self, extractor):
        mentions = extractor.extract("Built CI/CD pipelines with Docker", "resume")
        assert _names(mentions) == ["ci/cd", "docker"]
        assert mentions[0].matched_text == "CI/CD pipelines"
        assert mentions[0].confidence == 0.9

    def test_punctuation_breaks_phrases(self, extractor):
        mentions = extractor.extract("machine, learning", "resume")
        assert mentions == []

    def test_multiword_and_underscore(self, extractor):
        assert _names(extractor.extract("Applied machine learning daily", "resume")) == ["machine learning"]
        assert _names(extractor.extract("tagged machine_learning", "resume")) == ["machine learning"]
        assert extractor.extract("imported my_python_lib", "resume") == []

    def test_alias_confidence(self, extractor):
        mentions = extractor.extract("Deployed to k8s", "resume")
        assert _names(mentions) == ["kubernetes"]
        assert mentions[0].confidence == 0.9

    def test_skills_section_boost(self, extractor):
        mentions = extractor.extract("Skills: k8s, Python", "resume")
        assert _names(mentions) == ["kubernetes", "python"]
        assert [m.confidence for m in mentions] == [1.0, 1.0]
        assert all(m.section == "skills" for m in mentions)

    def test_confidence_is_configurable(self, registry):
        tuned = SkillMentionExtractor(registry, Settings(alias_match_confidence=0.5, skills_section_boost=0.2))
        assert tuned.extract("Deployed to k8s", "resume")[0].confidence == 0.5
        assert tuned.extract("Skills: k8s", "resume")[0].confidence == 0.7

    def test_dedup_keeps_earliest_provenance_and_max_confidence(self, extractor):
        text = "I used k8s at work.\nSkills: Kubernetes, Docker"
        mentions = extractor.extract(text, "resume")
        assert _names(mentions) == ["kubernetes", "docker"]
        k8s = mentions[0]
        assert k8s.matched_text == "k8s"
        assert k8s.span.line == 1
        assert k8s.confidence == 1.0
        assert k8s.occurrences == 2

    def test_spans_index_original_text(self, extractor):
        text = "Summary\nShipped React apps.\n\nSkills: Python, CI/CD"
        for mention in extractor.scan(text, "resume"):
            assert text[mention.span.start : mention.span.end] == mention.matched_text

    def test_order_is_first_occurrence(self, extractor):
        text = "Docker first.\nThen Python, then Docker again."
        assert _names(extractor.extract(text, "resume")) == ["docker", "python"]

    def test_empty_text(self, extractor):
        assert extractor.extract("", "resume") == []
        assert extractor.extract("   \n\t", "job_description") == []
        assert extractor.extract(None, "resume") == []

    def test_padded_line_stays_fast(self, extractor):
        started = time.perf_counter()
        mentions = extractor.extract(" " * 20000 + "Python", "resume")
        assert time.perf_counter() - started < 1.0
        assert _names(mentions) == ["python"]
        assert mentions[0].span.start == 20000

    def test_idempotent(self, extractor):
        text = "Skills: Python, TypeScript\nShipped React and Node.js services with Docker and k8s."
        assert extractor.extract(text, "resume") == extractor.extract(text, "resume")


class TestScan:
    def test_keeps_every_occurrence(self, extractor):
        mentions = extractor.scan("Python and Python again", "job_description")
        assert _names(mentions) == ["python", "python"]

    def test_section_tag(self, extractor):
        mentions = extractor.scan("Requirements:\nDocker", "job_description")
        assert mentions[0].section == "requirements"


class TestMerge:
    def test_first_group_keeps_provenance(self, registry):
        python = registry.get("python")
        docker = registry.get("docker")
        resume = [SkillMention(skill=python, matched_text="Python", confidence=0.9, source="resume")]
        profile = [
            SkillMention(skill=python, matched_text="python", confidence=1.0, source="profile"),
            SkillMention(skill=docker, matched_text="docker", confidence=0.8, source="profile"),
        ]
        merged = merge_mentions(resume, profile)
        assert _names(merged) == ["python", "docker"]
        assert merged[0].source == "resume"
        assert merged[0].confidence == 1.0
        assert merged[0].occurrences == 2
        assert merged[1].source == "profile"

    def test_collapse_empty(self):
        assert collapse_mentions([]) == []


class TestAmbiguousTerms:
    @pytest.fixture
    def words_registry(self):
        return TaxonomyRegistry.from_entries(
            [
                {"name": "go", "label": "Go", "category": "language", "aliases": ["golang"]},
                {"name": "r", "label": "R", "category": "language"},
                {"name": "nodejs", "label": "Node.js", "category": "platform"},
                {"name": "expressjs", "label": "Express.js", "category": "framework"},
            ]
        )

    @pytest.fixture
    def words_extractor(self, words_registry):
        return SkillMentionExtractor(words_registry)

    def test_plain_english_is_not_a_skill(self, words_extractor):
        assert words_extractor.extract("Next, we go to R&D and express our plans", "job_description") == []

    def test_bundled_taxonomy_ignores_plain_english(self):
        assert SkillMentionExtractor().extract("Next, we go to R&D and express our plans", "job_description") == []

    def test_capitalized_mid_sentence(self, words_extractor):
        assert _names(words_extractor.extract("Wrote services in Go and R", "resume")) == ["go", "r"]

    def test_sentence_initial_is_skipped(self, words_extractor):
        assert words_extractor.extract("Go ahead and apply. R is optional", "job_description") == []

    def test_skills_section_accepts_lowercase(self, words_extractor):
        assert _names(words_extractor.extract("Skills: go, node", "resume")) == ["go", "nodejs"]

    def test_requirement_bullets(self, words_extractor):
        text = "Requirements:\n- Go\n- Express"
        assert _names(words_extractor.extract(text, "job_description")) == ["go", "expressjs"]
        assert words_extractor.extract("Requirements:\n- go to meetings", "job_description") == []

    def test_unambiguous_spellings_always_count(self, words_extractor):
        assert _names(words_extractor.extract("wrote golang services", "resume")) == ["go"]
        assert _names(words_extractor.extract("Shipped node.js apps", "resume")) == ["nodejs"]

    def test_rule_can_be_disabled(self, words_registry):
        permissive = SkillMentionExtractor(words_registry, ambiguous_terms=())
        assert _names(permissive.extract("we go", "resume")) == ["go"]
