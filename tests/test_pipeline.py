"""End-to-end tests for analyze_profile."""

import pytest

from skillpath.config import Settings
from skillpath.errors import InvalidScheduleError
from skillpath.services.pipeline import AnalysisReport, analyze_profile

JOB = """Platform Engineer

Requirements:
- Python
- Docker

Nice to have:
- Kubernetes
"""

RESUME = """Skills: Python, TypeScript"""


class TestAnalyzeProfile:
    def test_full_flow(self, registry):
        report = analyze_profile(JOB, RESUME, profile_skills=["k8s"], registry=registry)

        assert isinstance(report, AnalysisReport)
        assert [(r.skill.name, r.priority, r.weight) for r in report.required_skills] == [
            ("python", "core", 1.0),
            ("docker", "core", 1.0),
            ("kubernetes", "nice_to_have", 0.4),
        ]
        assert [m.skill.name for m in report.candidate_mentions] == ["python", "typescript", "kubernetes"]
        assert report.candidate_mentions[2].source == "profile"
        assert report.candidate_mentions[2].confidence == 0.8

        assert report.gap.match_percentage == 58
        assert [(m.skill.name, m.priority, m.estimated_hours) for m in report.gap.missing_skills] == [
            ("docker", "high", 12)
        ]
        assert report.gap.extra_skills == ["typescript"]

        assert report.roadmap.weekly_hours == 10
        assert report.roadmap.total_weeks == 2
        assert report.summary.high_priority_count == 1

    def test_manual_skills_close_the_gap(self, registry):
        report = analyze_profile(
            JOB,
            RESUME,
            profile_skills=["k8s"],
            manual_skills=[{"skill_name": "Docker"}],
            registry=registry,
        )
        assert report.gap.match_percentage == 100
        assert report.roadmap.fully_qualified is True

    def test_weekly_hours_override(self, registry):
        report = analyze_profile(JOB, RESUME, weekly_hours=20, registry=registry)
        assert report.roadmap.weekly_hours == 20
        assert report.roadmap.total_weeks == 1

    def test_settings_default_weekly_hours(self, registry):
        report = analyze_profile(JOB, RESUME, registry=registry, settings=Settings(default_weekly_hours=6))
        assert report.roadmap.weekly_hours == 6
        assert report.roadmap.total_weeks == 4

    def test_empty_inputs_are_degraded_not_errors(self, registry):
        report = analyze_profile("", "", registry=registry)
        assert report.gap.degraded is True
        assert report.gap.match_percentage == 0
        assert report.roadmap.fully_qualified is True

    def test_invalid_weekly_hours(self, registry):
        with pytest.raises(InvalidScheduleError):
            analyze_profile(JOB, RESUME, weekly_hours=0, registry=registry)

    def test_default_registry(self):
        report = analyze_profile("Requirements:\nPython, Docker", "Python developer")
        assert [s.name for s in report.gap.matched_skills] == ["python"]
        assert [m.skill.name for m in report.gap.missing_skills] == ["docker"]
