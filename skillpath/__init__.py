"""Skill intelligence and roadmap scheduling engine."""

from skillpath.errors import InvalidScheduleError, SkillPathError, TaxonomyConfigError

__version__ = "1.0.0"

__all__ = [
    "InvalidScheduleError",
    "SkillPathError",
    "TaxonomyConfigError",
    "__version__",
]
