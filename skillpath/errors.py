"""Exceptions raised by the engine.

Only caller misuse and a broken taxonomy raise. Empty or malformed text,
empty skill lists and zero-weight requirements produce degenerate results
instead.
"""


class SkillPathError(Exception):
    """Base class for all engine errors."""


class TaxonomyConfigError(SkillPathError):
    """The taxonomy violates a build-time invariant. Fatal at startup."""


class InvalidScheduleError(SkillPathError, ValueError):
    """The scheduler was given an unusable weekly hour budget."""
