"""Greedy week-by-week packing of missing skills into a learning plan.

Skills are taken in the gap analyzer's total order (priority, weight, then
original position). Each skill's hours are split into 1-3 atomic chunks and
chunks are placed in order: a chunk goes into the current week if it fits,
otherwise the week is closed and the chunk opens the next one. A chunk larger
than the whole budget therefore sits alone in its own week. The result is
deterministic; it is not an optimal packing and may leave weeks under-filled.
"""

import logging
from collections.abc import Sequence

from skillpath.config import Settings
from skillpath.config import settings as default_settings
from skillpath.errors import InvalidScheduleError
from skillpath.models.schemas.gap import MissingSkill
from skillpath.models.schemas.roadmap import Milestone, Resource, Roadmap, RoadmapWeek, Task
from skillpath.services.gap_analyzer import order_missing
from skillpath.services.learning_catalog import resources_for, task_for

logger = logging.getLogger(__name__)


def split_hours(hours: int, settings: Settings | None = None) -> list[int]:
    """Split a skill's hours into near-equal integer chunks, larger first.

    ``<= single_chunk_max_hours`` -> 1 chunk, ``<= double_chunk_max_hours``
    -> 2, otherwise 3. Never yields a zero-hour chunk.
    """
    cfg = settings or default_settings
    if hours <= cfg.single_chunk_max_hours:
        n_chunks = 1
    elif hours <= cfg.double_chunk_max_hours:
        n_chunks = 2
    else:
        n_chunks = 3
    n_chunks = max(1, min(n_chunks, hours))

    base, remainder = divmod(hours, n_chunks)
    return [base + 1 if i < remainder else base for i in range(n_chunks)]


def validate_weekly_hours(weekly_hours: object) -> int:
    if isinstance(weekly_hours, bool) or not isinstance(weekly_hours, int):
        raise InvalidScheduleError(
            f"weekly_hours must be a positive integer, got {weekly_hours!r}"
        )
    if weekly_hours <= 0:
        raise InvalidScheduleError(f"weekly_hours must be positive, got {weekly_hours}")
    return weekly_hours


def _focus_skill(tasks: list[Task]) -> str:
    # Ties go to the skill placed first in the week
    hours: dict[str, int] = {}
    for task in tasks:
        hours[task.skill] = hours.get(task.skill, 0) + task.hours
    focus, best = "", -1
    for skill, total in hours.items():
        if total > best:
            focus, best = skill, total
    return focus


class RoadmapScheduler:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def schedule(self, missing: Sequence[MissingSkill], weekly_hours: int) -> list[RoadmapWeek]:
        """Pack missing skills into weeks of at most ``weekly_hours`` hours.

        Raises:
            InvalidScheduleError: ``weekly_hours`` is not a positive integer.
        """
        validate_weekly_hours(weekly_hours)

        buckets: list[list[Task]] = []
        resources: list[list[Resource]] = []
        current: list[Task] = []
        current_resources: list[Resource] = []
        used = 0

        for gap in order_missing(missing):
            skill_resources = resources_for(gap.skill)
            for index, hours in enumerate(split_hours(gap.estimated_hours, self.settings)):
                if current and used + hours > weekly_hours:
                    buckets.append(current)
                    resources.append(current_resources)
                    current, current_resources, used = [], [], 0
                current.append(task_for(gap.skill, index, hours))
                used += hours
                for resource in skill_resources:
                    if resource not in current_resources:
                        current_resources.append(resource)

        if current:
            buckets.append(current)
            resources.append(current_resources)

        return [
            RoadmapWeek(
                week=number,
                focus_skill=_focus_skill(tasks),
                tasks=tasks,
                resources=week_resources,
            )
            for number, (tasks, week_resources) in enumerate(zip(buckets, resources), start=1)
        ]

    def build_roadmap(self, missing: Sequence[MissingSkill], weekly_hours: int) -> Roadmap:
        """Schedule ``missing`` and mark the week each skill is finished."""
        weeks = self.schedule(missing, weekly_hours)

        labels = {gap.skill.name: gap.skill.display_name for gap in missing}
        finished_in: dict[str, int] = {}
        for week in weeks:
            for task in week.tasks:
                finished_in[task.skill] = week.week

        # sorted() is stable, so skills finishing in the same week keep placement order
        milestones = [
            Milestone(week=week, skill=skill, title=f"Complete {labels[skill]}")
            for skill, week in sorted(finished_in.items(), key=lambda item: item[1])
        ]

        roadmap = Roadmap(weekly_hours=weekly_hours, weeks=weeks, milestones=milestones)
        logger.info(
            "Scheduled %d skills into %d weeks (%d hours, budget %d/week)",
            len(finished_in),
            roadmap.total_weeks,
            roadmap.total_hours,
            weekly_hours,
        )
        return roadmap


def build_roadmap(
    missing: Sequence[MissingSkill],
    weekly_hours: int,
    settings: Settings | None = None,
) -> Roadmap:
    return RoadmapScheduler(settings).build_roadmap(missing, weekly_hours)
