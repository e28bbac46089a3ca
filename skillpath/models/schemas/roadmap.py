"""Scheduler output: a week-by-week learning plan."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field

ResourceType = Literal["course", "tutorial", "documentation", "video", "book", "practice"]


class Task(BaseModel):
    skill: str  # canonical name of the skill this chunk belongs to
    title: str
    description: str = ""
    hours: int = Field(..., gt=0)
    deliverable: str = ""


class Resource(BaseModel):
    title: str
    url: str
    type: ResourceType = "documentation"
    provider: str = ""
    is_free: bool = True


class RoadmapWeek(BaseModel):
    week: int = Field(..., ge=1)
    focus_skill: str
    tasks: list[Task] = []
    resources: list[Resource] = []

    @property
    def hours(self) -> int:
        return sum(task.hours for task in self.tasks)


class Milestone(BaseModel):
    week: int
    skill: str
    title: str


class Roadmap(BaseModel):
    """A scheduled plan. ``total_weeks`` is derived from ``weeks``, never set."""
    weekly_hours: int
    weeks: list[RoadmapWeek] = []
    milestones: list[Milestone] = []

    @computed_field
    @property
    def total_weeks(self) -> int:
        return len(self.weeks)

    @computed_field
    @property
    def total_hours(self) -> int:
        return sum(week.hours for week in self.weeks)

    @property
    def fully_qualified(self) -> bool:
        """An empty plan means there was nothing left to learn."""
        return not self.weeks

    def summary(self) -> str:
        if self.fully_qualified:
            return "No learning plan needed: every required skill is already covered."
        n_tasks = sum(len(week.tasks) for week in self.weeks)
        skills = {task.skill for week in self.weeks for task in week.tasks}
        return (
            f"{self.total_weeks}-week learning plan covering {len(skills)} skills "
            f"with {n_tasks} tasks. Requires up to {self.weekly_hours} hours/week."
        )
