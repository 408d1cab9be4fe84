"""Action (portfolio initiative) models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import ActionStatus, MilestoneStatus


class Milestone(SQLModel):
    """A dated checkpoint inside an action's timeline."""

    id: str
    title: str
    description: str = ""
    due_date: date
    status: MilestoneStatus = MilestoneStatus.PENDING
    # Referenced milestone ids; not validated.
    dependencies: Optional[list[str]] = None


class ActionTimeline(SQLModel):
    start_date: date
    end_date: date
    milestones: list[Milestone] = Field(default_factory=list)


class Action(SQLModel):
    """A portfolio initiative or project."""

    id: str
    name: str
    description: str = ""
    target_outcomes: list[str] = Field(default_factory=list)
    status: ActionStatus = ActionStatus.NOT_STARTED
    timeline: ActionTimeline
    sector: str = "General"
    impact_area: str = "General"
    budget: float = Field(default=0.0, ge=0)
    created_at: datetime
    updated_at: datetime
