"""Portfolio-wide milestone timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..models import MilestoneStatus, Portfolio
from ..utils import calculate_progress


@dataclass(frozen=True)
class MilestoneView:
    """A milestone tagged with the action it belongs to."""

    id: str
    title: str
    description: str
    due_date: date
    status: MilestoneStatus
    action_id: str
    action_name: str


@dataclass
class TimelineSummary:
    overall_progress: float = 0.0
    milestones: list[MilestoneView] = field(default_factory=list)
    range_start: Optional[date] = None
    range_end: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return not self.milestones

    @property
    def span_days(self) -> int:
        if self.range_start is None or self.range_end is None:
            return 0
        return (self.range_end - self.range_start).days

    def position(self, due_date: date) -> Optional[float]:
        """Relative position of ``due_date`` on the axis, in [0, 1].

        ``None`` when the timeline is empty or all milestones share one date;
        callers choose their own fallback (the desktop view centres them).
        """

        span = self.span_days
        if span <= 0 or self.range_start is None:
            return None
        offset = (due_date - self.range_start).days / span
        return min(1.0, max(0.0, offset))

    def recent(self, limit: int = 5) -> list[MilestoneView]:
        """The last ``limit`` milestones by due date, latest first."""

        if limit <= 0:
            return []
        return list(reversed(self.milestones[-limit:]))

    @property
    def rounded_progress(self) -> int:
        return calculate_progress(item.status for item in self.milestones)


def derive_timeline(portfolio: Portfolio) -> TimelineSummary:
    """Flatten every action's milestones into one date-ordered timeline."""

    flattened = [
        MilestoneView(
            id=milestone.id,
            title=milestone.title,
            description=milestone.description,
            due_date=milestone.due_date,
            status=milestone.status,
            action_id=action.id,
            action_name=action.name,
        )
        for action in portfolio.actions
        for milestone in action.timeline.milestones
    ]
    if not flattened:
        return TimelineSummary()

    # sorted() is stable, so equal dates keep portfolio order
    ordered = sorted(flattened, key=lambda item: item.due_date)
    completed = sum(1 for item in ordered if item.status == MilestoneStatus.COMPLETED)
    return TimelineSummary(
        overall_progress=100 * completed / len(ordered),
        milestones=ordered,
        range_start=ordered[0].due_date,
        range_end=ordered[-1].due_date,
    )


def action_progress(portfolio: Portfolio) -> dict[str, int]:
    """Rounded completion percent per action id."""

    return {
        action.id: calculate_progress(m.status for m in action.timeline.milestones)
        for action in portfolio.actions
    }
