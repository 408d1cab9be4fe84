"""Tests for the portfolio milestone timeline."""

from __future__ import annotations

from datetime import date

from civicfolio.models import Milestone, MilestoneStatus
from civicfolio.services.timeline import action_progress, derive_timeline


def _with_milestones(portfolio, milestones):
    first = portfolio.actions[0]
    timeline = first.timeline.model_copy(update={"milestones": milestones})
    return portfolio.model_copy(
        update={"actions": [first.model_copy(update={"timeline": timeline})]}
    )


def test_milestones_are_ordered_by_due_date(baseline):
    summary = derive_timeline(baseline)

    dates = [m.due_date for m in summary.milestones]
    assert dates == sorted(dates)
    assert len(dates) == 15
    assert summary.range_start == date(2022, 3, 31)
    assert summary.range_end == date(2025, 6, 30)


def test_milestones_carry_their_action(baseline):
    summary = derive_timeline(baseline)
    m1 = next(m for m in summary.milestones if m.id == "m1")

    assert m1.action_id == "action-1"
    assert m1.action_name == "Urban Green Infrastructure Development"


def test_equal_due_dates_keep_portfolio_order(baseline):
    summary = derive_timeline(baseline)
    same_day = [m.id for m in summary.milestones if m.due_date == date(2024, 12, 31)]

    assert same_day == ["m3", "m9"]


def test_overall_progress(baseline):
    summary = derive_timeline(baseline)

    assert summary.overall_progress == 100 * 6 / 15
    assert summary.rounded_progress == 40


def test_no_milestones_is_zero_progress_and_empty_range(baseline):
    summary = derive_timeline(_with_milestones(baseline, []))

    assert summary.overall_progress == 0
    assert summary.milestones == []
    assert summary.range_start is None
    assert summary.range_end is None
    assert summary.position(date(2024, 1, 1)) is None
    assert summary.recent() == []


def test_single_date_has_no_position(baseline):
    milestones = [
        Milestone(id="a", title="A", due_date=date(2024, 5, 1)),
        Milestone(id="b", title="B", due_date=date(2024, 5, 1), status=MilestoneStatus.COMPLETED),
    ]
    summary = derive_timeline(_with_milestones(baseline, milestones))

    assert summary.span_days == 0
    assert summary.position(date(2024, 5, 1)) is None
    assert summary.overall_progress == 50


def test_positions_are_relative_and_clamped(baseline):
    milestones = [
        Milestone(id="a", title="A", due_date=date(2024, 1, 1)),
        Milestone(id="b", title="B", due_date=date(2024, 1, 11)),
    ]
    summary = derive_timeline(_with_milestones(baseline, milestones))

    assert summary.position(date(2024, 1, 1)) == 0.0
    assert summary.position(date(2024, 1, 6)) == 0.5
    assert summary.position(date(2024, 1, 11)) == 1.0
    assert summary.position(date(2025, 1, 1)) == 1.0
    assert summary.position(date(2023, 1, 1)) == 0.0


def test_recent_is_latest_first(baseline):
    recent = derive_timeline(baseline).recent(5)

    assert [m.id for m in recent][:2] == ["m15", "m6"]
    assert len(recent) == 5
    assert recent[0].due_date >= recent[-1].due_date


def test_action_progress(baseline):
    progress = action_progress(baseline)

    assert progress["action-1"] == 33
    assert progress["action-4"] == 100
    assert progress["action-2"] == 0
    assert progress["action-5"] == 33
