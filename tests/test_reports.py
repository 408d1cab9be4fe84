"""Tests for dashboard metrics, sector table and report figures."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from civicfolio.models import Connection, EntityKind, Impact
from civicfolio.services.graph import build_graph
from civicfolio.services.reports import (
    build_network_figure,
    build_timeline_figure,
    calculate_impact_score,
    compute_metrics,
    sector_breakdown,
)
from civicfolio.services.timeline import derive_timeline
from civicfolio.utils import utcnow


def test_metrics_for_seed_portfolio(baseline):
    metrics = compute_metrics(baseline)

    assert metrics.total_actions == 5
    assert metrics.total_actors == 6
    assert metrics.total_assets == 6
    assert metrics.completed_actions == 1
    assert metrics.in_progress_actions == 2
    assert metrics.total_funding == 15_000_000
    assert metrics.synergistic_solutions == 2
    assert metrics.cross_sector_collaborations == 0
    assert metrics.average_impact_score == 8


def test_cross_sector_pairs_are_distinct(baseline):
    def actor_link(conn_id, source, target):
        return Connection(
            id=conn_id,
            source_id=source,
            source_type=EntityKind.ACTOR,
            target_id=target,
            target_type=EntityKind.ACTOR,
            created_at=utcnow(),
        )

    portfolio = baseline.model_copy(
        update={
            "connections": [
                actor_link("x1", "actor-1", "actor-2"),
                actor_link("x2", "actor-1", "actor-2"),
                actor_link("x3", "actor-2", "actor-1"),
            ]
        }
    )

    assert compute_metrics(portfolio).cross_sector_collaborations == 2


def test_impact_score_rounds_and_handles_empty():
    now = utcnow()
    impacts = [Impact(id=str(n), action_id="a", magnitude=m, created_at=now) for n, m in enumerate([7, 8])]

    assert calculate_impact_score(impacts) == 8
    assert calculate_impact_score([]) == 0


def test_sector_breakdown_sorted_by_budget(baseline):
    frame = sector_breakdown(baseline)

    assert list(frame.columns) == ["sector", "actions", "completed", "budget"]
    assert frame.iloc[0]["sector"] == "Housing"
    assert frame.iloc[0]["budget"] == 45_000_000
    energy = frame[frame["sector"] == "Energy"].iloc[0]
    assert energy["completed"] == 1
    assert int(frame["actions"].sum()) == 5


def test_sector_breakdown_empty(baseline):
    frame = sector_breakdown(baseline.model_copy(update={"actions": []}))

    assert frame.empty
    assert list(frame.columns) == ["sector", "actions", "completed", "budget"]


def test_network_figure_draws(baseline):
    fig = build_network_figure(build_graph(baseline))
    try:
        assert fig.axes
    finally:
        plt.close(fig)


def test_timeline_figure_handles_empty(baseline):
    empty = baseline.model_copy(update={"actions": []})
    fig = build_timeline_figure(derive_timeline(empty))
    try:
        assert fig.axes
    finally:
        plt.close(fig)
