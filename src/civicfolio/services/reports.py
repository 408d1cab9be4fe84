"""Reporting utilities for CivicFolio: dashboard metrics, tables and figures."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterable

import matplotlib.pyplot as plt
import networkx as nx
import pandas as pd
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from ..models import (
    ActionStatus,
    AssetType,
    EntityKind,
    Impact,
    MilestoneStatus,
    Portfolio,
    RelationshipType,
)
from .graph import EDGE_STYLES, NODE_STYLES, Graph
from .timeline import TimelineSummary


@dataclass(frozen=True)
class DashboardMetrics:
    total_actions: int
    total_actors: int
    total_assets: int
    completed_actions: int
    in_progress_actions: int
    total_funding: float
    synergistic_solutions: int
    cross_sector_collaborations: int
    average_impact_score: int

    def as_dict(self) -> dict:
        return asdict(self)


def calculate_impact_score(impacts: Iterable[Impact]) -> int:
    """Rounded mean magnitude; 0 when there are no impacts."""

    magnitudes = [impact.magnitude for impact in impacts]
    if not magnitudes:
        return 0
    return math.floor(sum(magnitudes) / len(magnitudes) + 0.5)


def compute_metrics(portfolio: Portfolio) -> DashboardMetrics:
    actor_pairs = {
        (conn.source_id, conn.target_id)
        for conn in portfolio.connections
        if conn.source_type == EntityKind.ACTOR and conn.target_type == EntityKind.ACTOR
    }
    return DashboardMetrics(
        total_actions=len(portfolio.actions),
        total_actors=len(portfolio.actors),
        total_assets=len(portfolio.assets),
        completed_actions=sum(1 for a in portfolio.actions if a.status == ActionStatus.COMPLETED),
        in_progress_actions=sum(1 for a in portfolio.actions if a.status == ActionStatus.IN_PROGRESS),
        total_funding=sum(a.value for a in portfolio.assets if a.type == AssetType.FUNDING),
        synergistic_solutions=sum(
            1 for c in portfolio.connections if c.relationship_type == RelationshipType.SYNERGY
        ),
        cross_sector_collaborations=len(actor_pairs),
        average_impact_score=calculate_impact_score(portfolio.impacts),
    )


SECTOR_COLUMNS = ["sector", "actions", "completed", "budget"]


def sector_breakdown(portfolio: Portfolio) -> pd.DataFrame:
    """Actions per sector with completed counts and budget totals, largest budget first."""

    frame = pd.DataFrame(
        [
            {
                "sector": action.sector,
                "completed": int(action.status == ActionStatus.COMPLETED),
                "budget": float(action.budget),
            }
            for action in portfolio.actions
        ],
        columns=["sector", "completed", "budget"],
    )
    if frame.empty:
        return pd.DataFrame(columns=SECTOR_COLUMNS)

    grouped = (
        frame.groupby("sector", sort=True)
        .agg(actions=("budget", "size"), completed=("completed", "sum"), budget=("budget", "sum"))
        .reset_index()
    )
    grouped = grouped.sort_values(["budget", "sector"], ascending=[False, True], kind="stable")
    return grouped[SECTOR_COLUMNS].reset_index(drop=True)


def build_network_figure(graph: Graph, *, seed: int = 42) -> Figure:
    """Draw nodes and edges with the per-category and per-relationship styling.

    Layout is a seeded spring layout so the same graph renders the same way.
    """

    fig, ax = plt.subplots(figsize=(9, 6))
    if graph.is_empty:
        ax.text(0.5, 0.5, "No entities to display", ha="center", va="center", fontsize=14, color="#666")
        ax.axis("off")
        return fig

    G = nx.DiGraph()
    for node in graph.nodes:
        G.add_node(node.id, label=node.label, category=node.category.value)
    for edge in graph.edges:
        G.add_edge(edge.source, edge.target, relationship=edge.relationship_type.value)

    positions = nx.spring_layout(G, seed=seed)

    for category, style in NODE_STYLES.items():
        members = [node.id for node in graph.nodes if node.category == category]
        if not members:
            continue
        nx.draw_networkx_nodes(
            G,
            positions,
            nodelist=members,
            node_color=style.fill,
            edgecolors=style.border,
            linewidths=2,
            node_size=style.size * 20,
            ax=ax,
        )

    if graph.edges:
        nx.draw_networkx_edges(
            G,
            positions,
            edgelist=[(edge.source, edge.target) for edge in graph.edges],
            edge_color=[EDGE_STYLES[edge.relationship_type].color for edge in graph.edges],
            width=[EDGE_STYLES[edge.relationship_type].width for edge in graph.edges],
            arrows=True,
            arrowstyle="-|>",
            ax=ax,
        )

    nx.draw_networkx_labels(
        G,
        {node_id: (x, y - 0.08) for node_id, (x, y) in positions.items()},
        labels={node.id: node.label for node in graph.nodes},
        font_size=7,
        ax=ax,
    )

    handles = [
        Line2D([0], [0], marker="o", linestyle="", markerfacecolor=style.fill,
               markeredgecolor=style.border, markersize=8, label=category.value.title())
        for category, style in NODE_STYLES.items()
    ] + [
        Line2D([0], [0], color=style.color, linewidth=style.width, label=relationship.value.title())
        for relationship, style in EDGE_STYLES.items()
    ]
    ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.01, 1.0), fontsize=8, framealpha=0.9)
    ax.set_title("Relationships", fontsize=14, fontweight="bold")
    ax.axis("off")
    plt.tight_layout()
    return fig


MILESTONE_COLORS = {
    MilestoneStatus.COMPLETED: "#22c55e",
    MilestoneStatus.IN_PROGRESS: "#0ea5e9",
    MilestoneStatus.DELAYED: "#ef4444",
    MilestoneStatus.PENDING: "#94a3b8",
}


def build_timeline_figure(summary: TimelineSummary) -> Figure:
    """Milestones on a single horizontal axis, coloured by status."""

    fig, ax = plt.subplots(figsize=(9, 2.5))
    if summary.is_empty:
        ax.text(0.5, 0.5, "No milestones yet", ha="center", va="center", fontsize=12, color="#999")
        ax.axis("off")
        return fig

    xs = []
    for milestone in summary.milestones:
        position = summary.position(milestone.due_date)
        xs.append(0.5 if position is None else position)

    ax.hlines(0, 0, 1, color="#e5e7eb", linewidth=4, zorder=1)
    ax.scatter(
        xs,
        [0] * len(xs),
        c=[MILESTONE_COLORS[m.status] for m in summary.milestones],
        s=60,
        edgecolors="white",
        zorder=2,
    )
    if summary.range_start is not None and summary.range_end is not None:
        ax.text(0, -0.5, f"{summary.range_start:%b %d, %Y}", ha="left", fontsize=8, color="#666")
        ax.text(1, -0.5, f"{summary.range_end:%b %d, %Y}", ha="right", fontsize=8, color="#666")
    ax.set_xlim(-0.02, 1.02)
    ax.set_ylim(-1, 1)
    ax.set_title(f"Overall progress {summary.rounded_progress}%", fontsize=11)
    ax.axis("off")
    plt.tight_layout()
    return fig
