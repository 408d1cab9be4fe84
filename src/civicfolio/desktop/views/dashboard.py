"""Dashboard view implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ...services.graph import build_graph
from ...services.reports import compute_metrics, sector_breakdown
from ...services.timeline import action_progress, derive_timeline
from ...utils import format_currency, format_date, format_date_range, truncate_text
from ..charts import ChartImage, render_network_safely, render_timeline_safely
from ..components import (
    build_app_bar,
    build_card,
    build_main_layout,
    build_progress_bar,
    build_stat_card,
    empty_state,
)
from ..constants import ACTION_STATUS_COLORS, MILESTONE_STATUS_ICONS

if TYPE_CHECKING:
    from ..context import AppContext


def _chart_panel(image: ChartImage, height: int) -> ft.Control:
    if image.available:
        return ft.Image(src=str(image.path), height=height, fit=ft.ImageFit.CONTAIN)
    return ft.Column(
        controls=[
            ft.Row(
                [
                    ft.Icon(ft.Icons.WARNING_AMBER, color=ft.Colors.AMBER),
                    ft.Text("Visualization unavailable", weight=ft.FontWeight.BOLD),
                ],
                spacing=8,
            ),
            ft.Text(image.error or "", size=12, color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        spacing=4,
    )


def build_dashboard_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the dashboard view."""

    portfolio = ctx.store.current()
    metrics = compute_metrics(portfolio)

    stat_cards = ft.Row(
        controls=[
            ft.Container(
                content=build_stat_card(
                    "Actions",
                    str(metrics.total_actions),
                    icon=ft.Icons.BAR_CHART,
                    color=ft.Colors.BLUE,
                    subtitle=(
                        f"{metrics.completed_actions} completed, "
                        f"{metrics.in_progress_actions} in progress"
                    ),
                ),
                expand=True,
            ),
            ft.Container(
                content=build_stat_card(
                    "Actors",
                    str(metrics.total_actors),
                    icon=ft.Icons.GROUPS,
                    color=ft.Colors.GREEN,
                    subtitle=f"{metrics.cross_sector_collaborations} cross-sector collaborations",
                ),
                expand=True,
            ),
            ft.Container(
                content=build_stat_card(
                    "Assets",
                    str(metrics.total_assets),
                    icon=ft.Icons.APARTMENT,
                    color=ft.Colors.AMBER,
                    subtitle=f"{format_currency(metrics.total_funding)} total funding",
                ),
                expand=True,
            ),
        ],
        spacing=16,
    )

    secondary_stats = ft.Row(
        controls=[
            ft.Container(
                content=build_stat_card(
                    "Synergistic Solutions",
                    str(metrics.synergistic_solutions),
                    icon=ft.Icons.CALL_SPLIT,
                    color=ft.Colors.TEAL,
                ),
                expand=True,
            ),
            ft.Container(
                content=build_stat_card(
                    "Average Impact Score",
                    f"{metrics.average_impact_score}/10",
                    icon=ft.Icons.TRENDING_UP,
                    color=ft.Colors.PURPLE,
                ),
                expand=True,
            ),
        ],
        spacing=16,
    )

    # Relationships network
    graph = build_graph(portfolio)
    network_card = build_card("Relationships", _chart_panel(render_network_safely(graph), 360))

    # Timeline
    summary = derive_timeline(portfolio)
    timeline_rows: list[ft.Control] = [
        build_progress_bar(summary.overall_progress, label="Overall Progress"),
    ]
    if summary.is_empty:
        timeline_rows.append(empty_state("No milestones yet"))
    else:
        timeline_rows.append(_chart_panel(render_timeline_safely(summary), 140))
        timeline_rows.append(
            ft.Text(
                format_date_range(summary.range_start, summary.range_end),
                size=12,
                color=ft.Colors.ON_SURFACE_VARIANT,
            )
        )
        timeline_rows.append(ft.Text("Recent Milestones", size=16, weight=ft.FontWeight.BOLD))
        for milestone in summary.recent(5):
            icon, color = MILESTONE_STATUS_ICONS[milestone.status]
            timeline_rows.append(
                ft.ListTile(
                    leading=ft.Icon(icon, color=color),
                    title=ft.Text(milestone.title),
                    subtitle=ft.Text(f"{milestone.action_name} · {format_date(milestone.due_date)}"),
                    trailing=ft.Text(milestone.status.value, color=color),
                )
            )
    timeline_card = build_card("Timeline", ft.Column(timeline_rows, spacing=8))

    # Actions with their own milestone progress
    progress = action_progress(portfolio)
    action_rows: list[ft.Control] = []
    for action in portfolio.actions:
        action_rows.append(
            ft.ListTile(
                title=ft.Text(action.name),
                subtitle=ft.Text(truncate_text(action.description, 90)),
                trailing=ft.Column(
                    [
                        ft.Text(
                            action.status.value.replace("_", " "),
                            color=ACTION_STATUS_COLORS[action.status],
                        ),
                        ft.Text(f"{progress[action.id]}%", size=12),
                    ],
                    spacing=2,
                    horizontal_alignment=ft.CrossAxisAlignment.END,
                ),
            )
        )
    if not action_rows:
        action_rows.append(empty_state("No actions yet. Import some from Data Import."))
    actions_card = build_card("Actions", ft.Column(action_rows, spacing=0))

    # Sector breakdown
    sectors = sector_breakdown(portfolio)
    sector_table = ft.DataTable(
        columns=[
            ft.DataColumn(ft.Text("Sector")),
            ft.DataColumn(ft.Text("Actions"), numeric=True),
            ft.DataColumn(ft.Text("Completed"), numeric=True),
            ft.DataColumn(ft.Text("Budget"), numeric=True),
        ],
        rows=[
            ft.DataRow(
                cells=[
                    ft.DataCell(ft.Text(str(row.sector))),
                    ft.DataCell(ft.Text(str(int(row.actions)))),
                    ft.DataCell(ft.Text(str(int(row.completed)))),
                    ft.DataCell(ft.Text(format_currency(row.budget))),
                ]
            )
            for row in sectors.itertuples(index=False)
        ],
    )
    sectors_card = build_card("Sectors", sector_table)

    content = ft.Column(
        controls=[
            ft.Text(portfolio.name, size=24, weight=ft.FontWeight.BOLD),
            ft.Text(portfolio.description, color=ft.Colors.ON_SURFACE_VARIANT),
            ft.Container(height=16),
            stat_cards,
            ft.Container(height=16),
            secondary_stats,
            ft.Container(height=16),
            ft.ResponsiveRow(
                controls=[
                    ft.Container(content=network_card, col={"sm": 12, "md": 7}),
                    ft.Container(content=timeline_card, col={"sm": 12, "md": 5}),
                ],
                run_spacing=16,
                spacing=16,
            ),
            ft.Container(height=16),
            actions_card,
            ft.Container(height=16),
            sectors_card,
        ],
        spacing=0,
        scroll=ft.ScrollMode.AUTO,
        expand=True,
    )

    app_bar = build_app_bar(ctx, "Dashboard", page)
    main_layout = build_main_layout(page, "/dashboard", content)

    return ft.View(
        route="/dashboard",
        appbar=app_bar,
        controls=main_layout,
        padding=0,
    )
