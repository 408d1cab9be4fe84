"""Layout components for the desktop app."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import flet as ft

if TYPE_CHECKING:
    from ..context import AppContext

from .. import controllers
from ..navigation_helpers import NAVIGATION_DESTINATIONS, index_for_route


def build_app_bar(ctx: AppContext, title: str, page: ft.Page) -> ft.AppBar:
    """Build the app bar with the portfolio name and a refresh action."""

    def _refresh(_e):
        """Refresh the current view."""
        current_route = getattr(page, "route", "/dashboard") or "/dashboard"
        page.go(current_route)
        page.update()

    portfolio = ctx.store.current()
    actions: List[ft.Control] = [
        ft.Chip(
            label=ft.Text(portfolio.name),
            leading=ft.Icon(ft.Icons.FOLDER_SPECIAL),
        ),
        ft.IconButton(
            icon=ft.Icons.REFRESH,
            tooltip="Refresh",
            on_click=_refresh,
        ),
    ]

    return ft.AppBar(
        leading=ft.Icon(ft.Icons.HUB),
        title=ft.Text(title, size=20, weight=ft.FontWeight.BOLD),
        center_title=False,
        bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
        actions=actions,
    )


def build_navigation_rail(page: ft.Page, current_route: str) -> ft.NavigationRail:
    """Build the navigation rail with route selection."""

    def route_changed(e):
        """Keep navigation logic isolated in helpers."""
        controllers.handle_nav_selection(page, e.control.selected_index)

    return ft.NavigationRail(
        selected_index=index_for_route(current_route),
        label_type=ft.NavigationRailLabelType.ALL,
        min_width=100,
        min_extended_width=200,
        group_alignment=-0.9,
        destinations=[
            ft.NavigationRailDestination(
                icon=dest.icon,
                selected_icon=dest.selected_icon,
                label=dest.label,
            )
            for dest in NAVIGATION_DESTINATIONS
        ],
        on_change=route_changed,
    )


def build_main_layout(page: ft.Page, current_route: str, content: ft.Control) -> List[ft.Control]:
    """Build the main layout with navigation rail and content."""

    nav_rail = build_navigation_rail(page, current_route)

    content_column = ft.Column(
        [
            ft.Container(content=content, expand=True, padding=20),
        ],
        spacing=0,
        expand=True,
    )

    return [
        ft.Row(
            [
                nav_rail,
                ft.VerticalDivider(width=1),
                ft.Container(
                    content=content_column,
                    expand=True,
                ),
            ],
            spacing=0,
            expand=True,
        )
    ]
