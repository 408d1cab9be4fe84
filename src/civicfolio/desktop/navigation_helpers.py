"""Navigation metadata and helpers for the desktop app."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

import flet as ft


class PageLike(Protocol):
    """Minimal subset of `ft.Page` needed for navigation helpers."""

    def go(self, route: str) -> None: ...


@dataclass(frozen=True)
class NavigationDestination:
    """A navigation rail entry and the Ctrl+key shortcuts that open it."""

    route: str
    label: str
    icon: str
    selected_icon: str
    shortcut_keys: tuple[str, ...] = ()


NAVIGATION_DESTINATIONS: List[NavigationDestination] = [
    NavigationDestination(
        "/dashboard",
        "Dashboard",
        ft.Icons.DASHBOARD_OUTLINED,
        ft.Icons.DASHBOARD,
        shortcut_keys=("1",),
    ),
    NavigationDestination(
        "/data-import",
        "Data Import",
        ft.Icons.UPLOAD_FILE_OUTLINED,
        ft.Icons.UPLOAD_FILE,
        shortcut_keys=("2", "i"),
    ),
]


def nav_routes() -> list[str]:
    """List of routes represented in the navigation rail."""
    return [dest.route for dest in NAVIGATION_DESTINATIONS]


def route_for_index(selected_index: int) -> Optional[str]:
    """Return the route that corresponds to the selected navigation index."""
    if 0 <= selected_index < len(NAVIGATION_DESTINATIONS):
        return NAVIGATION_DESTINATIONS[selected_index].route
    return None


def index_for_route(route: str) -> int:
    """Index of ``route`` in the rail; unknown routes highlight the first entry."""
    routes = nav_routes()
    return routes.index(route) if route in routes else 0


def handle_navigation_selection(page: PageLike, selected_index: int) -> None:
    """Go to the route that was selected in the navigation rail."""
    if route := route_for_index(selected_index):
        page.go(route)


def resolve_shortcut_route(key: str, ctrl: bool, shift: bool) -> Optional[str]:
    """Map a Ctrl+key press to a route; Shift combinations are left alone."""
    if not ctrl or shift:
        return None
    pressed = (key or "").lower()
    for dest in NAVIGATION_DESTINATIONS:
        if pressed in dest.shortcut_keys:
            return dest.route
    return None


__all__ = [
    "NavigationDestination",
    "NAVIGATION_DESTINATIONS",
    "handle_navigation_selection",
    "index_for_route",
    "nav_routes",
    "resolve_shortcut_route",
    "route_for_index",
]
