"""Navigation and routing for Flet desktop app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

import flet as ft

if TYPE_CHECKING:
    from .context import AppContext

from ..devtools import dev_log
from ..logging_config import get_logger

logger = get_logger(__name__)

# View builder type
ViewBuilder = Callable[["AppContext", ft.Page], ft.View]

DEFAULT_ROUTE = "/dashboard"


class Router:
    """Handles routing and navigation for the Flet app."""

    def __init__(self, page: ft.Page, context: AppContext):
        """Initialize router with page and context."""
        self.page = page
        self.context = context
        self.routes: Dict[str, ViewBuilder] = {}

    def register(self, route: str, builder: ViewBuilder) -> None:
        """Register a route with its view builder."""
        logger.debug(f"Registering route: {route}")
        self.routes[route] = builder

    def route_change(self, e: ft.RouteChangeEvent) -> None:
        """Handle route change events."""
        self.show(e.route or "/")

    def show(self, route: str) -> None:
        """Build and display the view for ``route``; unknown routes fall back to the dashboard."""
        logger.info(f"Route change requested: {route}")

        if route not in self.routes:
            logger.warning(f"Route not in registered routes: {route}, defaulting to dashboard")
            route = DEFAULT_ROUTE

        builder = self.routes.get(route)
        if not builder:
            logger.error(f"No builder found for route: {route}")
            return

        try:
            logger.debug(f"Building view for route: {route}")
            view = builder(self.context, self.page)
            if self.page.views:
                self.page.views[-1] = view
            else:
                self.page.views.append(view)
            self.page.update()
            logger.info(f"Successfully loaded view for route: {route}")
        except Exception as ex:
            logger.error(f"Failed to build view for route {route}: {ex}", exc_info=True)
            dev_log(self.context.config, "Route load failed", exc=ex, context={"route": route})
            self.show_error(f"Error loading view: {ex}")

    def view_pop(self, e: ft.ViewPopEvent) -> None:
        """Handle back button navigation."""
        self.page.views.pop()
        if not self.page.views:
            return
        top_view = self.page.views[-1]
        self.page.go(top_view.route)

    def show_error(self, message: str) -> None:
        """Surface a failure without leaving the current view."""
        self.page.snack_bar = ft.SnackBar(content=ft.Text(message))
        self.page.snack_bar.open = True
        self.page.update()
