"""Main Flet desktop application entry point."""

from __future__ import annotations

import time
from typing import Optional

import flet as ft

from ..config import BaseConfig
from ..devtools import dev_log
from ..logging_config import session_log_path, setup_logging
from . import controllers
from .context import create_app_context
from .navigation import Router
from .views.dashboard import build_dashboard_view
from .views.data_import import build_data_import_view

ROUTE_BUILDERS = {
    "/": build_dashboard_view,
    "/dashboard": build_dashboard_view,
    "/data-import": build_data_import_view,
}


def build_router(ctx, page: ft.Page) -> Router:
    """Create a router with every desktop route registered."""

    router = Router(page, ctx)
    for route, builder in ROUTE_BUILDERS.items():
        router.register(route, builder)
    return router


def main(page: ft.Page, config: Optional[BaseConfig] = None) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context(config)

    # Initialize structured logging
    logger = setup_logging(ctx.config)
    logger.info("CivicFolio desktop application starting")

    def on_page_close(_):
        slp = session_log_path()
        if slp:
            logger.info(f"Debug session log saved to: {slp}")
            print(f"\n=== Debug log saved to: {slp} ===\n")

    page.on_close = on_page_close

    ctx.page = page
    page.title = "CivicFolio (DEV)" if ctx.dev_mode else "CivicFolio"
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": ctx.config.DATA_DIR})
        page.banner = ft.Banner(
            bgcolor=ft.Colors.AMBER_50,
            leading=ft.Icon(ft.Icons.BUG_REPORT, color=ft.Colors.AMBER_700),
            content=ft.Text("Developer mode: errors will be printed to the console."),
            actions=[ft.TextButton("Hide", on_click=lambda e: setattr(page.banner, "open", False))],
            open=True,
        )
    page.theme_mode = ctx.theme_mode
    page.padding = 0
    page.window_width = 1280
    page.window_height = 800
    page.window_min_width = 1024
    page.window_min_height = 600

    # Shared file picker overlay for imports and template downloads
    controllers.attach_file_picker(ctx, page)

    router = build_router(ctx, page)
    page.on_route_change = router.route_change
    page.on_view_pop = router.view_pop

    # Throttle repeated identical Flet error events
    _last_err_msg: str | None = None
    _last_err_ts: float = 0.0
    _suppress_count: int = 0

    def _on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        nonlocal _last_err_msg, _last_err_ts, _suppress_count
        msg = getattr(e, "data", None) or "<no-data>"
        now = time.time()
        if _last_err_msg == msg and (now - _last_err_ts) < 0.5:
            _suppress_count += 1
            _last_err_ts = now
            if _suppress_count % 100 == 0:
                logger.warning(
                    "Repeated Flet errors suppressed",
                    extra={"event": "error_suppressed", "error_message": msg, "suppressed": _suppress_count},
                )
            return
        _last_err_msg = msg
        _last_err_ts = now
        _suppress_count = 0
        logger.error("Flet page error", extra={"event": "error", "data": msg})
        router.show_error(f"UI error: {msg}")

    page.on_error = _on_error

    def handle_shortcuts(e: ft.KeyboardEvent):
        """Global keyboard shortcuts for quick navigation."""
        controllers.handle_shortcut(page, e.key, e.ctrl, e.shift)

    page.on_keyboard_event = handle_shortcuts

    page.go("/dashboard")


def run() -> None:
    """Launch the desktop window."""

    ft.app(target=main)


if __name__ == "__main__":
    run()
