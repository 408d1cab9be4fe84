"""Data import view: one upload zone per data kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import flet as ft

from ...services.importers import DataKind, ImportResult
from .. import controllers
from ..components import build_app_bar, build_card, build_main_layout
from ..constants import IMPORT_ZONES

if TYPE_CHECKING:
    from ..context import AppContext


def _outcome_banner(result: Optional[ImportResult]) -> ft.Control:
    if result is None:
        return ft.Container(height=0)
    icon = ft.Icons.CHECK_CIRCLE if result.success else ft.Icons.ERROR
    color = ft.Colors.GREEN if result.success else ft.Colors.RED
    return ft.Container(
        content=ft.Row(
            [
                ft.Icon(icon, color=color, size=18),
                ft.Text(result.message, color=color, expand=True),
            ],
            spacing=8,
        ),
        padding=8,
        border=ft.border.all(1, color),
        border_radius=6,
    )


def _zone_card(ctx: AppContext, page: ft.Page, kind: DataKind, title: str, blurb: str, icon: str) -> ft.Card:
    body = ft.Column(
        controls=[
            ft.Text(blurb, color=ft.Colors.ON_SURFACE_VARIANT),
            _outcome_banner(ctx.import_results.get(kind)),
        ],
        spacing=12,
    )
    return build_card(
        title,
        body,
        icon=icon,
        actions=[
            ft.TextButton(
                "Download template",
                icon=ft.Icons.DOWNLOAD,
                on_click=lambda _, k=kind: controllers.start_template_download(ctx, page, k),
            ),
            ft.FilledButton(
                f"Import {title.lower()}",
                icon=ft.Icons.UPLOAD_FILE,
                on_click=lambda _, k=kind: controllers.start_import(ctx, page, k),
            ),
        ],
    )


def _imported_summary(ctx: AppContext, page: ft.Page) -> ft.Card:
    counts = ctx.store.imported().counts()
    rows: list[ft.Control] = [
        ft.Row(
            [ft.Text(name.title()), ft.Text(str(count), weight=ft.FontWeight.BOLD)],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )
        for name, count in counts.items()
    ]
    if not any(counts.values()):
        rows.append(ft.Text("Nothing imported yet.", color=ft.Colors.ON_SURFACE_VARIANT))

    return build_card(
        "Imported Data",
        ft.Column(rows, spacing=6),
        actions=[
            ft.OutlinedButton(
                "Clear imported data",
                icon=ft.Icons.DELETE_SWEEP,
                disabled=not any(counts.values()),
                on_click=lambda _: controllers.clear_imported(ctx, page),
            ),
        ],
    )


def build_data_import_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the data import view."""

    zones = ft.ResponsiveRow(
        controls=[
            ft.Container(
                content=_zone_card(ctx, page, kind, title, blurb, icon),
                col={"sm": 12, "md": 6},
            )
            for kind, title, blurb, icon in IMPORT_ZONES
        ],
        run_spacing=16,
        spacing=16,
    )

    guidance = ft.Text(
        "Import actions, actors and assets before connections: a connection only "
        "appears in the network when both of its endpoint ids exist.",
        size=12,
        color=ft.Colors.ON_SURFACE_VARIANT,
    )

    content = ft.Column(
        controls=[
            ft.Text("Data Import", size=24, weight=ft.FontWeight.BOLD),
            guidance,
            ft.Container(height=16),
            zones,
            ft.Container(height=16),
            _imported_summary(ctx, page),
        ],
        spacing=0,
        scroll=ft.ScrollMode.AUTO,
        expand=True,
    )

    app_bar = build_app_bar(ctx, "Data Import", page)
    main_layout = build_main_layout(page, "/data-import", content)

    return ft.View(
        route="/data-import",
        appbar=app_bar,
        controls=main_layout,
        padding=0,
    )
