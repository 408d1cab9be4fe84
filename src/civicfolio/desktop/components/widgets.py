"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional

import flet as ft


def build_card(
    title: str,
    content: ft.Control,
    actions: Optional[list[ft.Control]] = None,
    icon: Optional[str] = None,
) -> ft.Card:
    """Card with a bold title row, a divider and padded content; ``actions`` sit bottom-right."""

    title_row: list[ft.Control] = [ft.Text(title, size=18, weight=ft.FontWeight.BOLD)]
    if icon:
        title_row.insert(0, ft.Icon(icon, size=22, color=ft.Colors.PRIMARY))

    sections: list[ft.Control] = [
        ft.Container(
            content=ft.Row(title_row, spacing=10),
            padding=ft.padding.only(left=16, right=16, top=16, bottom=8),
        ),
        ft.Divider(height=1),
        ft.Container(content=content, padding=16),
    ]
    if actions:
        sections.append(
            ft.Container(
                content=ft.Row(actions, alignment=ft.MainAxisAlignment.END, wrap=True),
                padding=ft.padding.only(left=16, right=16, bottom=16),
            )
        )

    return ft.Card(content=ft.Column(sections, spacing=0), elevation=2)


def build_stat_card(
    label: str,
    value: str,
    icon: Optional[str] = None,
    color: Optional[str] = None,
    subtitle: Optional[str] = None,
) -> ft.Card:
    """Build a statistic card."""

    value_text = ft.Text(value, size=32, weight=ft.FontWeight.BOLD, color=color)
    label_text = ft.Text(label, size=14, color=ft.Colors.ON_SURFACE_VARIANT)

    content_column = ft.Column(
        [value_text, label_text],
        spacing=4,
        horizontal_alignment=ft.CrossAxisAlignment.START,
    )
    if subtitle:
        content_column.controls.append(
            ft.Text(subtitle, size=12, color=ft.Colors.ON_SURFACE_VARIANT)
        )

    card_content: ft.Control = content_column
    if icon:
        card_content = ft.Row(
            [
                ft.Icon(icon, size=40, color=color or ft.Colors.PRIMARY),
                ft.Container(width=16),
                content_column,
            ],
            alignment=ft.MainAxisAlignment.START,
        )

    return ft.Card(
        content=ft.Container(content=card_content, padding=20),
        elevation=2,
    )


def build_progress_bar(percent: float, label: Optional[str] = None, color: Optional[str] = None) -> ft.Column:
    """Build a labeled percentage bar; ``percent`` is clamped to 0-100."""

    clamped = max(0.0, min(float(percent), 100.0))
    bar_color = color or ft.Colors.PRIMARY

    label_row = ft.Row(
        [
            ft.Text(label or "", size=14),
            ft.Text(f"{round(clamped)}%", size=14, color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
    )

    return ft.Column(
        [
            label_row,
            ft.ProgressBar(
                value=clamped / 100,
                color=bar_color,
                bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
                height=8,
            ),
        ],
        spacing=4,
    )


def empty_state(message: str) -> ft.Container:
    """Simple empty-state placeholder."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )
