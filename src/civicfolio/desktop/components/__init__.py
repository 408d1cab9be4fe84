"""Reusable UI components for the desktop app."""

from .layout import build_app_bar, build_main_layout, build_navigation_rail
from .widgets import build_card, build_progress_bar, build_stat_card, empty_state

__all__ = [
    "build_app_bar",
    "build_navigation_rail",
    "build_main_layout",
    "build_card",
    "build_stat_card",
    "build_progress_bar",
    "empty_state",
]
