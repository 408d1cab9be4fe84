"""Shared desktop constants for labels and colours used across views."""

from __future__ import annotations

import flet as ft

from ..models import ActionStatus, MilestoneStatus
from ..services.importers import DataKind

ACTION_STATUS_COLORS: dict[ActionStatus, str] = {
    ActionStatus.COMPLETED: ft.Colors.GREEN,
    ActionStatus.IN_PROGRESS: ft.Colors.BLUE,
    ActionStatus.ON_HOLD: ft.Colors.AMBER,
    ActionStatus.NOT_STARTED: ft.Colors.BLUE_GREY,
    ActionStatus.CANCELLED: ft.Colors.RED,
}

MILESTONE_STATUS_ICONS: dict[MilestoneStatus, tuple[str, str]] = {
    MilestoneStatus.COMPLETED: (ft.Icons.CHECK_CIRCLE, ft.Colors.GREEN),
    MilestoneStatus.IN_PROGRESS: (ft.Icons.SCHEDULE, ft.Colors.BLUE),
    MilestoneStatus.DELAYED: (ft.Icons.ERROR_OUTLINE, ft.Colors.RED),
    MilestoneStatus.PENDING: (ft.Icons.SCHEDULE, ft.Colors.BLUE_GREY),
}

# Upload zones in display order: title, help text, icon.
IMPORT_ZONES: list[tuple[DataKind, str, str, str]] = [
    (DataKind.ACTION, "Actions", "Projects, initiatives and their timelines", ft.Icons.ASSIGNMENT),
    (DataKind.ACTOR, "Actors", "Stakeholders and organisations", ft.Icons.GROUPS),
    (DataKind.ASSET, "Assets", "Funding, infrastructure and other resources", ft.Icons.INVENTORY_2),
    (DataKind.CONNECTION, "Connections", "Relationships between entities", ft.Icons.HUB),
]
