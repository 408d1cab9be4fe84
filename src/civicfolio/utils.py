"""Small shared helpers: id generation, clocks and display formatting."""

from __future__ import annotations

import math
import uuid
from datetime import date, datetime, timezone
from typing import Iterable

from .models.enums import MilestoneStatus


def generate_id() -> str:
    """Return a fresh opaque identifier for an imported entity."""

    return uuid.uuid4().hex


def utcnow() -> datetime:
    """Timezone-aware current time; ``isoformat()`` gives the ISO-8601 stamp."""

    return datetime.now(timezone.utc)


def today() -> date:
    return utcnow().date()


def format_currency(amount: float) -> str:
    """Format as whole US dollars, e.g. ``$2,500,000``."""

    value = float(amount or 0)
    whole = math.floor(abs(value) + 0.5)
    sign = "-" if value < 0 and whole else ""
    return f"{sign}${whole:,}"


def format_date(value: date | datetime) -> str:
    """Format like ``Mar 15, 2024``."""

    return f"{value:%b} {value.day}, {value.year}"


def format_date_range(start: date, end: date) -> str:
    if start.year == end.year:
        return f"{start:%b} {start.day} - {format_date(end)}"
    return f"{format_date(start)} - {format_date(end)}"


def calculate_progress(statuses: Iterable[MilestoneStatus]) -> int:
    """Rounded percentage of completed milestones; 0 when there are none."""

    items = list(statuses)
    if not items:
        return 0
    completed = sum(1 for status in items if status == MilestoneStatus.COMPLETED)
    return math.floor(completed / len(items) * 100 + 0.5)


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
