"""Enumerations shared by the portfolio entities.

CSV cells are never cast straight into these types; ``parse_enum`` maps the known
literal values and hands back the caller's default for anything else.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class ActionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"


class ActorType(str, Enum):
    GOVERNMENT = "government"
    PRIVATE_SECTOR = "private_sector"
    CIVIL_SOCIETY = "civil_society"
    ACADEMIC = "academic"
    COMMUNITY = "community"
    INTERNATIONAL = "international"


class AssetType(str, Enum):
    FUNDING = "funding"
    INFRASTRUCTURE = "infrastructure"
    DATA = "data"
    KNOWLEDGE = "knowledge"
    NETWORK = "network"
    TECHNOLOGY = "technology"


class Availability(str, Enum):
    AVAILABLE = "available"
    LIMITED = "limited"
    UNAVAILABLE = "unavailable"


class EntityKind(str, Enum):
    """Entity categories a connection endpoint (or graph node) can belong to."""

    ACTION = "action"
    ACTOR = "actor"
    ASSET = "asset"


class RelationshipType(str, Enum):
    DEPENDENCY = "dependency"
    SYNERGY = "synergy"
    CONFLICT = "conflict"
    SUPPORT = "support"


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    DELAYED = "delayed"


class ImpactType(str, Enum):
    DIRECT = "direct"
    INDIRECT = "indirect"
    CO_BENEFIT = "co-benefit"


class Timeframe(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


def parse_enum(enum_cls: Type[E], raw: Optional[str], default: E) -> E:
    """Return the member of ``enum_cls`` whose value equals ``raw`` (trimmed).

    Matching is exact and case-sensitive, like the CSV column names. Missing,
    blank, or unknown values yield ``default``.
    """

    if raw is None:
        return default
    value = raw.strip()
    if not value:
        return default
    for member in enum_cls:
        if member.value == value:
            return member
    return default
