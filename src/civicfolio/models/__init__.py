"""Portfolio domain model exports."""

from .action import Action, ActionTimeline, Milestone
from .actor import Actor, ContactInfo
from .asset import Asset
from .connection import Connection
from .enums import (
    ActionStatus,
    ActorType,
    AssetType,
    Availability,
    EntityKind,
    ImpactType,
    MilestoneStatus,
    RelationshipType,
    Timeframe,
    parse_enum,
)
from .impact import Impact
from .portfolio import ImportBatch, Portfolio, PortfolioMeta

__all__ = [
    "Action",
    "ActionStatus",
    "ActionTimeline",
    "Actor",
    "ActorType",
    "Asset",
    "AssetType",
    "Availability",
    "Connection",
    "ContactInfo",
    "EntityKind",
    "Impact",
    "ImpactType",
    "ImportBatch",
    "Milestone",
    "MilestoneStatus",
    "Portfolio",
    "PortfolioMeta",
    "RelationshipType",
    "Timeframe",
    "parse_enum",
]
