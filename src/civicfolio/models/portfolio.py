"""Portfolio aggregate root and import batches."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from sqlmodel import Field, SQLModel

from .action import Action
from .actor import Actor
from .asset import Asset
from .connection import Connection
from .impact import Impact


class PortfolioMeta(SQLModel):
    created_at: datetime
    updated_at: datetime
    created_by: str = ""
    tags: list[str] = Field(default_factory=list)
    sector: str = ""
    region: str = ""


class Portfolio(SQLModel):
    """Owns every entity collection for one organisation/session."""

    id: str
    name: str
    description: str = ""
    actions: list[Action] = Field(default_factory=list)
    actors: list[Actor] = Field(default_factory=list)
    assets: list[Asset] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    impacts: list[Impact] = Field(default_factory=list)
    meta: PortfolioMeta

    def entity_ids(self) -> set[str]:
        """Ids of every action, actor and asset (the graph node ids)."""

        ids = {action.id for action in self.actions}
        ids.update(actor.id for actor in self.actors)
        ids.update(asset.id for asset in self.assets)
        return ids


@dataclass(slots=True)
class ImportBatch:
    """Entities produced by one or more imports, grouped per collection."""

    actions: list[Action] = field(default_factory=list)
    actors: list[Actor] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    def extend(self, other: "ImportBatch") -> None:
        self.actions.extend(other.actions)
        self.actors.extend(other.actors)
        self.assets.extend(other.assets)
        self.connections.extend(other.connections)

    def counts(self) -> dict[str, int]:
        return {
            "actions": len(self.actions),
            "actors": len(self.actors),
            "assets": len(self.assets),
            "connections": len(self.connections),
        }

    def is_empty(self) -> bool:
        return not any(self.counts().values())
