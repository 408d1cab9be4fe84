"""Typed, weighted relationships between portfolio entities."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel

from .enums import EntityKind, RelationshipType


class Connection(SQLModel):
    """Link between two entities.

    ``source_id``/``target_id`` are foreign keys by convention only; they are
    checked against the portfolio when the relationship graph is built.
    """

    id: str
    source_id: str = ""
    source_type: EntityKind = EntityKind.ACTION
    target_id: str = ""
    target_type: EntityKind = EntityKind.ACTOR
    relationship_type: RelationshipType = RelationshipType.SYNERGY
    strength: int = 5
    description: Optional[str] = None
    created_at: datetime
