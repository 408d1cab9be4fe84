"""Asset (resource or capability) models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import AssetType, Availability


class Asset(SQLModel):
    """A resource the portfolio can draw on: funding, data, infrastructure..."""

    id: str
    name: str
    type: AssetType = AssetType.KNOWLEDGE
    description: str = ""
    value: float = Field(default=0.0, ge=0)
    availability: Availability = Availability.AVAILABLE
    owner: Optional[str] = None
    location: Optional[str] = None
    created_at: datetime
    updated_at: datetime
