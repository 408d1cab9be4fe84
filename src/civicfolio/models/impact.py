"""Impact records attached to actions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel

from .enums import ImpactType, Timeframe


class Impact(SQLModel):
    id: str
    action_id: str
    type: ImpactType = ImpactType.DIRECT
    description: str = ""
    magnitude: int = 5
    timeframe: Timeframe = Timeframe.MEDIUM
    metrics: Optional[dict[str, float]] = None
    created_at: datetime
