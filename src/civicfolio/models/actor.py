"""Actor (stakeholder) models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from .enums import ActorType


class ContactInfo(SQLModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class Actor(SQLModel):
    """A stakeholder or organisation taking part in the portfolio."""

    id: str
    name: str
    type: ActorType = ActorType.CIVIL_SOCIETY
    sector: str = "General"
    role: str = "Stakeholder"
    contact_info: Optional[ContactInfo] = None
    # 1-10 scales; the range is advisory only.
    capacity: int = 5
    influence: int = 5
    created_at: datetime
    updated_at: datetime
