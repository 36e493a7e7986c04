"""Service category model."""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import SQLModel, Field


class ServiceCategory(SQLModel, table=True):
    """Named group for services.

    Services point at a category by name, not by id.
    """

    __tablename__ = "ServiceCategory"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)  # Unique ignoring case, enforced by the registry

    # Timestamps
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
