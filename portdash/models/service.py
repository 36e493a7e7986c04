"""Service model - a bookmarked network service."""

from datetime import datetime, timezone
from typing import Optional
from sqlmodel import SQLModel, Field


class Service(SQLModel, table=True):
    """Self-hosted service reachable at host:port."""

    __tablename__ = "Service"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str  # e.g., "Plex", "Service :8080"
    port: int  # 1-65535

    # Per-service overrides, None = use AppSettings
    customHost: Optional[str] = None  # e.g., "nas.local"
    customUseHTTPS: Optional[bool] = None

    symbolName: Optional[str] = None  # Lucide icon name, e.g., "server"
    category: Optional[str] = Field(default=None, index=True)  # ServiceCategory.name

    # Timestamps
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
