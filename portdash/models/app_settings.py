"""Global connection settings model."""

from typing import Optional
from sqlmodel import SQLModel, Field

DEFAULT_HOST = "192.168.1.100"

# Always 1 - singleton row
SETTINGS_ID = 1


class AppSettings(SQLModel, table=True):
    """Default host and scheme used by services without overrides."""

    __tablename__ = "AppSettings"

    id: Optional[int] = Field(default=SETTINGS_ID, primary_key=True)

    host: str = Field(default=DEFAULT_HOST)  # May be empty
    useHTTPS: bool = Field(default=False)
