"""Runtime configuration for PortDash."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_URL = "sqlite:///portdash.db"


def get_db_url() -> str:
    """Database URL from the environment, or the local SQLite file."""
    return os.environ.get("DATABASE_URL", DEFAULT_DB_URL)
