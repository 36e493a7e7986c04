"""Page components for PortDash."""

from .dashboard import dashboard_page
from .settings import settings_page

__all__ = [
    "dashboard_page",
    "settings_page",
]
