"""SQLModel database models for PortDash."""

from .app_settings import AppSettings
from .service_category import ServiceCategory
from .service import Service

__all__ = [
    "AppSettings",
    "ServiceCategory",
    "Service",
]
