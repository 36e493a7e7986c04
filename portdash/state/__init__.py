"""State classes for PortDash Reflex app."""

from .services_state import ServicesState
from .settings_state import SettingsState

__all__ = [
    "ServicesState",
    "SettingsState",
]
