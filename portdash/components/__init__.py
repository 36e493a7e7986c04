"""Reusable UI components for PortDash."""

from .layout import page_layout
from .service_card import service_group_card, empty_services_card
from .service_editor import service_editor_dialog
from .category_manager import category_manager

__all__ = [
    "page_layout",
    "service_group_card",
    "empty_services_card",
    "service_editor_dialog",
    "category_manager",
]
