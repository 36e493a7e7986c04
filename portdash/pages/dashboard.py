"""Dashboard page: services grouped by category."""

import reflex as rx

from ..state.services_state import ServicesState
from ..components.layout import page_layout
from ..components.service_card import service_group_card, empty_services_card
from ..components.service_editor import service_editor_dialog


def services_toolbar() -> rx.Component:
    return rx.hstack(
        rx.heading("Services", size="6"),
        rx.spacer(),
        rx.button(
            rx.icon("refresh-cw", size=16),
            variant="outline",
            size="2",
            on_click=ServicesState.load_services,
            loading=ServicesState.is_loading,
        ),
        rx.button(
            rx.icon("plus", size=16),
            "Add Service",
            size="2",
            on_click=ServicesState.open_new_form,
        ),
        spacing="2",
        width="100%",
        align="center",
        padding_bottom="2",
    )


def dashboard_page() -> rx.Component:
    """Main dashboard page."""
    return page_layout(
        rx.vstack(
            services_toolbar(),
            rx.cond(
                ServicesState.total_services > 0,
                rx.vstack(
                    rx.foreach(ServicesState.groups, service_group_card),
                    spacing="4",
                    width="100%",
                ),
                empty_services_card(),
            ),
            service_editor_dialog(),
            spacing="4",
            width="100%",
        )
    )
