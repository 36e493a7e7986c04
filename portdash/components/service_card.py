"""Service row and group card components for the dashboard."""

import reflex as rx

from ..state.services_state import ServicesState, ServiceGroupRow, ServiceRow


def service_item(service: ServiceRow) -> rx.Component:
    """One service: icon, name and URL, with open/edit/delete actions."""
    return rx.hstack(
        rx.hstack(
            rx.box(
                rx.icon(service.symbol, size=20),
                padding="2",
                border_radius="full",
                background="#DBEAFE",
                color="#2563EB",
            ),
            rx.vstack(
                rx.text(service.name, weight="bold", size="3"),
                rx.text(
                    service.url,
                    size="1",
                    color=rx.cond(service.openable, "gray", "red"),
                ),
                spacing="0",
                align="start",
            ),
            spacing="3",
            align="center",
            cursor="pointer",
            on_click=ServicesState.open_service(service.id),
        ),
        rx.spacer(),
        rx.hstack(
            rx.button(
                rx.icon("external-link", size=14),
                variant="ghost",
                size="1",
                disabled=~service.openable,
                on_click=ServicesState.open_service(service.id),
            ),
            rx.button(
                rx.icon("pencil", size=14),
                variant="ghost",
                size="1",
                on_click=ServicesState.open_edit_form(service.id),
            ),
            rx.button(
                rx.icon("trash-2", size=14),
                variant="ghost",
                color_scheme="red",
                size="1",
                on_click=ServicesState.delete_service(service.id),
            ),
            spacing="1",
        ),
        width="100%",
        align="center",
        padding_y="2",
    )


def service_group_card(group: ServiceGroupRow) -> rx.Component:
    """Card listing the services of one category."""
    return rx.card(
        rx.vstack(
            rx.text(group.category, size="2", weight="medium", color="gray"),
            rx.divider(),
            rx.foreach(group.services, service_item),
            spacing="1",
            width="100%",
        ),
        padding="4",
        width="100%",
        style={
            "border": "1px solid #E5E7EB",
            "box_shadow": "0 1px 3px 0 rgba(0, 0, 0, 0.1)",
        },
    )


def empty_services_card() -> rx.Component:
    """Shown when no service exists yet."""
    return rx.card(
        rx.vstack(
            rx.icon("layers", size=40, color="gray"),
            rx.heading("No Services", size="4"),
            rx.text(
                "Add your first service, or open Settings to create your categories.",
                size="2",
                color="gray",
                text_align="center",
            ),
            spacing="2",
            align="center",
            padding="6",
        ),
        width="100%",
    )
