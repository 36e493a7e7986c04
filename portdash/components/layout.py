"""Layout component for PortDash pages."""

import reflex as rx

from ..state.services_state import ServicesState


def header_bar() -> rx.Component:
    """Header bar with title and navigation buttons."""
    return rx.hstack(
        rx.hstack(
            rx.link(
                rx.heading("PortDash", size="5", weight="bold"),
                href="/",
                underline="none",
                color_scheme="gray",
                high_contrast=True,
            ),
            rx.badge(
                f"{ServicesState.total_services} services",
                color="blue",
            ),
            spacing="3",
            align="center",
        ),
        rx.spacer(),
        rx.hstack(
            rx.color_mode.button(size="2", variant="outline"),
            rx.link(
                rx.button(
                    rx.icon("settings", size=16),
                    "Settings",
                    variant="outline",
                    size="2",
                ),
                href="/settings",
            ),
            spacing="2",
        ),
        width="100%",
        padding="4",
        background=rx.color("gray", 1),
        border_bottom="1px solid var(--gray-5)",
        position="sticky",
        top="0",
        z_index="100",
    )


def page_layout(content: rx.Component) -> rx.Component:
    """Main page layout with header."""
    return rx.vstack(
        header_bar(),
        rx.box(
            content,
            padding="4",
            width="100%",
            max_width="1000px",
            margin_x="auto",
        ),
        width="100%",
        min_height="100vh",
        background=rx.color("gray", 2),
        spacing="0",
        on_mount=ServicesState.load_services,
    )
