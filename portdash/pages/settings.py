"""Settings page: default server options and categories."""

import reflex as rx

from ..state.settings_state import SettingsState
from ..components.layout import page_layout
from ..components.category_manager import category_manager


def default_server_card() -> rx.Component:
    """Default host and scheme, saved as they change."""
    return rx.card(
        rx.vstack(
            rx.heading("Default Server Options", size="4"),
            rx.text(
                "Used by services without their own host or scheme.",
                size="1",
                color="gray",
            ),
            rx.hstack(
                rx.text("Host/IP", size="2", width="120px"),
                rx.input(
                    placeholder="e.g. 192.168.1.2 or my.domain.com",
                    value=SettingsState.host,
                    on_change=SettingsState.set_host,
                    auto_capitalize="none",
                    auto_correct="off",
                    flex="1",
                ),
                spacing="3",
                width="100%",
                align="center",
            ),
            rx.cond(
                SettingsState.host.strip() == "",
                rx.callout(
                    "No default host: services without a host cannot be opened.",
                    icon="triangle-alert",
                    color="orange",
                    size="1",
                ),
            ),
            rx.hstack(
                rx.switch(
                    checked=SettingsState.use_https,
                    on_change=SettingsState.set_use_https,
                ),
                rx.text("Use HTTPS", size="2"),
                spacing="3",
                align="center",
            ),
            spacing="3",
            width="100%",
        ),
        padding="4",
        width="100%",
    )


def settings_page() -> rx.Component:
    """Settings page."""
    return page_layout(
        rx.vstack(
            rx.hstack(
                rx.link(
                    rx.button(
                        rx.icon("arrow-left", size=16),
                        "Done",
                        variant="ghost",
                        size="2",
                    ),
                    href="/",
                ),
                rx.heading("Settings", size="6"),
                spacing="3",
                align="center",
            ),
            default_server_card(),
            category_manager(),
            spacing="4",
            width="100%",
            on_mount=SettingsState.load_settings,
        )
    )
